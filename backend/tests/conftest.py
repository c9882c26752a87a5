"""Root conftest — temporary SPA build + FastAPI test client.

Invariants:
    - Every test gets a fresh asset tree under tmp_path (no real dist/ needed)
    - Settings built explicitly, .env file ignored

Design Decisions:
    - httpx ASGITransport: in-process requests, no socket bound
    - ASGITransport does not run the lifespan: startup tests drive
      app.router.lifespan_context directly
"""

import pytest
from httpx import ASGITransport, AsyncClient

from spa_host.config import Settings
from spa_host.main import create_app

INDEX_HTML = b"<!doctype html><html><body><div id=\"root\"></div></body></html>\n"
APP_JS = b"console.log('spa');\n"
STYLE_CSS = b"body { margin: 0; }\n"


@pytest.fixture
def asset_dir(tmp_path):
    dist = tmp_path / "dist"
    (dist / "assets").mkdir(parents=True)
    (dist / "index.html").write_bytes(INDEX_HTML)
    (dist / "assets" / "app.js").write_bytes(APP_JS)
    (dist / "style.css").write_bytes(STYLE_CSS)
    return dist


@pytest.fixture
def settings(asset_dir):
    return Settings(_env_file=None, static_dir=asset_dir)


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
