"""SPA Static Responder — serves the pre-built frontend with an index fallback.

Invariants:
    - A path naming a regular file under the asset root returns that file's bytes
    - Every other path (missing file, directory, "/") returns the fallback
      document with status 200, never a 404
    - Fallback vanished after startup → FallbackDocumentMissingError (500)

Design Decisions:
    - Subclass StaticFiles rather than html=True: Starlette's html mode answers
      unknown paths with 404.html / 404, not the SPA entry document
    - Fallback goes through StaticFiles.file_response so ETag / 304 handling matches
      regular assets
"""

import os
import stat
from pathlib import Path

import anyio
from starlette.exceptions import HTTPException
from starlette.responses import Response
from starlette.staticfiles import StaticFiles
from starlette.types import Scope

from spa_host.core.errors import FallbackDocumentMissingError


class SPAStaticFiles(StaticFiles):
    """StaticFiles that answers unmatched paths with the SPA entry document."""

    def __init__(self, directory: str | os.PathLike, fallback_document: str = "index.html"):
        # check_dir=False: the asset tree is verified by the app lifespan
        super().__init__(directory=directory, html=False, check_dir=False)
        self.fallback_path = Path(directory) / fallback_document

    async def get_response(self, path: str, scope: Scope) -> Response:
        try:
            return await super().get_response(path, scope)
        except HTTPException as exc:
            if exc.status_code != 404:
                raise
        return await self.fallback_response(scope)

    async def fallback_response(self, scope: Scope) -> Response:
        try:
            stat_result = await anyio.to_thread.run_sync(os.stat, self.fallback_path)
        except (FileNotFoundError, NotADirectoryError) as exc:
            raise FallbackDocumentMissingError(self.fallback_path) from exc
        if not stat.S_ISREG(stat_result.st_mode):
            raise FallbackDocumentMissingError(self.fallback_path)
        return self.file_response(self.fallback_path, stat_result, scope)
