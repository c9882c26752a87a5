"""Module Entry Point — `python -m spa_host` serves the app on the configured port."""

from spa_host.main import run

if __name__ == "__main__":
    run()
