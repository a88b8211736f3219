"""User CRUD API entrypoint."""

from __future__ import annotations

import logging

import uvicorn

from usercrud_backend.api import create_api
from usercrud_backend.settings import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Install the root log handler at the configured level."""
    logging.basicConfig(level=(level or get_settings().log_level).upper(), format=LOG_FORMAT)


configure_logging()
app = create_api()


def _run_uvicorn(*, reload: bool) -> None:
    """Start uvicorn with a consistent configuration."""
    config = get_settings()
    logging.getLogger(__name__).info("App listening on port %d", config.api_port)
    uvicorn.run(
        "usercrud_backend.main:app",
        host=config.api_host,
        port=config.api_port,
        reload=reload,
    )


def run_dev() -> None:
    """Run the development ASGI server with auto-reload."""
    _run_uvicorn(reload=True)


def run_prod() -> None:
    """Run the production ASGI server without auto-reload."""
    _run_uvicorn(reload=False)
