"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI

from code_bundle import __version__
from code_bundle.web.api import router


def create_app() -> FastAPI:
    app = FastAPI(title="code-bundle", version=__version__)
    app.include_router(router)
    return app
