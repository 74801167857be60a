"""
mapping_engine/main.py

FastAPI application exposing the field mapping engine to the import UI.
"""

from __future__ import annotations

from fastapi import FastAPI

from mapping_engine.config import get_logging_settings
from mapping_engine.logging_utils import configure_logging


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.
    """

    configure_logging(get_logging_settings().level)

    application = FastAPI(
        title="Field Mapping Engine",
        version="1.0.0",
    )

    from mapping_engine.api.routers import field_mapping_router

    application.include_router(field_mapping_router)

    @application.get("/health")
    def healthcheck() -> dict[str, str]:
        return {"status": "ok"}

    return application


app = create_app()
