"""FastAPI application factory.

Routers
-------
All endpoint groups are mounted under their respective path prefix:

    /instance-types  — scraped EC2 instance-type catalog
"""

from __future__ import annotations

from fastapi import FastAPI

from resize.api.routers import instance_types as instance_types_router


def create_app() -> FastAPI:
    """Return a fully-configured FastAPI application instance."""
    app = FastAPI(
        title="resize API",
        description=(
            "REST interface to the EC2 instance-type catalog, scraped from the "
            "public AWS instance types page on every request."
        ),
        version="0.1.0",
    )

    app.include_router(
        instance_types_router.router, prefix="/instance-types", tags=["instance-types"]
    )

    return app


# Module-level instance used by uvicorn:
#   uvicorn resize.api.app:app --reload
app = create_app()
