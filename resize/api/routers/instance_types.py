"""Instance-type catalog endpoints.

Routes
------
GET /instance-types           → full catalog, in page order
GET /instance-types/{name}    → one instance type by name

Each request scrapes the source page afresh.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from resize.scraper import InstanceType, ScraperError, fetch_catalog

logger = logging.getLogger(__name__)

router = APIRouter()


# ---------------------------------------------------------------------------
# Schemas
# ---------------------------------------------------------------------------

class InstanceTypeResponse(BaseModel):
    name: str
    cpus: int
    memory: float
    storage: str
    network_spec: str
    processor: str
    clock_speed: float
    intel_avx: bool
    intel_avx2: bool
    intel_turbo: bool
    ebs_opt: bool
    enhanced_networking: bool


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _load_catalog() -> list[InstanceType]:
    try:
        return fetch_catalog()
    except ScraperError as exc:
        # Layout details stay in the log; clients only see a generic failure.
        logger.error("Instance type catalog unavailable: %s", exc)
        raise HTTPException(
            status_code=502, detail="Instance type catalog is unavailable."
        ) from exc


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@router.get("", response_model=list[InstanceTypeResponse])
def list_instance_types() -> list[dict[str, Any]]:
    """Return every instance type listed on the source page."""
    return [t.to_dict() for t in _load_catalog()]


@router.get("/{name}", response_model=InstanceTypeResponse)
def get_instance_type(name: str) -> dict[str, Any]:
    """Return a single instance type, or 404 if the page does not list it."""
    for t in _load_catalog():
        if t.name == name:
            return t.to_dict()
    raise HTTPException(status_code=404, detail=f"Instance type {name!r} not found.")
