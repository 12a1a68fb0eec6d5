"""FastAPI HTTP layer package.

Public re-export so callers can write::

    from resize.api import app

    uvicorn resize.api:app --reload
"""

from resize.api.app import app

__all__ = ["app"]
