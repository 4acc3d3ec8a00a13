"""
Top‑level router for version 1 of the API.

This router aggregates domain‑specific routers.  The tasks router
defines its own ``/tasks`` paths internally, so it is included
without a prefix.
"""

from fastapi import APIRouter

from .endpoints import tasks

router = APIRouter()

router.include_router(tasks.router, tags=["tasks"])
