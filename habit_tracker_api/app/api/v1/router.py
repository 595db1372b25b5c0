"""
Top-level router for version 1 of the API.

The habits router defines its own ``/Habits`` and ``/habit`` paths, so
no prefix is added here; the application mounts this router under
``settings.api_prefix``.
"""

from fastapi import APIRouter

from .endpoints import habits

router = APIRouter()

router.include_router(habits.router, tags=["habits"])
