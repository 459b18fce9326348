"""Competitions presentation layer.

HTTP routes translating requests into directory service calls.
"""

from __future__ import annotations

from fastapi import APIRouter

from competitions.presentation import routes, session

router = APIRouter()

router.include_router(routes.router)
router.include_router(session.router)

__all__ = ["router"]
