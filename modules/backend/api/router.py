"""
API Router.

Aggregates all endpoint routers mounted under /api.
"""

from fastapi import APIRouter

from modules.backend.api.endpoints import auth, music, notes, users

router = APIRouter()

router.include_router(auth.router, tags=["auth"])
router.include_router(music.router, prefix="/music", tags=["music"])
router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(notes.router, prefix="/notes", tags=["notes"])
