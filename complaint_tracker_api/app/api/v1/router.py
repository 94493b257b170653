"""
Top‑level router for version 1 of the API.

This router aggregates the domain‑specific routers.  Neither defines a
prefix: the operation paths sit directly under wherever the version
router is mounted.
"""

from fastapi import APIRouter

from .endpoints import complaints, users

router = APIRouter()

router.include_router(users.router, tags=["users"])
router.include_router(complaints.router, tags=["complaints"])
