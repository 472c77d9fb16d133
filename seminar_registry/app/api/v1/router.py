"""
Top‑level router for version 1 of the API.

This router aggregates the domain‑specific routers under a unified
prefix.  When new endpoints are added, update this file to include
their routers.
"""

from fastapi import APIRouter

from .endpoints import attendees, certificates, info, seminars

router = APIRouter()

router.include_router(seminars.router, prefix="/seminars", tags=["seminars"])
router.include_router(attendees.router, prefix="/attendees", tags=["attendees"])
router.include_router(certificates.router, prefix="/certificates", tags=["certificates"])
router.include_router(info.router, prefix="/info", tags=["info"])
