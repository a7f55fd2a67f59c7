"""
Top-level API router.

Resource routers are included here with their path prefix.  The
service exposes its routes without a version prefix.
"""

from fastapi import APIRouter

from .endpoints import customers

router = APIRouter()

router.include_router(customers.router, prefix="/customers", tags=["customers"])
