"""
Top‑level API router.

Aggregates the resource routers under the ``/api`` prefix applied in
``main.py``.  Add new resources here.
"""

from fastapi import APIRouter

from .endpoints import hello, listings

router = APIRouter()

router.include_router(hello.router, prefix="/hello", tags=["hello"])
router.include_router(listings.router, prefix="/listings", tags=["listings"])
