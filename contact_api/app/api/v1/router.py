"""
Top-level router for version 1 of the API.

Aggregates domain-specific routers under a unified router.  When new
domains are introduced, include their routers here.
"""

from fastapi import APIRouter

from .endpoints import contacts

router = APIRouter()

router.include_router(contacts.router, prefix="/contact", tags=["contacts"])
