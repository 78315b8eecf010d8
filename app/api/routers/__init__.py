"""
app/api/routers package marker.
"""

from app.api.routers.funding_router import router as funding_router

__all__ = [
    "funding_router",
]
