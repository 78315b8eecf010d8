"""
app/services package marker.
"""

from app.services.funding_service import FundingService

__all__ = [
    "FundingService",
]
