"""
Gate transit services.
"""

from hostelia.services.transit.transit_service import TransitService

__all__ = ["TransitService"]
