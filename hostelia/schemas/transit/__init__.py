"""
Transit schemas package.
"""

from hostelia.schemas.transit.transit_base import TransitEntry, TransitStudent

__all__ = ["TransitEntry", "TransitStudent"]
