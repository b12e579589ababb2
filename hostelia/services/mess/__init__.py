"""
Mess services.
"""

from hostelia.services.mess.mess_service import MessService

__all__ = ["MessService"]
