"""
Mess schemas package.
"""

from hostelia.schemas.mess.mess_base import FeedbackAuthor, MessFeedback, MessMenu

__all__ = ["FeedbackAuthor", "MessFeedback", "MessMenu"]
