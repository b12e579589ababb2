# hostelia/core/constants.py
from __future__ import annotations

"""
Core application constants.

These values centralize common configuration-like constants such as:
- Pagination defaults per list view.
- Upstream backend paths and envelope keys.
- Common HTTP header names.
- Dashboard widget limits and rating thresholds.
"""

# Pagination defaults
DEFAULT_PAGE: int = 1
DEFAULT_PAGE_SIZE: int = 20
STUDENTS_PAGE_SIZE: int = 10
MAX_PAGE_SIZE: int = 100

# Sentinel used by filter dropdowns for "no filter"
FILTER_ALL: str = "all"

# Common HTTP header names
HEADER_REQUEST_ID: str = "X-Request-ID"
HEADER_PROCESS_TIME: str = "X-Process-Time"

# Upstream backend paths
PATH_COMPLAINTS: str = "/problem"
PATH_FEES: str = "/fee"
PATH_ANNOUNCEMENTS: str = "/announcement"
PATH_MESS_MENU: str = "/mess/menu"
PATH_MESS_FEEDBACK: str = "/mess/feedback"
PATH_TRANSIT: str = "/transit"
PATH_USER: str = "/user"
PATH_STUDENTS: str = "/user/students/all"
PATH_WARDENS: str = "/user/wardens/all"

# Envelope payload keys, in lookup order after the collection name
ENVELOPE_PAYLOAD_KEYS: tuple[str, ...] = ("data", "items")

# Dashboard widgets
RECENT_ITEMS_LIMIT: int = 5
POSITIVE_RATING_THRESHOLD: int = 4
NEGATIVE_RATING_THRESHOLD: int = 2
