"""
Utility helpers: document URLs, upload validation and sorting.
"""
