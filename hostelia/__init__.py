"""
Hostelia dashboard service.

Reads complaints, fees, mess feedback and transit records from the hostel
backend and serves timelines, filtered listings and dashboard metrics.
"""

__version__ = "1.0.0"
