"""
Pydantic schemas for the Hostelia dashboard service.

Domain packages mirror the backend collections; ``common`` holds the
shared base classes, enums, pagination and response envelopes.
"""
