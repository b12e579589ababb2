"""
Service layer.

Services wrap the backend client, apply domain rules and return
ServiceResult objects that the API layer unwraps.
"""
