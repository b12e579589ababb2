"""
Integrations with external collaborators: the REST backend and the token store.
"""

from hostelia.integrations.backend_client import BackendClient, create_http_client
from hostelia.integrations.token_store import TokenStore

__all__ = ["BackendClient", "TokenStore", "create_http_client"]
