"""
Client for the document-store REST backend.

Attaches the caller's bearer token, unwraps ``{success, message, <payload>}``
envelopes and maps HTTP failures onto application exceptions.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import httpx

from hostelia.config.settings import Settings
from hostelia.core.constants import ENVELOPE_PAYLOAD_KEYS
from hostelia.core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ErrorCode,
    ResourceNotFoundError,
    UpstreamServiceError,
    ValidationError,
)
from hostelia.core.logging import get_logger
from hostelia.integrations.token_store import TokenStore

logger = get_logger(__name__)


def extract_items(payload: Any, *keys: str) -> List[Any]:
    """
    Return the first list found under ``keys``, then ``data``, then ``items``.

    A missing payload yields an empty list.
    """
    if isinstance(payload, list):
        return payload
    if not isinstance(payload, dict):
        return []
    for key in (*keys, *ENVELOPE_PAYLOAD_KEYS):
        value = payload.get(key)
        if isinstance(value, list):
            return value
        if isinstance(value, dict) and isinstance(value.get("items"), list):
            return value["items"]
    return []


def extract_object(payload: Any, *keys: str) -> Optional[Dict[str, Any]]:
    """Return the first mapping found under ``keys``, then ``data``."""
    if not isinstance(payload, dict):
        return None
    for key in (*keys, "data"):
        value = payload.get(key)
        if isinstance(value, dict):
            return value
    return None


def extract_total(payload: Any) -> Optional[int]:
    """Server-side total for paginated collections, if the backend sent one."""
    if not isinstance(payload, dict):
        return None
    for source in (payload, payload.get("pagination"), payload.get("meta")):
        if isinstance(source, dict) and isinstance(source.get("total"), int):
            return source["total"]
    return None


@dataclass
class UpstreamCollection:
    items: List[Any] = field(default_factory=list)
    total: Optional[int] = None


def create_http_client(
    settings: Settings,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.AsyncClient:
    """Build the shared connection pool used by every BackendClient."""
    return httpx.AsyncClient(
        base_url=settings.BACKEND_API_URL,
        timeout=settings.BACKEND_TIMEOUT,
        headers={"Accept": "application/json"},
        transport=transport,
    )


class BackendClient:
    """Per-request view of the backend bound to one token store."""

    def __init__(self, http: httpx.AsyncClient, token_store: TokenStore):
        self.http = http
        self.token_store = token_store

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """
        Send one request and return the decoded envelope.

        Raises:
            AuthenticationError: 401, after clearing the token if still current
            AuthorizationError: 403
            ResourceNotFoundError: 404
            ValidationError: 400 / 422
            UpstreamServiceError: transport failures, other statuses, or
                ``success: false`` in a 2xx body
        """
        token = self.token_store.token
        headers = {"Authorization": f"Bearer {token}"} if token else {}

        try:
            response = await self.http.request(method, path, params=params, json=json, headers=headers)
        except httpx.TimeoutException as exc:
            logger.error(f"Backend timeout on {method} {path}")
            raise UpstreamServiceError(
                "Backend request timed out",
                path=path,
                error_code=ErrorCode.TIMEOUT_ERROR,
                status_code=504,
            ) from exc
        except httpx.HTTPError as exc:
            logger.error(f"Backend unreachable on {method} {path}: {exc}")
            raise UpstreamServiceError(f"Backend unreachable: {exc}", path=path) from exc

        payload = self._decode(response)
        logger.debug(
            f"{method} {path} -> {response.status_code}",
            extra={"upstream_status": response.status_code},
        )

        if response.is_error:
            self._raise_for_status(response.status_code, payload, path, token)

        if payload.get("success") is False:
            raise UpstreamServiceError(
                payload.get("message") or "Backend reported failure",
                upstream_status=response.status_code,
                path=path,
            )
        return payload

    async def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        return await self.request("GET", path, params=params)

    async def patch(self, path: str, json: Dict[str, Any]) -> Dict[str, Any]:
        return await self.request("PATCH", path, json=json)

    async def post(self, path: str, json: Dict[str, Any]) -> Dict[str, Any]:
        return await self.request("POST", path, json=json)

    async def fetch_collection(
        self,
        path: str,
        *keys: str,
        params: Optional[Dict[str, Any]] = None,
    ) -> UpstreamCollection:
        payload = await self.get(path, params=params)
        return UpstreamCollection(items=extract_items(payload, *keys), total=extract_total(payload))

    async def fetch_list(
        self,
        path: str,
        *keys: str,
        params: Optional[Dict[str, Any]] = None,
    ) -> List[Any]:
        return (await self.fetch_collection(path, *keys, params=params)).items

    @staticmethod
    def _decode(response: httpx.Response) -> Dict[str, Any]:
        try:
            body = response.json()
        except ValueError:
            return {}
        if isinstance(body, list):
            return {"data": body}
        return body if isinstance(body, dict) else {}

    def _raise_for_status(
        self,
        status_code: int,
        payload: Dict[str, Any],
        path: str,
        token: Optional[str],
    ) -> None:
        message = payload.get("message")

        if status_code == 401:
            self.token_store.clear_if_current(token)
            raise AuthenticationError(message or "Session expired, please log in again")
        if status_code == 403:
            raise AuthorizationError(message or "Forbidden")
        if status_code == 404:
            raise ResourceNotFoundError(message=message or f"Resource not found: {path}")
        if status_code in (400, 422):
            raise ValidationError(message or "Backend rejected the request", status_code=422)

        logger.warning(f"Backend error {status_code} on {path}: {message}")
        raise UpstreamServiceError(
            message or f"Backend returned HTTP {status_code}",
            upstream_status=status_code,
            path=path,
        )


__all__ = [
    "BackendClient",
    "UpstreamCollection",
    "create_http_client",
    "extract_items",
    "extract_object",
    "extract_total",
]
