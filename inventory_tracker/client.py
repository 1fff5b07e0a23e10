"""
HTTP client for the Inventory Management API.

Wraps an ``httpx.AsyncClient`` and attaches the bearer token held by a
``CredentialStore`` to every request.
"""
from typing import Any, Dict, List, Optional
import httpx

from .config import API_BASE_URL, TIMEOUT


class CredentialStore:
    """Locally held credential state: the bearer token and the signed-in user."""

    def __init__(self, token: Optional[str] = None, user: Optional[Dict[str, Any]] = None):
        self.token = token
        self.user = user

    @property
    def is_authenticated(self) -> bool:
        return self.token is not None

    def save(self, token: str, user: Optional[Dict[str, Any]] = None) -> None:
        self.token = token
        self.user = user

    def clear(self) -> None:
        self.token = None
        self.user = None


class InventoryClient:
    """
    Client for the ``/inventory`` endpoints.

    Args:
        credentials: Source of the bearer token
        base_url: API base URL, e.g. ``http://localhost:5000/api``
        transport: Optional httpx transport (``httpx.ASGITransport`` in tests)
        timeout: Request timeout in seconds

    All methods raise ``httpx.HTTPStatusError`` on a non-2xx response and
    ``httpx.HTTPError`` on network failures.
    """

    def __init__(
        self,
        credentials: CredentialStore,
        base_url: str = API_BASE_URL,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: float = TIMEOUT,
    ):
        self.credentials = credentials
        self._client = httpx.AsyncClient(base_url=base_url, transport=transport, timeout=timeout)

    async def __aenter__(self) -> "InventoryClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    def _headers(self) -> Optional[Dict[str, str]]:
        token = self.credentials.token
        return {"Authorization": f"Bearer {token}"} if token else None

    async def _request(self, method: str, url: str, **kwargs) -> Any:
        response = await self._client.request(method, url, headers=self._headers(), **kwargs)
        response.raise_for_status()
        return response.json()

    async def list_items(self) -> List[dict]:
        """Retrieve all inventory items, newest first."""
        return await self._request("GET", "/inventory")

    async def get_item(self, item_id: str) -> dict:
        return await self._request("GET", f"/inventory/{item_id}")

    async def create_item(self, data: Dict[str, Any]) -> dict:
        """Create an item from the five editable fields; returns the stored record."""
        return await self._request("POST", "/inventory", json=data)

    async def update_item(self, item_id: str, data: Dict[str, Any]) -> dict:
        """Replace all editable fields of an item; returns the stored record."""
        return await self._request("PUT", f"/inventory/{item_id}", json=data)

    async def delete_item(self, item_id: str) -> dict:
        return await self._request("DELETE", f"/inventory/{item_id}")
