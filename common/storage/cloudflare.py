"""
Cloudflare Workers KV store over the Cloudflare REST API.

Example:
    from common.storage import CloudflareKVStore

    store = CloudflareKVStore(
        account_id="...",
        namespace_id="...",
        api_token="...",
    )
    document = await store.get("i18n:es-ES:astropal", "json")
"""

import logging
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import httpx

from common.storage.base import KeyValueStore, StoreError

logger = logging.getLogger(__name__)

CLOUDFLARE_API_URL = "https://api.cloudflare.com/client/v4"
LIST_PAGE_SIZE = 1000


class CloudflareKVStore(KeyValueStore):
    """
    Key-value store backed by a Cloudflare KV namespace.

    A 404 is a missing key. Any other failure raises StoreError.
    """

    def __init__(
        self,
        account_id: str,
        namespace_id: str,
        api_token: str,
        base_url: str = CLOUDFLARE_API_URL,
        timeout: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize Cloudflare KV store.

        Args:
            account_id: Cloudflare account ID
            namespace_id: KV namespace ID
            api_token: API token with KV read (and write, for uploads) scope
            base_url: Cloudflare API base URL
            timeout: Request timeout in seconds
            client: Optional preconfigured client (tests inject a mock transport)
        """
        self._namespace_url = (
            f"{base_url}/accounts/{account_id}/storage/kv/namespaces/{namespace_id}"
        )
        self._headers = {"Authorization": f"Bearer {api_token}"}
        self._timeout = timeout
        self._client = client

    def _client_or_new(self) -> httpx.AsyncClient:
        if self._client is not None:
            return self._client
        return httpx.AsyncClient(timeout=self._timeout)

    async def _request(self, method: str, url: str, key: str, **kwargs: Any) -> httpx.Response:
        client = self._client_or_new()
        try:
            return await client.request(method, url, headers=self._headers, **kwargs)
        except httpx.HTTPError as e:
            raise StoreError(f"Cloudflare KV request failed for '{key}': {e}", key=key) from e
        finally:
            if client is not self._client:
                await client.aclose()

    def _value_url(self, key: str) -> str:
        return f"{self._namespace_url}/values/{quote(key, safe='')}"

    async def get(self, key: str, format: str = "json") -> Optional[Any]:
        response = await self._request("GET", self._value_url(key), key)

        if response.status_code == 404:
            logger.debug(f"KV key not found: {key}")
            return None

        if response.status_code >= 400:
            raise StoreError(
                f"Cloudflare KV returned {response.status_code} for '{key}'",
                key=key,
            )

        return self.decode(response.text, format, key)

    async def put(self, key: str, value: Any) -> None:
        response = await self._request(
            "PUT",
            self._value_url(key),
            key,
            content=self.encode(value).encode("utf-8"),
        )

        if response.status_code >= 400:
            raise StoreError(
                f"Cloudflare KV rejected write for '{key}': {response.status_code}",
                key=key,
            )

        logger.info(f"Uploaded {key} to Cloudflare KV")

    async def list_keys(self, prefix: str = "") -> List[str]:
        """List keys, following result_info.cursor until the last page."""
        keys: List[str] = []
        cursor: Optional[str] = None

        while True:
            params: Dict[str, Any] = {"limit": LIST_PAGE_SIZE}
            if prefix:
                params["prefix"] = prefix
            if cursor:
                params["cursor"] = cursor

            response = await self._request(
                "GET", f"{self._namespace_url}/keys", prefix, params=params
            )

            if response.status_code >= 400:
                raise StoreError(f"Cloudflare KV key listing failed: {response.status_code}")

            try:
                payload = response.json()
            except ValueError as e:
                raise StoreError(f"Malformed key listing response: {e}") from e

            keys.extend(item["name"] for item in payload.get("result", []))

            cursor = (payload.get("result_info") or {}).get("cursor")
            if not cursor:
                return keys
