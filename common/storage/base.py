"""
Abstract key-value store interface.

Defines the contract every document store must implement so that the
locale pipeline can read translation documents without knowing where they
live (in memory, on disk, or in a Cloudflare KV namespace).

Example:
    from common.storage import KeyValueStore, InMemoryKVStore

    store: KeyValueStore = InMemoryKVStore()
    await store.put("i18n:en-US:astropal", {"common": {"yes": "Yes"}})
    data = await store.get("i18n:en-US:astropal", "json")
"""

import json
from abc import ABC, abstractmethod
from typing import Any, List, Optional


class StoreError(Exception):
    """Raised when a store cannot be read or returns unusable data."""

    def __init__(self, message: str, key: Optional[str] = None):
        super().__init__(message)
        self.key = key


class KeyValueStore(ABC):
    """
    Abstract key-value store.

    Values are whole documents; there are no partial reads or patches.
    """

    @abstractmethod
    async def get(self, key: str, format: str = "json") -> Optional[Any]:
        """
        Read a value.

        Args:
            key: Store key (e.g., 'i18n:en-US:astropal')
            format: "json" to decode the value, "text" for the raw string

        Returns:
            Decoded value, or None if the key does not exist

        Raises:
            StoreError: If the store is unreachable or the value is malformed
        """
        pass

    @abstractmethod
    async def put(self, key: str, value: Any) -> None:
        """
        Replace a value atomically.

        Args:
            key: Store key
            value: JSON-serializable object, or a pre-encoded string
        """
        pass

    async def list_keys(self, prefix: str = "") -> List[str]:
        """
        List keys starting with prefix.

        Default implementation raises; override where the backend supports it.
        """
        raise NotImplementedError(f"{type(self).__name__} does not support listing keys")

    @staticmethod
    def encode(value: Any) -> str:
        """Serialize a value for storage."""
        if isinstance(value, str):
            return value
        return json.dumps(value, ensure_ascii=False)

    @staticmethod
    def decode(raw: str, format: str, key: str) -> Any:
        """Decode a stored string according to format."""
        if format == "text":
            return raw
        try:
            return json.loads(raw)
        except json.JSONDecodeError as e:
            raise StoreError(f"Malformed JSON for key '{key}': {e}", key=key) from e
