"""
In-memory key-value store.

Values are kept serialized so that a malformed document behaves the same
way it would coming back from a remote store.
"""

from typing import Any, Dict, List, Optional

from common.storage.base import KeyValueStore


class InMemoryKVStore(KeyValueStore):
    """Dict-backed store for tests and local development."""

    def __init__(self, initial: Optional[Dict[str, Any]] = None):
        self._values: Dict[str, str] = {}
        for key, value in (initial or {}).items():
            self._values[key] = self.encode(value)

    async def get(self, key: str, format: str = "json") -> Optional[Any]:
        raw = self._values.get(key)
        if raw is None:
            return None
        return self.decode(raw, format, key)

    async def put(self, key: str, value: Any) -> None:
        self._values[key] = self.encode(value)

    async def delete(self, key: str) -> None:
        self._values.pop(key, None)

    async def list_keys(self, prefix: str = "") -> List[str]:
        return sorted(k for k in self._values if k.startswith(prefix))
