"""
Directory-backed key-value store.

Maps locale document keys onto authored JSON files:

    i18n:{locale}:{brand}  ->  {directory}/{locale}.json

Any other key is stored as {directory}/{key with ':' replaced by '__'}.json.
"""

import logging
from pathlib import Path
from typing import Any, List, Optional

from common.storage.base import KeyValueStore, StoreError

logger = logging.getLogger(__name__)


class DirectoryKVStore(KeyValueStore):
    """Reads and writes one JSON file per key."""

    def __init__(self, directory: str, brand: str, namespace: str = "i18n"):
        """
        Initialize directory store.

        Args:
            directory: Directory holding the JSON files
            brand: Brand suffix expected on document keys
            namespace: Key prefix for documents stored as {name}.json
        """
        self._directory = Path(directory)
        self._brand = brand
        self._namespace = namespace

    def key_to_path(self, key: str) -> Path:
        """Resolve the file backing a key."""
        parts = key.split(":")
        if len(parts) == 3 and parts[0] == self._namespace and parts[2] == self._brand:
            return self._directory / f"{parts[1]}.json"
        return self._directory / f"{key.replace(':', '__')}.json"

    async def get(self, key: str, format: str = "json") -> Optional[Any]:
        file_path = self.key_to_path(key)
        if not file_path.exists():
            logger.debug(f"No file for key {key}: {file_path}")
            return None

        try:
            with open(file_path, "r", encoding="utf-8") as f:
                raw = f.read()
        except OSError as e:
            raise StoreError(f"Failed to read {file_path}: {e}", key=key) from e

        return self.decode(raw, format, key)

    async def put(self, key: str, value: Any) -> None:
        file_path = self.key_to_path(key)
        self._directory.mkdir(parents=True, exist_ok=True)
        with open(file_path, "w", encoding="utf-8") as f:
            f.write(self.encode(value))
        logger.info(f"Wrote {key} to {file_path}")

    async def list_keys(self, prefix: str = "") -> List[str]:
        if not self._directory.exists():
            return []
        keys = []
        for file_path in sorted(self._directory.glob("*.json")):
            stem = file_path.stem
            if "__" in stem:
                key = stem.replace("__", ":")
            else:
                key = f"{self._namespace}:{stem}:{self._brand}"
            if key.startswith(prefix):
                keys.append(key)
        return keys
