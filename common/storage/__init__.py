"""
Storage module - Pluggable key-value document stores.
"""

from common.storage.base import KeyValueStore, StoreError
from common.storage.memory import InMemoryKVStore
from common.storage.directory import DirectoryKVStore
from common.storage.cloudflare import CloudflareKVStore

__all__ = [
    "KeyValueStore",
    "StoreError",
    "InMemoryKVStore",
    "DirectoryKVStore",
    "CloudflareKVStore",
]
