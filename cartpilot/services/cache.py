from __future__ import annotations

from typing import Optional, Protocol

import redis


class KeyValueStore(Protocol):
    """String key-value store used for durable client state such as baskets."""

    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...

    def delete(self, key: str) -> None: ...

    def ping(self) -> bool: ...


class MemoryKeyValueStore:
    """Process-local store. Contents are lost on restart."""

    def __init__(self) -> None:
        self._data: dict[str, str] = {}

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def ping(self) -> bool:
        return True


class RedisKeyValueStore:
    """Redis-backed store. Errors from Redis propagate to the caller."""

    def __init__(self, client: redis.Redis) -> None:
        self._redis = client

    @classmethod
    def from_url(cls, url: str) -> "RedisKeyValueStore":
        # Raises on a malformed URL so configuration issues surface early.
        return cls(redis.Redis.from_url(url, decode_responses=True))

    def get(self, key: str) -> Optional[str]:
        return self._redis.get(key)

    def set(self, key: str, value: str) -> None:
        # No TTL: the basket lives until the user clears it.
        self._redis.set(key, value)

    def delete(self, key: str) -> None:
        self._redis.delete(key)

    def ping(self) -> bool:
        return bool(self._redis.ping())


__all__ = ["KeyValueStore", "MemoryKeyValueStore", "RedisKeyValueStore"]
