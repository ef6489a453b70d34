"""Temp data storage — TempDataStore, TempDataDictionary, providers."""

from __future__ import annotations

import secrets
from collections.abc import Iterator, Mapping, MutableMapping
from typing import Any, Protocol, runtime_checkable

from fastapi_tempdata.context import RequestContext

SESSION_COOKIE = "session"


@runtime_checkable
class TempDataStore(Protocol):
    """Key/value view of the current user's temp data."""

    def get(self, key: str) -> Any | None: ...
    def set(self, key: str, value: Any) -> None: ...


class TempDataDictionary(MutableMapping[str, Any]):
    """Temp data for one request.

    Values survive until they are read. A read value is dropped when the
    request ends unless it is kept with :meth:`keep`; values written during
    the request are always carried into the next one.
    """

    def __init__(self, values: Mapping[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = dict(values or {})
        self._initial_keys: set[str] = set(self._data)
        self._retained_keys: set[str] = set()

    def __getitem__(self, key: str) -> Any:
        value = self._data[key]
        self._initial_keys.discard(key)
        return value

    def __setitem__(self, key: str, value: Any) -> None:
        self._data[key] = value
        self._initial_keys.add(key)

    def __delitem__(self, key: str) -> None:
        del self._data[key]
        self._initial_keys.discard(key)
        self._retained_keys.discard(key)

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __repr__(self) -> str:
        return f"TempDataDictionary({self._data!r})"

    def set(self, key: str, value: Any) -> None:
        self[key] = value

    def peek(self, key: str) -> Any | None:
        """Return the value for ``key`` without marking it as read."""
        return self._data.get(key)

    def keep(self, key: str | None = None) -> None:
        """Retain ``key`` (or every key) for one more request."""
        if key is None:
            self._retained_keys.clear()
            self._retained_keys.update(self._data)
        else:
            self._retained_keys.add(key)

    def save(self) -> dict[str, Any]:
        """Drop read values and return what should be persisted."""
        for key in list(self._data):
            if key not in self._initial_keys and key not in self._retained_keys:
                del self._data[key]
        return dict(self._data)


@runtime_checkable
class TempDataProvider(Protocol):
    """Pluggable storage interface for per-user temp data."""

    async def load(self, key: str) -> dict[str, Any]: ...
    async def save(self, key: str, values: dict[str, Any]) -> None: ...


class InMemoryTempDataProvider:
    """Default in-memory temp data provider. Single-process only."""

    def __init__(self) -> None:
        self._entries: dict[str, dict[str, Any]] = {}

    async def load(self, key: str) -> dict[str, Any]:
        return dict(self._entries.get(key, {}))

    async def save(self, key: str, values: dict[str, Any]) -> None:
        if values:
            self._entries[key] = dict(values)
        else:
            self._entries.pop(key, None)


def new_session_id() -> str:
    """Return a fresh, unguessable session id."""
    return secrets.token_urlsafe(32)


def default_key_func(ctx: RequestContext) -> str:
    """Derive the temp data key from the request's session id."""
    return f"session:{ctx.session_id}"
