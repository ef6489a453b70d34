"""Shared type aliases and protocols."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from fastapi_tempdata.context import RequestContext

# Field accessors supplied per FieldDescriptor
FieldGetter = Callable[[Any], Any]
FieldSetter = Callable[[Any, Any], None]

# Derives the per-user temp data key from the request
KeyFunc = Callable[["RequestContext"], str]

# Builds the subject for a request
SubjectFactory = Callable[["RequestContext"], Any]

HookCallback = Callable[["RequestContext"], Awaitable[None]]
