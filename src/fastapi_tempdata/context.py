"""RequestContext — per-request state container."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from starlette.requests import Request

if TYPE_CHECKING:
    from fastapi_tempdata.temp_data import TempDataDictionary


@dataclass
class RequestContext:
    """Lightweight per-request state shared by pipeline components and hooks."""

    request: Request
    user: Any | None = None
    session_id: str | None = None
    temp_data: TempDataDictionary | None = None
    subject: Any | None = None
    state: dict[str, Any] = field(default_factory=dict)
