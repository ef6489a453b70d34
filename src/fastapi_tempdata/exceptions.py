"""TempDataException hierarchy."""

from __future__ import annotations


class TempDataException(Exception):
    """Base for all temp data exceptions."""


class FilterNotInitialized(TempDataException):
    """PropertySyncFilter used before its field descriptors were supplied."""

    def __init__(
        self, detail: str = "Property sync filter has no field descriptors"
    ) -> None:
        super().__init__(detail)
        self.detail = detail


class InvalidTempDataProperty(TempDataException):
    """A field marked with TempDataProperty cannot be synchronized."""

    def __init__(self, owner: str, name: str, reason: str) -> None:
        detail = f"The '{owner}.{name}' temp data property is invalid: {reason}"
        super().__init__(detail)
        self.owner = owner
        self.name = name
        self.detail = detail


class RequestAborted(TempDataException):
    """Controlled short-circuit with HTTP status code and detail."""

    def __init__(self, detail: str, *, status_code: int = 400) -> None:
        super().__init__(detail)
        self.status_code = status_code
        self.detail = detail
