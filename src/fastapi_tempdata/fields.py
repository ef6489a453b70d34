"""Field metadata — TempDataProperty marker, FieldDescriptor, tempdata_fields()."""

from __future__ import annotations

import types
from dataclasses import dataclass
from typing import Annotated, Any, Union, get_args, get_origin, get_type_hints

from fastapi_tempdata._types import FieldGetter, FieldSetter
from fastapi_tempdata.exceptions import InvalidTempDataProperty

_SUPPORTED_TYPES = (str, int, float, bool)
_NONE_TYPE = type(None)

_cache: dict[type, tuple[FieldDescriptor, ...]] = {}


class TempDataProperty:
    """Marks an annotated field as synchronized with temp data.

    Usage::

        class Page:
            message: Annotated[str | None, TempDataProperty()] = None
    """

    def __repr__(self) -> str:
        return "TempDataProperty()"


@dataclass(frozen=True)
class FieldDescriptor:
    """One synchronized field: name, declared type and accessors."""

    name: str
    value_type: Any = Any
    allows_absent: bool = True
    getter: FieldGetter | None = None
    setter: FieldSetter | None = None

    def get_value(self, subject: Any) -> Any:
        if self.getter is not None:
            return self.getter(subject)
        return getattr(subject, self.name, None)

    def set_value(self, subject: Any, value: Any) -> None:
        if self.setter is not None:
            self.setter(subject, value)
        else:
            setattr(subject, self.name, value)


def allows_absent(value_type: Any) -> bool:
    """Return True if ``None`` is a valid value for ``value_type``."""
    if value_type is Any or value_type is object or value_type in (None, _NONE_TYPE):
        return True
    if get_origin(value_type) in (Union, types.UnionType):
        return _NONE_TYPE in get_args(value_type)
    return False


def tempdata_fields(cls: type) -> tuple[FieldDescriptor, ...]:
    """Discover the TempDataProperty fields of ``cls``, in declaration order.

    Results are cached per class.
    """
    cached = _cache.get(cls)
    if cached is not None:
        return cached

    try:
        hints = get_type_hints(cls, include_extras=True)
    except (NameError, TypeError) as exc:
        raise InvalidTempDataProperty(
            cls.__qualname__, "*", f"annotations could not be resolved ({exc})"
        ) from exc

    descriptors: list[FieldDescriptor] = []
    for name, hint in hints.items():
        value_type = _marked_type(hint)
        if value_type is None:
            continue

        _validate(cls, name, value_type)
        descriptors.append(
            FieldDescriptor(
                name=name,
                value_type=value_type,
                allows_absent=allows_absent(value_type),
            )
        )

    result = tuple(descriptors)
    _cache[cls] = result
    return result


def _validate(cls: type, name: str, value_type: Any) -> None:
    if name.startswith("_"):
        raise InvalidTempDataProperty(
            cls.__qualname__, name, "private fields cannot be synchronized"
        )

    candidates: tuple[Any, ...] = (value_type,)
    if get_origin(value_type) in (Union, types.UnionType):
        candidates = tuple(a for a in get_args(value_type) if a is not _NONE_TYPE)

    for candidate in candidates:
        if candidate not in _SUPPORTED_TYPES:
            raise InvalidTempDataProperty(
                cls.__qualname__,
                name,
                "a temp data property must be of type str, int, float or bool",
            )


def _is_marked(hint: Any) -> bool:
    return get_origin(hint) is Annotated and any(
        isinstance(m, TempDataProperty) for m in hint.__metadata__
    )


def _marked_type(hint: Any) -> Any | None:
    """Return the declared type of a marked hint, or None if it is unmarked.

    The marker may sit on the whole hint or on one member of a union, as in
    ``Annotated[int, TempDataProperty()] | None``.
    """
    if _is_marked(hint):
        return get_args(hint)[0]
    if get_origin(hint) not in (Union, types.UnionType):
        return None

    members = get_args(hint)
    if not any(_is_marked(m) for m in members):
        return None
    unwrapped = tuple(
        get_args(m)[0] if get_origin(m) is Annotated else m for m in members
    )
    return Union[unwrapped]
