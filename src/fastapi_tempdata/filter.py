"""PropertySyncFilter — synchronizes subject fields with temp data."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from fastapi_tempdata.exceptions import FilterNotInitialized
from fastapi_tempdata.fields import FieldDescriptor
from fastapi_tempdata.temp_data import TempDataStore

logger = logging.getLogger(__name__)

PREFIX = "TempDataProperty-"


def store_key(name: str) -> str:
    """Return the temp data key used for the field ``name``."""
    return PREFIX + name


class PropertySyncFilter:
    """Loads temp data into a subject's fields and saves back the changed ones.

    One instance serves one request: :meth:`load` runs before the subject
    does its work, :meth:`save_changes` runs once the response is being
    finalized. Not thread-safe.
    """

    def __init__(self, fields: Sequence[FieldDescriptor] | None = None) -> None:
        self.fields = fields
        self.subject: Any | None = None
        self.original_values: dict[str, Any] | None = None

    def load(self, store: TempDataStore, subject: Any) -> None:
        """Assign stored values to ``subject`` and snapshot them.

        Raises:
            FilterNotInitialized: ``fields`` was never supplied.
        """
        if self.fields is None:
            raise FilterNotInitialized()

        self.subject = subject
        self.original_values = {}
        if subject is None:
            return
        self._set_values(store, subject, self.original_values)

    def apply(self, store: TempDataStore, subject: Any) -> None:
        """Assign stored values to an additional ``subject``.

        Unlike :meth:`load` this does not replace the tracked subject and
        silently does nothing when no fields were supplied.
        """
        if self.fields is None:
            return
        if self.original_values is None:
            self.original_values = {}
        self._set_values(store, subject, self.original_values)

    def save_changes(self, store: TempDataStore) -> None:
        """Write every field whose value changed since :meth:`load` to ``store``.

        Does nothing if :meth:`load` never ran. A field cleared to ``None``
        is not written, so the stored value is left as is.
        """
        if self.subject is None or self.original_values is None:
            return

        by_name = {f.name: f for f in self.fields or ()}
        for name, original in self.original_values.items():
            new_value = by_name[name].get_value(self.subject)
            if new_value is not None and new_value != original:
                logger.debug("Saving temp data property %r", name)
                store.set(store_key(name), new_value)

    def _set_values(
        self, store: TempDataStore, subject: Any, snapshot: dict[str, Any]
    ) -> None:
        for descriptor in self.fields or ():
            value = store.get(store_key(descriptor.name))
            snapshot[descriptor.name] = value

            if value is not None or descriptor.allows_absent:
                descriptor.set_value(subject, value)
            else:
                logger.debug(
                    "Skipping absent temp data for non-nullable property %r",
                    descriptor.name,
                )
