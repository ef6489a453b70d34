"""TempDataPipeline — ordered container of components, hooks and storage."""

from __future__ import annotations

from dataclasses import dataclass

from fastapi_tempdata._types import KeyFunc
from fastapi_tempdata.component import PipelineComponent
from fastapi_tempdata.hooks import TempDataHook
from fastapi_tempdata.temp_data import (
    InMemoryTempDataProvider,
    TempDataProvider,
    default_key_func,
)


@dataclass(frozen=True)
class ResolvedPipeline:
    """Immutable, pre-computed execution plan."""

    components: tuple[PipelineComponent, ...]
    provider: TempDataProvider
    key_func: KeyFunc
    hooks: tuple[TempDataHook, ...] = ()


class TempDataPipeline:
    """Ordered container of PipelineComponent instances sharing one provider."""

    def __init__(
        self,
        *components: PipelineComponent | TempDataPipeline,
        provider: TempDataProvider | None = None,
        key_func: KeyFunc | None = None,
    ) -> None:
        self._items: list[PipelineComponent | TempDataPipeline] = list(components)
        self._hooks: list[TempDataHook] = []
        self._provider: TempDataProvider = provider or InMemoryTempDataProvider()
        self._key_func = key_func or default_key_func
        self._resolved: ResolvedPipeline | None = None

    @property
    def provider(self) -> TempDataProvider:
        return self._provider

    def add(
        self, *components: PipelineComponent | TempDataPipeline
    ) -> TempDataPipeline:
        self._items.extend(components)
        self._resolved = None
        return self

    def add_hook(self, hook: TempDataHook) -> TempDataPipeline:
        self._hooks.append(hook)
        self._resolved = None
        return self

    def resolve(self) -> ResolvedPipeline:
        if self._resolved is not None:
            return self._resolved

        flat: list[PipelineComponent] = []
        self._flatten(self._items, flat)

        self._resolved = ResolvedPipeline(
            components=tuple(flat),
            provider=self._provider,
            key_func=self._key_func,
            hooks=tuple(self._hooks),
        )
        return self._resolved

    @staticmethod
    def _flatten(
        items: list[PipelineComponent | TempDataPipeline],
        out: list[PipelineComponent],
    ) -> None:
        for item in items:
            if isinstance(item, TempDataPipeline):
                # Nested pipelines contribute components only
                TempDataPipeline._flatten(item._items, out)
            else:
                out.append(item)
