"""TempDataHook base and convenience hook classes."""

from __future__ import annotations

from fastapi_tempdata._types import HookCallback
from fastapi_tempdata.context import RequestContext


class TempDataHook:
    """Base abstraction for temp data lifecycle hooks. All methods are no-op."""

    async def on_temp_data_loaded(self, ctx: RequestContext) -> None:
        pass

    async def on_temp_data_saving(self, ctx: RequestContext) -> None:
        pass


class AfterLoad(TempDataHook):
    """Convenience hook that only fires once temp data is loaded."""

    def __init__(self, callback: HookCallback) -> None:
        self._callback = callback

    async def on_temp_data_loaded(self, ctx: RequestContext) -> None:
        await self._callback(ctx)


class BeforeSave(TempDataHook):
    """Convenience hook that fires before temp data is persisted."""

    def __init__(self, callback: HookCallback) -> None:
        self._callback = callback

    async def on_temp_data_saving(self, ctx: RequestContext) -> None:
        await self._callback(ctx)
