"""
Custom pipeline example.

Demonstrates:
- A custom TempDataProvider
- A pipeline component that short-circuits with RequestAborted
- Lifecycle hooks around loading and saving temp data
"""

import logging
from typing import Annotated, Any

from fastapi import Depends, FastAPI

from fastapi_tempdata import (
    BeforeSave,
    PipelineComponent,
    RequestAborted,
    RequestContext,
    TempDataPipeline,
    TempDataProperty,
    tempdata_dependency,
)

logging.basicConfig(level=logging.DEBUG)

app = FastAPI(title="Custom Pipeline Example")


# ========== Custom Provider ==========


class AuditedProvider:
    """Wraps a dict and prints every save (swap for Redis, a database, ...)."""

    def __init__(self) -> None:
        self._entries: dict[str, dict[str, Any]] = {}

    async def load(self, key: str) -> dict[str, Any]:
        return dict(self._entries.get(key, {}))

    async def save(self, key: str, values: dict[str, Any]) -> None:
        print(f"[TEMPDATA] {key}: {sorted(values)}")
        self._entries[key] = dict(values)


# ========== Custom Component ==========


class RequireApiKey(PipelineComponent):
    """Rejects requests without an API key, leaving a notice for the next one."""

    async def resolve(self, ctx: RequestContext) -> None:
        if ctx.request.headers.get("x-api-key") == "secret":
            return
        ctx.temp_data["notice"] = "The previous request was missing its API key"
        raise RequestAborted("API key required", status_code=401)


# ========== Subject ==========


class WizardStep:
    step: Annotated[int, TempDataProperty()] = 1
    last_error: Annotated[str | None, TempDataProperty()] = None


async def keep_notice(ctx: RequestContext) -> None:
    ctx.temp_data.keep("notice")


pipeline = TempDataPipeline(RequireApiKey(), provider=AuditedProvider())
pipeline.add_hook(BeforeSave(keep_notice))

wizard = tempdata_dependency(WizardStep, pipeline)


@app.post("/wizard/next")
async def next_step(ctx: RequestContext = Depends(wizard)):
    ctx.subject.step += 1
    return {"step": ctx.subject.step, "notice": ctx.temp_data.peek("notice")}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)

    # Test with:
    # curl -c jar -b jar -X POST http://localhost:8000/wizard/next
    # curl -c jar -b jar -H "X-API-Key: secret" -X POST http://localhost:8000/wizard/next
