"""tempdata_dependency() — FastAPI dependency factory for temp data sync."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Callable
from typing import Any

from fastapi import HTTPException
from starlette.requests import Request
from starlette.responses import Response

from fastapi_tempdata._types import SubjectFactory
from fastapi_tempdata.context import RequestContext
from fastapi_tempdata.exceptions import RequestAborted
from fastapi_tempdata.fields import FieldDescriptor, tempdata_fields
from fastapi_tempdata.filter import PropertySyncFilter
from fastapi_tempdata.pipeline import ResolvedPipeline, TempDataPipeline
from fastapi_tempdata.temp_data import (
    SESSION_COOKIE,
    TempDataDictionary,
    new_session_id,
)

logger = logging.getLogger(__name__)


def tempdata_dependency(
    subject_type: type[Any],
    pipeline: TempDataPipeline | None = None,
    *,
    factory: SubjectFactory | None = None,
) -> Callable[..., AsyncIterator[RequestContext]]:
    """Return a FastAPI dependency that syncs ``subject_type`` with temp data.

    The dependency yields a :class:`RequestContext` whose ``subject`` has its
    TempDataProperty fields loaded. Changed fields are saved once the route
    returns, raises, or a pipeline component aborts the request.

    Temp data is scoped to a session id read from the ``session`` cookie.
    Requests without one get a fresh id, issued as a cookie on the response.
    """
    resolved = (pipeline or TempDataPipeline()).resolve()
    fields = tempdata_fields(subject_type)
    build = factory or _default_factory(subject_type)

    dep = _make_dependency(resolved, fields, build)

    dep._tempdata_resolved = resolved  # type: ignore[attr-defined]
    dep._tempdata_subject_type = subject_type  # type: ignore[attr-defined]

    return dep


def _default_factory(subject_type: type[Any]) -> SubjectFactory:
    def build(ctx: RequestContext) -> Any:
        return subject_type()

    return build


def _make_dependency(
    resolved: ResolvedPipeline,
    fields: tuple[FieldDescriptor, ...],
    build: SubjectFactory,
) -> Callable[..., AsyncIterator[RequestContext]]:
    async def dependency(
        request: Request, response: Response
    ) -> AsyncIterator[RequestContext]:
        ctx = RequestContext(request=request)
        abort_headers: dict[str, str] | None = None

        session_id = request.cookies.get(SESSION_COOKIE)
        if not session_id:
            session_id = new_session_id()
            _set_session_cookie(response, session_id)
            abort_headers = {"set-cookie": response.headers["set-cookie"]}
        ctx.session_id = session_id

        key = resolved.key_func(ctx)
        temp_data = TempDataDictionary(await resolved.provider.load(key))
        ctx.temp_data = temp_data
        logger.debug("Loaded %d temp data entries", len(temp_data))

        sync_filter = PropertySyncFilter(fields)

        try:
            for hook in resolved.hooks:
                await hook.on_temp_data_loaded(ctx)

            try:
                for component in resolved.components:
                    await component.resolve(ctx)
            except RequestAborted as exc:
                logger.debug("Request aborted before subject ran: %s", exc.detail)
                raise HTTPException(
                    status_code=exc.status_code,
                    detail=exc.detail,
                    headers=abort_headers,
                ) from exc

            ctx.subject = build(ctx)
            sync_filter.load(temp_data, ctx.subject)

            yield ctx
        finally:
            sync_filter.save_changes(temp_data)

            for hook in resolved.hooks:
                await hook.on_temp_data_saving(ctx)

            await resolved.provider.save(key, temp_data.save())

    return dependency


def _set_session_cookie(response: Response, session_id: str) -> None:
    response.set_cookie(SESSION_COOKIE, session_id, httponly=True, samesite="lax")
