"""PipelineComponent abstract base class."""

from __future__ import annotations

from abc import ABC, abstractmethod

from fastapi_tempdata.context import RequestContext


class PipelineComponent(ABC):
    """Processing unit that runs after temp data is loaded and before the subject.

    Raising :class:`~fastapi_tempdata.exceptions.RequestAborted` short-circuits
    the request; temp data is still saved.
    """

    @abstractmethod
    async def resolve(self, ctx: RequestContext) -> None: ...
