"""FastAPI TempData - carry annotated fields over to the next request."""

from fastapi_tempdata.component import PipelineComponent
from fastapi_tempdata.context import RequestContext
from fastapi_tempdata.dependency import tempdata_dependency
from fastapi_tempdata.exceptions import (
    FilterNotInitialized,
    InvalidTempDataProperty,
    RequestAborted,
    TempDataException,
)
from fastapi_tempdata.fields import FieldDescriptor, TempDataProperty, tempdata_fields
from fastapi_tempdata.filter import PREFIX, PropertySyncFilter, store_key
from fastapi_tempdata.hooks import AfterLoad, BeforeSave, TempDataHook
from fastapi_tempdata.pipeline import ResolvedPipeline, TempDataPipeline
from fastapi_tempdata.temp_data import (
    InMemoryTempDataProvider,
    TempDataDictionary,
    TempDataProvider,
    TempDataStore,
)

__all__ = [
    "PREFIX",
    "AfterLoad",
    "BeforeSave",
    "FieldDescriptor",
    "FilterNotInitialized",
    "InMemoryTempDataProvider",
    "InvalidTempDataProperty",
    "PipelineComponent",
    "PropertySyncFilter",
    "RequestAborted",
    "RequestContext",
    "ResolvedPipeline",
    "TempDataDictionary",
    "TempDataException",
    "TempDataHook",
    "TempDataPipeline",
    "TempDataProperty",
    "TempDataProvider",
    "TempDataStore",
    "store_key",
    "tempdata_dependency",
    "tempdata_fields",
]
