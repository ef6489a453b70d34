"""Tests for TempDataException hierarchy."""

from __future__ import annotations

from fastapi_tempdata.exceptions import (
    FilterNotInitialized,
    InvalidTempDataProperty,
    RequestAborted,
    TempDataException,
)


class TestTempDataException:
    def test_is_base_exception(self) -> None:
        exc = TempDataException("test")
        assert isinstance(exc, Exception)
        assert str(exc) == "test"


class TestFilterNotInitialized:
    def test_default_detail(self) -> None:
        exc = FilterNotInitialized()
        assert exc.detail == "Property sync filter has no field descriptors"
        assert str(exc) == exc.detail

    def test_is_temp_data_exception(self) -> None:
        assert issubclass(FilterNotInitialized, TempDataException)


class TestInvalidTempDataProperty:
    def test_detail_names_property(self) -> None:
        exc = InvalidTempDataProperty("Page", "tags", "unsupported type")
        assert exc.owner == "Page"
        assert exc.name == "tags"
        assert exc.detail == "The 'Page.tags' temp data property is invalid: unsupported type"

    def test_is_temp_data_exception(self) -> None:
        assert issubclass(InvalidTempDataProperty, TempDataException)


class TestRequestAborted:
    def test_default_status_code(self) -> None:
        exc = RequestAborted("bad request")
        assert exc.status_code == 400
        assert exc.detail == "bad request"

    def test_custom_status_code(self) -> None:
        exc = RequestAborted("login required", status_code=401)
        assert exc.status_code == 401

    def test_is_temp_data_exception(self) -> None:
        assert issubclass(RequestAborted, TempDataException)
