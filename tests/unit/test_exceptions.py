"""Tests for the exception hierarchy."""

from __future__ import annotations

import pytest

from medscribe.exceptions import (
    ConfigurationError,
    EncodingFailure,
    MedscribeError,
    RenderError,
    RenderTargetMissing,
    SurfaceUnavailable,
    UnsupportedFormatError,
)


@pytest.mark.parametrize(
    "exc_type",
    [ConfigurationError, UnsupportedFormatError, RenderError, SurfaceUnavailable],
)
def test_all_derive_from_base(exc_type: type[Exception]) -> None:
    assert issubclass(exc_type, MedscribeError)


def test_render_failures_share_base() -> None:
    for exc_type in (RenderTargetMissing, SurfaceUnavailable, EncodingFailure):
        assert issubclass(exc_type, RenderError)


def test_target_missing_message() -> None:
    exc = RenderTargetMissing("report-content")
    assert "report-content" in str(exc)
    assert exc.target_id == "report-content"


def test_encoding_failure_kind() -> None:
    exc = EncodingFailure("boom", kind="raster-document")
    assert exc.kind == "raster-document"
    assert str(exc) == "boom"
