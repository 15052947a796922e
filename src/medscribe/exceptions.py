"""Exception hierarchy for medscribe.

Field extraction never raises: a pattern that does not match yields ``None``
or an empty value.  Only the renderers and the outer surfaces (service, CLI)
raise, and always with a subclass of ``MedscribeError``.
"""

from __future__ import annotations


class MedscribeError(Exception):
    """Base exception for all medscribe errors."""


class ConfigurationError(MedscribeError):
    """Raised when layout settings cannot produce a usable page."""


class UnsupportedFormatError(MedscribeError):
    """Raised when an export format has no registered formatter."""


class RenderError(MedscribeError):
    """Base class for renderer failures."""


class RenderTargetMissing(RenderError):
    """The visual tree the snapshot renderer was asked to print does not exist."""

    def __init__(self, target_id: str) -> None:
        super().__init__(f"Render target not found: {target_id!r}")
        self.target_id = target_id


class SurfaceUnavailable(RenderError):
    """The external print surface could not be opened."""


class EncodingFailure(RenderError):
    """The PDF or DOCX container could not be serialized.

    Fatal for the single render call only; no partial payload is returned.
    """

    def __init__(self, message: str, kind: str = "") -> None:
        super().__init__(message)
        self.kind = kind


# Short name used by the snapshot renderer's callers
TargetMissing = RenderTargetMissing

__all__ = [
    "MedscribeError",
    "ConfigurationError",
    "UnsupportedFormatError",
    "RenderError",
    "RenderTargetMissing",
    "TargetMissing",
    "SurfaceUnavailable",
    "EncodingFailure",
]
