"""medscribe: clinical report field extraction and PDF / DOCX / HTML export.

Usage::

    from medscribe import build_from_text, PDFFormatter, DocxFormatter

    model = build_from_text(report_text, specialty="Ophthalmology")
    pdf = PDFFormatter().render(model)
    docx = DocxFormatter().render(model)
"""

from __future__ import annotations

from typing import Any

from medscribe.core.config import AppSettings
from medscribe.document import build, build_from_report, build_from_text
from medscribe.exceptions import (
    EncodingFailure,
    MedscribeError,
    RenderTargetMissing,
    SurfaceUnavailable,
    TargetMissing,
)
from medscribe.extraction import extract, parse
from medscribe.formatters.html_snapshot import (
    PrintSurface,
    ProvidesRenderableMarkup,
    SnapshotRenderer,
    render_printable,
)
from medscribe.models import (
    ArtifactKind,
    BlockKind,
    ContentBlock,
    DocumentModel,
    ExtractedFields,
    RawReport,
    RenderedArtifact,
)
from medscribe.naming import sanitize

__all__ = [
    "AppSettings",
    "ArtifactKind",
    "BlockKind",
    "ContentBlock",
    "DocumentModel",
    "DocxFormatter",
    "EncodingFailure",
    "ExtractedFields",
    "MedscribeError",
    "PDFFormatter",
    "PrintSurface",
    "ProvidesRenderableMarkup",
    "RawReport",
    "RenderTargetMissing",
    "RenderedArtifact",
    "ReportExporter",
    "SnapshotRenderer",
    "SurfaceUnavailable",
    "TargetMissing",
    "build",
    "build_from_report",
    "build_from_text",
    "extract",
    "parse",
    "render_printable",
    "sanitize",
]

_LAZY_NAMES = {"PDFFormatter", "DocxFormatter", "ReportExporter"}


def __getattr__(name: str) -> Any:
    if name in _LAZY_NAMES:
        if name == "ReportExporter":
            from medscribe.services.export_service import ReportExporter

            return ReportExporter
        from medscribe import formatters

        return getattr(formatters, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
