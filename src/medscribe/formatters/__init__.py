"""Output formatters for rendering a ``DocumentModel``.

Usage::

    from medscribe.formatters import PDFFormatter, DocxFormatter

    pdf_bytes = PDFFormatter().format(model)
    artifact = DocxFormatter().render(model)
"""

from __future__ import annotations

from typing import Any

from medscribe.formatters.html_snapshot import (
    BrowserPrintSurface,
    PrintSurface,
    ProvidesRenderableMarkup,
    SnapshotRenderer,
    StaticMarkupSource,
    render_printable,
)
from medscribe.formatters.protocols import IOutputFormatter
from medscribe.formatters.text_formatter import TextFormatter

__all__ = [
    "BrowserPrintSurface",
    "DocxFormatter",
    "IOutputFormatter",
    "PDFFormatter",
    "PrintSurface",
    "ProvidesRenderableMarkup",
    "SnapshotRenderer",
    "StaticMarkupSource",
    "TextFormatter",
    "render_printable",
]


def __getattr__(name: str) -> Any:
    """Lazy-load the binary formatters so reportlab / python-docx load on first use."""
    if name == "PDFFormatter":
        from medscribe.formatters.pdf_formatter import PDFFormatter

        return PDFFormatter
    if name == "DocxFormatter":
        from medscribe.formatters.docx_formatter import DocxFormatter

        return DocxFormatter
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
