"""Export service: builds the document model once and fans it out to formatters."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from medscribe.core.config import AppSettings
from medscribe.document import build_from_text
from medscribe.exceptions import UnsupportedFormatError
from medscribe.formatters.docx_formatter import DocxFormatter
from medscribe.formatters.pdf_formatter import PDFFormatter
from medscribe.formatters.protocols import IOutputFormatter
from medscribe.formatters.text_formatter import TextFormatter
from medscribe.models import DocumentModel, RenderedArtifact
from medscribe.naming import Clock, utc_now

log = logging.getLogger(__name__)

DEFAULT_FORMATS: tuple[str, ...] = ("pdf", "docx", "txt")


class ReportExporter:
    """Turn generated report text into downloadable artifacts."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        clock: Clock = utc_now,
        formatters: dict[str, IOutputFormatter] | None = None,
    ) -> None:
        settings = settings or AppSettings()
        self._formatters: dict[str, IOutputFormatter] = formatters or {
            "pdf": PDFFormatter(settings.pdf, clock=clock),
            "docx": DocxFormatter(settings.docx, clock=clock),
            "txt": TextFormatter(clock=clock),
        }

    @property
    def formats(self) -> list[str]:
        return sorted(self._formatters)

    def formatter_for(self, fmt: str) -> IOutputFormatter:
        try:
            return self._formatters[fmt.lower()]
        except KeyError:
            raise UnsupportedFormatError(
                f"Unsupported export format {fmt!r}; expected one of {', '.join(self.formats)}"
            ) from None

    def export_model(self, model: DocumentModel, fmt: str, **kwargs: Any) -> RenderedArtifact:
        artifact = self.formatter_for(fmt).render(model, **kwargs)
        log.info(
            "Exported %s artifact %s (%d bytes)",
            artifact.kind.value,
            artifact.filename,
            artifact.size,
        )
        return artifact

    def export(self, text: str, fmt: str, specialty: str | None = None, **kwargs: Any) -> RenderedArtifact:
        """Build the model from *text* and render it in one format."""
        return self.export_model(build_from_text(text, specialty), fmt, **kwargs)

    def export_all(
        self,
        text: str,
        specialty: str | None = None,
        formats: Iterable[str] = DEFAULT_FORMATS,
        **kwargs: Any,
    ) -> dict[str, RenderedArtifact]:
        """Render *text* in several formats from a single shared model."""
        formats = list(formats)
        for fmt in formats:
            self.formatter_for(fmt)
        model = build_from_text(text, specialty)
        return {fmt: self.export_model(model, fmt, **kwargs) for fmt in formats}
