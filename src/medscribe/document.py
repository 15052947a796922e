"""Builds the shared, read-only document model consumed by every renderer."""

from __future__ import annotations

from collections.abc import Iterable

from medscribe.extraction.blocks import parse
from medscribe.extraction.fields import extract
from medscribe.models import ContentBlock, DocumentModel, ExtractedFields, RawReport


def build(
    blocks: Iterable[ContentBlock],
    fields: ExtractedFields,
    source_text: str = "",
) -> DocumentModel:
    """Attach *fields* to *blocks*; block content is passed through untouched."""
    return DocumentModel(blocks=tuple(blocks), fields=fields, source_text=source_text)


def build_from_text(text: str, specialty: str | None = None) -> DocumentModel:
    """Extract, parse and build in one call."""
    return build(parse(text), extract(text, specialty), source_text=text)


def build_from_report(report: RawReport) -> DocumentModel:
    return build_from_text(report.text, report.specialty)
