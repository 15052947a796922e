"""Pydantic data models for medscribe.

Every model is frozen: a ``DocumentModel`` is built once and then shared,
unmodified, by all renderers.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel

UNKNOWN_PATIENT = "Unknown Patient"
DEFAULT_SPECIALTY = "General"


# ── Input ────────────────────────────────────────────────────────────


class RawReport(BaseModel):
    """Generated report text plus the specialty selected by the caller, if any."""

    model_config = {"frozen": True}

    text: str = ""
    specialty: Optional[str] = None


# ── Extracted metadata ───────────────────────────────────────────────


class ExtractedFields(BaseModel):
    """Structured clinical metadata pulled from free report text.

    Field names and nullability mirror the record handed to the storage
    collaborator, see :meth:`to_record`.
    """

    model_config = {"frozen": True}

    patient_name: str = UNKNOWN_PATIENT
    patient_mrn: Optional[str] = None
    patient_age: Optional[int] = None
    patient_gender: Optional[str] = None
    diagnosis: Optional[str] = None
    exam_date: Optional[str] = None
    icd10_codes: tuple[str, ...] = ()
    specialty: str = DEFAULT_SPECIALTY

    def to_record(self, report_content: str | None = None) -> dict[str, Any]:
        """Return the row shape stored for a saved report.

        ``icd10_codes`` is ``None`` rather than an empty list when no code
        was found; ``report_type`` duplicates the specialty.
        """
        record: dict[str, Any] = {
            "patient_name": self.patient_name,
            "patient_mrn": self.patient_mrn,
            "patient_age": self.patient_age,
            "patient_gender": self.patient_gender,
            "specialty": self.specialty,
            "report_type": self.specialty,
            "diagnosis": self.diagnosis,
            "icd10_codes": list(self.icd10_codes) or None,
            "exam_date": self.exam_date,
        }
        if report_content is not None:
            record["report_content"] = report_content
        return record


# ── Content blocks ───────────────────────────────────────────────────


class BlockKind(str, Enum):
    """Style tag of one classified source line."""

    HEADING = "heading"
    BOLD_PARAGRAPH = "bold_paragraph"
    BULLET_ITEM = "bullet_item"
    PARAGRAPH = "paragraph"
    BLANK = "blank"


class ContentBlock(BaseModel):
    """One classified line of report text.

    ``text`` is the display text with markdown markers removed; ``raw`` is
    the untouched source line.  ``level`` is set for headings only.
    """

    model_config = {"frozen": True}

    kind: BlockKind
    text: str = ""
    level: Optional[int] = None
    raw: str = ""

    @classmethod
    def heading(cls, level: int, text: str, raw: str | None = None) -> ContentBlock:
        if level not in (1, 2):
            raise ValueError(f"heading level must be 1 or 2, got {level}")
        prefix = "#" * level + " "
        return cls(kind=BlockKind.HEADING, text=text, level=level, raw=raw if raw is not None else prefix + text)

    @classmethod
    def bold(cls, text: str, raw: str | None = None) -> ContentBlock:
        return cls(kind=BlockKind.BOLD_PARAGRAPH, text=text, raw=raw if raw is not None else f"**{text}**")

    @classmethod
    def bullet(cls, text: str, raw: str | None = None) -> ContentBlock:
        return cls(kind=BlockKind.BULLET_ITEM, text=text, raw=raw if raw is not None else f"- {text}")

    @classmethod
    def paragraph(cls, text: str) -> ContentBlock:
        return cls(kind=BlockKind.PARAGRAPH, text=text, raw=text)

    @classmethod
    def blank(cls, raw: str = "") -> ContentBlock:
        return cls(kind=BlockKind.BLANK, raw=raw)

    @property
    def is_blank(self) -> bool:
        return self.kind is BlockKind.BLANK


class DocumentModel(BaseModel):
    """Renderer-agnostic document: ordered blocks plus the extracted metadata."""

    model_config = {"frozen": True}

    blocks: tuple[ContentBlock, ...] = ()
    fields: ExtractedFields = ExtractedFields()
    source_text: str = ""

    @property
    def is_empty(self) -> bool:
        return not self.blocks


# ── Output artifacts ─────────────────────────────────────────────────


class ArtifactKind(str, Enum):
    RASTER_DOCUMENT = "raster-document"
    STRUCTURED_DOCUMENT = "structured-document"
    HTML_SNAPSHOT = "html-snapshot"
    PLAIN_TEXT = "plain-text"


class RenderedArtifact(BaseModel):
    """Rendered payload handed to the caller; the engine keeps no reference."""

    model_config = {"frozen": True}

    content: bytes
    filename: str
    kind: ArtifactKind
    content_type: str

    @property
    def size(self) -> int:
        return len(self.content)

    def write_to(self, directory: Path) -> Path:
        """Write the payload under *directory* using the suggested filename."""
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / self.filename
        path.write_bytes(self.content)
        return path


__all__ = [
    "UNKNOWN_PATIENT",
    "DEFAULT_SPECIALTY",
    "RawReport",
    "ExtractedFields",
    "BlockKind",
    "ContentBlock",
    "DocumentModel",
    "ArtifactKind",
    "RenderedArtifact",
]
