"""DOCX output formatter using python-docx.

Block kinds map one-to-one onto native Word paragraph styles, so the word
processor reflows the document itself and no pagination happens here.
"""

from __future__ import annotations

import io
import logging
import zipfile
from pathlib import Path
from typing import Any

from docx import Document as DocxDocument
from docx.document import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.shared import Inches, Pt

from medscribe.core.config import DocxConfig
from medscribe.exceptions import EncodingFailure
from medscribe.models import ArtifactKind, BlockKind, ContentBlock, DocumentModel, RenderedArtifact
from medscribe.naming import Clock, long_date, report_filename, utc_now

log = logging.getLogger(__name__)

DOCX_CONTENT_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

# (space_before, space_after) in points per block kind
_HEADING1_SPACING = (Pt(20), Pt(10))
_HEADING2_SPACING = (Pt(15), Pt(10))
_BOLD_SPACING = (None, Pt(5))
_BULLET_SPACING = (None, Pt(5))
_PARAGRAPH_SPACING = (None, Pt(7.5))
_BLANK_SPACING = (None, Pt(6))

# Earliest timestamp a zip entry can carry
_ZIP_EPOCH = (1980, 1, 1, 0, 0, 0)


def _restamp_archive(data: bytes, date_time: tuple[int, ...]) -> bytes:
    """Rewrite every zip entry with *date_time* so equal documents give equal bytes."""
    out = io.BytesIO()
    with zipfile.ZipFile(io.BytesIO(data)) as src, zipfile.ZipFile(out, "w") as dst:
        for info in src.infolist():
            entry = zipfile.ZipInfo(info.filename, date_time=date_time)
            entry.compress_type = info.compress_type
            entry.external_attr = info.external_attr
            dst.writestr(entry, src.read(info.filename))
    return out.getvalue()


class DocxFormatter:
    """Renders a ``DocumentModel`` as a Word document with front matter."""

    def __init__(self, config: DocxConfig | None = None, clock: Clock = utc_now) -> None:
        self._config = config or DocxConfig()
        self._clock = clock

    @property
    def content_type(self) -> str:
        return DOCX_CONTENT_TYPE

    @property
    def kind(self) -> ArtifactKind:
        return ArtifactKind.STRUCTURED_DOCUMENT

    def render(self, model: DocumentModel, **kwargs: Any) -> RenderedArtifact:
        """Render *model* with optional front-matter overrides.

        Keyword overrides: ``patient_name``, ``specialty``, ``report_date``.
        """
        content = self.format(model, **kwargs)
        patient_name = kwargs.get("patient_name") or model.fields.patient_name
        return RenderedArtifact(
            content=content,
            filename=report_filename(patient_name, "docx", self._clock),
            kind=self.kind,
            content_type=self.content_type,
        )

    def format(self, model: DocumentModel, **kwargs: Any) -> bytes:
        """Render *model* to DOCX bytes."""
        try:
            doc = self.build_document(model, **kwargs)
            buf = io.BytesIO()
            doc.save(buf)
            stamp = max(tuple(self._clock().timetuple()[:6]), _ZIP_EPOCH)
            data = _restamp_archive(buf.getvalue(), stamp)
        except Exception as exc:
            raise EncodingFailure(f"DOCX serialization failed: {exc}", kind=self.kind.value) from exc
        log.debug("Rendered DOCX: %d block(s), %d bytes", len(model.blocks), len(data))
        return data

    def format_to_file(self, model: DocumentModel, path: Path, **kwargs: Any) -> Path:
        path.write_bytes(self.format(model, **kwargs))
        return path

    def build_document(self, model: DocumentModel, **kwargs: Any) -> Document:
        """Build the python-docx document object without serializing it."""
        cfg = self._config
        fields = model.fields
        patient_name = kwargs.get("patient_name") or fields.patient_name
        specialty = kwargs.get("specialty") or fields.specialty
        report_date = kwargs.get("report_date") or fields.exam_date or long_date(self._clock())

        doc = DocxDocument()
        for section in doc.sections:
            section.left_margin = Inches(cfg.margin_inches)
            section.right_margin = Inches(cfg.margin_inches)
            section.top_margin = Inches(cfg.margin_inches)
            section.bottom_margin = Inches(cfg.margin_inches)

        normal = doc.styles["Normal"]
        normal.font.name = cfg.font_name
        normal.font.size = Pt(cfg.body_font_size)

        props = doc.core_properties
        props.title = f"{cfg.title} - {patient_name}"
        props.subject = specialty
        props.author = cfg.author
        props.keywords = ", ".join(fields.icd10_codes)
        props.created = self._clock()
        props.modified = self._clock()

        self._add_front_matter(doc, patient_name, specialty, report_date)
        for block in model.blocks:
            self._add_block(doc, block)
        return doc

    # ── Front matter ─────────────────────────────────────────────────

    def _add_front_matter(self, doc: Document, patient_name: str, specialty: str, report_date: str) -> None:
        title = doc.add_heading(self._config.title, level=1)
        title.alignment = WD_ALIGN_PARAGRAPH.CENTER
        title.paragraph_format.space_after = Pt(20)

        self._add_labeled(doc, "Patient Name", patient_name, Pt(10))
        self._add_labeled(doc, "Specialty", specialty, Pt(10))
        self._add_labeled(doc, "Date", report_date, Pt(20))

    @staticmethod
    def _add_labeled(doc: Document, label: str, value: str, space_after: Pt) -> None:
        p = doc.add_paragraph()
        p.add_run(f"{label}: ").bold = True
        p.add_run(value)
        p.paragraph_format.space_after = space_after

    # ── Body ─────────────────────────────────────────────────────────

    def _add_block(self, doc: Document, block: ContentBlock) -> None:
        if block.kind is BlockKind.HEADING:
            p = doc.add_heading(block.text, level=block.level or 1)
            spacing = _HEADING1_SPACING if block.level == 1 else _HEADING2_SPACING
        elif block.kind is BlockKind.BOLD_PARAGRAPH:
            p = doc.add_paragraph()
            p.add_run(block.text).bold = True
            spacing = _BOLD_SPACING
        elif block.kind is BlockKind.BULLET_ITEM:
            p = doc.add_paragraph(block.text, style="List Bullet")
            spacing = _BULLET_SPACING
        elif block.kind is BlockKind.BLANK:
            p = doc.add_paragraph()
            spacing = _BLANK_SPACING
        else:
            p = doc.add_paragraph(block.text)
            spacing = _PARAGRAPH_SPACING

        before, after = spacing
        if before is not None:
            p.paragraph_format.space_before = before
        p.paragraph_format.space_after = after
