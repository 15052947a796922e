"""Paginated PDF output formatter using reportlab.

Rendering happens in two passes.  :meth:`PDFFormatter.layout` walks the
document model with a vertical cursor and decides, line by line, where each
piece of text lands and when a new page starts.  :meth:`PDFFormatter.format`
then draws that layout onto a reportlab canvas.  Keeping pagination as a
pure pass makes page breaks inspectable without parsing PDF bytes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from io import BytesIO
from pathlib import Path
from typing import Any, Literal

from reportlab.lib.colors import HexColor
from reportlab.lib.pagesizes import A4, LETTER
from reportlab.lib.units import mm
from reportlab.lib.utils import simpleSplit
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfgen import canvas as rl_canvas

from medscribe.core.config import RasterLayoutConfig
from medscribe.exceptions import ConfigurationError, EncodingFailure
from medscribe.formatters.pdf_styles import (
    BODY_TEXT_COLOR,
    BULLET_GLYPH,
    DATE_ADVANCE_MM,
    DATE_FONT_SIZE,
    GENERATED_LABEL,
    HEADER_GAP_MM,
    HEADING_TEXT_COLOR,
    MUTED_TEXT_COLOR,
    REPORT_TITLE,
    TITLE_ADVANCE_MM,
    TITLE_TEXT_COLOR,
    UNICODE_REPLACEMENTS,
)
from medscribe.models import ArtifactKind, BlockKind, ContentBlock, DocumentModel, RenderedArtifact
from medscribe.naming import Clock, long_date, report_filename, utc_now

log = logging.getLogger(__name__)

_PAGE_SIZES = {"a4": A4, "letter": LETTER}


# Encoding of reportlab's standard Type 1 fonts (WinAnsiEncoding).
# Characters outside it would be drawn from Symbol/ZapfDingbats instead.
_FONT_ENCODING = "cp1252"


def _drawable(char: str) -> bool:
    try:
        char.encode(_FONT_ENCODING)
    except UnicodeEncodeError:
        return False
    return True


def _sanitize_text(text: str) -> str:
    """Map typographic characters to ASCII and replace undrawable ones with ``?``."""
    for char, replacement in UNICODE_REPLACEMENTS.items():
        text = text.replace(char, replacement)
    unsupported = sorted({char for char in text if not _drawable(char)})
    if unsupported:
        log.warning(
            "Replacing characters the PDF font cannot draw: %s",
            ", ".join(f"U+{ord(char):04X}" for char in unsupported),
        )
        text = "".join(char if _drawable(char) else "?" for char in text)
    return text


# ── Layout primitives ────────────────────────────────────────────────


@dataclass(frozen=True)
class PageGeometry:
    """Page dimensions in points; ``cursor`` values are measured from the top edge."""

    width: float
    height: float
    margin: float

    @property
    def top(self) -> float:
        return self.margin

    @property
    def bottom(self) -> float:
        """Lowest cursor position a line may be placed at."""
        return self.height - self.margin

    @property
    def usable_width(self) -> float:
        return self.width - 2 * self.margin


@dataclass(frozen=True)
class PlacedLine:
    """One line of text fixed to a page position."""

    text: str
    x: float
    cursor: float
    font_name: str
    font_size: float
    color: str = BODY_TEXT_COLOR
    align: Literal["left", "center"] = "left"
    bullet: bool = False


@dataclass
class PageLayout:
    number: int
    lines: list[PlacedLine] = field(default_factory=list)

    @property
    def max_cursor(self) -> float:
        return max((line.cursor for line in self.lines), default=0.0)


class _Paginator:
    """Vertical cursor over an unbounded sequence of pages."""

    def __init__(self, geometry: PageGeometry) -> None:
        self._geometry = geometry
        self.pages: list[PageLayout] = [PageLayout(number=1)]
        self.cursor = geometry.top

    @property
    def current(self) -> PageLayout:
        return self.pages[-1]

    def _new_page(self) -> None:
        self.pages.append(PageLayout(number=len(self.pages) + 1))
        self.cursor = self._geometry.top

    def place(self, advance: float, text: str, **style: Any) -> None:
        """Advance by *advance* and place *text* at the new cursor.

        Breaks to a new page first when the line would fall below the
        usable extent.  An empty page that overflowed on blank gaps alone
        is reused instead of leaving a blank page behind.
        """
        if self.cursor + advance > self._geometry.bottom:
            if self.current.lines:
                self._new_page()
            else:
                self.cursor = self._geometry.top
        self.cursor += advance
        self.current.lines.append(PlacedLine(text=text, cursor=self.cursor, **style))

    def skip(self, gap: float) -> None:
        self.cursor += gap


# ── PDFFormatter ─────────────────────────────────────────────────────


class PDFFormatter:
    """Renders a ``DocumentModel`` as a paginated, fixed-geometry PDF."""

    def __init__(self, config: RasterLayoutConfig | None = None, clock: Clock = utc_now) -> None:
        self._config = config or RasterLayoutConfig()
        self._clock = clock
        self._geometry = self._build_geometry()
        self._regular_font = self._config.font_family
        self._bold_font = f"{self._config.font_family}-Bold"
        for font_name in (self._regular_font, self._bold_font):
            try:
                pdfmetrics.getFont(font_name)
            except KeyError as exc:
                raise ConfigurationError(f"Unknown PDF font: {font_name!r}") from exc

    # ── Public API ───────────────────────────────────────────────────

    @property
    def content_type(self) -> str:
        return "application/pdf"

    @property
    def kind(self) -> ArtifactKind:
        return ArtifactKind.RASTER_DOCUMENT

    @property
    def geometry(self) -> PageGeometry:
        return self._geometry

    def render(self, model: DocumentModel, **kwargs: Any) -> RenderedArtifact:
        """Render *model* and wrap the bytes with a suggested filename.

        ``patient_name`` overrides the extracted name used in the filename.
        """
        content = self.format(model, **kwargs)
        patient_name = kwargs.get("patient_name") or model.fields.patient_name
        return RenderedArtifact(
            content=content,
            filename=report_filename(patient_name, "pdf", self._clock),
            kind=self.kind,
            content_type=self.content_type,
        )

    def format(self, model: DocumentModel, **kwargs: Any) -> bytes:
        """Render *model* to PDF bytes."""
        try:
            pages = self.layout(model)
            data = self._draw(pages, model)
        except Exception as exc:
            raise EncodingFailure(f"PDF serialization failed: {exc}", kind=self.kind.value) from exc
        log.debug("Rendered PDF: %d page(s), %d bytes", len(pages), len(data))
        return data

    def format_to_file(self, model: DocumentModel, path: Path, **kwargs: Any) -> Path:
        """Write PDF to *path* and return it."""
        path.write_bytes(self.format(model, **kwargs))
        return path

    def layout(self, model: DocumentModel) -> list[PageLayout]:
        """Paginate *model* without drawing anything."""
        cfg = self._config
        paginator = _Paginator(self._geometry)
        self._layout_header(paginator)

        for block in model.blocks:
            if block.kind is BlockKind.HEADING:
                if block.level == 1:
                    size, advance = cfg.heading1_font_size, cfg.heading1_line_height_mm * mm
                else:
                    size, advance = cfg.heading2_font_size, cfg.heading2_line_height_mm * mm
                paginator.place(
                    advance,
                    text=_sanitize_text(block.text),
                    x=self._geometry.margin,
                    font_name=self._bold_font,
                    font_size=size,
                    color=HEADING_TEXT_COLOR,
                )
            elif block.kind is BlockKind.BLANK:
                paginator.skip(cfg.blank_gap_mm * mm)
            else:
                self._layout_wrapped(paginator, block)

        return paginator.pages

    # ── Layout helpers ───────────────────────────────────────────────

    def _build_geometry(self) -> PageGeometry:
        cfg = self._config
        width, height = _PAGE_SIZES[cfg.page_size]
        if cfg.page_height_mm is not None:
            height = cfg.page_height_mm * mm
        geometry = PageGeometry(width=float(width), height=float(height), margin=cfg.margin_mm * mm)

        tallest = max(
            cfg.line_height_mm,
            cfg.heading1_line_height_mm,
            cfg.heading2_line_height_mm,
            TITLE_ADVANCE_MM,
            DATE_ADVANCE_MM,
        ) * mm
        if geometry.top + tallest > geometry.bottom:
            raise ConfigurationError(
                f"Page height {height / mm:.1f}mm with {cfg.margin_mm}mm margins "
                "cannot hold a single line"
            )
        if geometry.usable_width <= cfg.bullet_indent_mm * mm:
            raise ConfigurationError("Margins leave no horizontal room for text")
        return geometry

    def _layout_header(self, paginator: _Paginator) -> None:
        center = self._geometry.width / 2
        paginator.place(
            TITLE_ADVANCE_MM * mm,
            text=REPORT_TITLE,
            x=center,
            font_name=self._bold_font,
            font_size=self._config.title_font_size,
            color=TITLE_TEXT_COLOR,
            align="center",
        )
        paginator.place(
            DATE_ADVANCE_MM * mm,
            text=f"{GENERATED_LABEL}: {long_date(self._clock())}",
            x=center,
            font_name=self._regular_font,
            font_size=DATE_FONT_SIZE,
            color=MUTED_TEXT_COLOR,
            align="center",
        )
        paginator.skip(HEADER_GAP_MM * mm)

    def _layout_wrapped(self, paginator: _Paginator, block: ContentBlock) -> None:
        """Wrap a body block to the usable width; each wrapped line is placed separately."""
        cfg = self._config
        font = self._bold_font if block.kind is BlockKind.BOLD_PARAGRAPH else self._regular_font
        size = cfg.body_font_size
        x = self._geometry.margin
        width = self._geometry.usable_width
        is_bullet = block.kind is BlockKind.BULLET_ITEM
        if is_bullet:
            x += cfg.bullet_indent_mm * mm
            width -= cfg.bullet_indent_mm * mm

        wrapped = simpleSplit(_sanitize_text(block.text), font, size, width)
        for i, text in enumerate(wrapped):
            paginator.place(
                cfg.line_height_mm * mm,
                text=text,
                x=x,
                font_name=font,
                font_size=size,
                bullet=is_bullet and i == 0,
            )

    # ── Drawing ──────────────────────────────────────────────────────

    def _draw(self, pages: list[PageLayout], model: DocumentModel) -> bytes:
        buffer = BytesIO()
        geometry = self._geometry
        canvas = rl_canvas.Canvas(
            buffer,
            pagesize=(geometry.width, geometry.height),
            invariant=1,
            pageCompression=0,
        )
        canvas.setTitle(f"{REPORT_TITLE} - {model.fields.patient_name}")
        canvas.setSubject(model.fields.specialty)
        canvas.setCreator("medscribe")

        total = len(pages)
        for page in pages:
            for line in page.lines:
                self._draw_line(canvas, line)
            if self._config.include_footer:
                self._footer(canvas, page.number, total)
            canvas.showPage()
        canvas.save()
        return buffer.getvalue()

    def _draw_line(self, canvas: Any, line: PlacedLine) -> None:
        y = self._geometry.height - line.cursor
        canvas.setFillColor(HexColor(line.color))
        canvas.setFont(line.font_name, line.font_size)
        if line.align == "center":
            canvas.drawCentredString(line.x, y, line.text)
        else:
            canvas.drawString(line.x, y, line.text)
        if line.bullet:
            canvas.drawString(self._geometry.margin, y, BULLET_GLYPH)

    def _footer(self, canvas: Any, page_number: int, total: int) -> None:
        canvas.saveState()
        canvas.setFont(self._regular_font, self._config.footer_font_size)
        canvas.setFillColor(HexColor(MUTED_TEXT_COLOR))
        canvas.drawCentredString(
            self._geometry.width / 2,
            self._geometry.margin / 2,
            f"Page {page_number} of {total}",
        )
        canvas.restoreState()
