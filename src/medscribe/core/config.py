"""Nested pydantic-settings configuration for the export engine.

Each renderer reads its own ``MEDSCRIBE_<GROUP>_*`` env vars, and
``AppSettings`` aggregates them::

    export MEDSCRIBE_PDF_PAGE_SIZE=letter
    export MEDSCRIBE_OBSERVABILITY_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class RasterLayoutConfig(BaseSettings):
    """Page geometry and type sizes for the paginated PDF renderer.

    Lengths are millimetres; font sizes are points.  Env vars use the
    ``MEDSCRIBE_PDF_`` prefix::

        export MEDSCRIBE_PDF_PAGE_SIZE=letter
        export MEDSCRIBE_PDF_MARGIN_MM=25
    """

    model_config = {"env_prefix": "MEDSCRIBE_PDF_"}

    page_size: Literal["a4", "letter"] = "a4"
    page_height_mm: float | None = Field(default=None, gt=0.0)
    margin_mm: float = Field(default=20.0, gt=0.0, le=80.0)
    font_family: str = "Helvetica"
    title_font_size: int = Field(default=18, ge=6, le=72)
    heading1_font_size: int = Field(default=16, ge=6, le=72)
    heading2_font_size: int = Field(default=14, ge=6, le=72)
    body_font_size: int = Field(default=11, ge=6, le=72)
    footer_font_size: int = Field(default=8, ge=6, le=72)
    line_height_mm: float = Field(default=6.0, gt=0.0)
    heading1_line_height_mm: float = Field(default=10.0, gt=0.0)
    heading2_line_height_mm: float = Field(default=8.0, gt=0.0)
    blank_gap_mm: float = Field(default=4.0, ge=0.0)
    bullet_indent_mm: float = Field(default=5.0, ge=0.0)
    include_footer: bool = True


class DocxConfig(BaseSettings):
    """Word document output settings.

    Env vars use ``MEDSCRIBE_DOCX_`` prefix.
    """

    model_config = {"env_prefix": "MEDSCRIBE_DOCX_"}

    title: str = "MEDICAL REPORT"
    margin_inches: float = Field(default=1.0, gt=0.0, le=3.0)
    font_name: str = "Calibri"
    body_font_size: int = Field(default=11, ge=6, le=72)
    author: str = "medscribe"


class SnapshotConfig(BaseSettings):
    """Print snapshot settings.

    Env vars use ``MEDSCRIBE_SNAPSHOT_`` prefix.
    """

    model_config = {"env_prefix": "MEDSCRIBE_SNAPSHOT_"}

    document_title: str = "Medical Report - Print"
    page_size: str = "A4"
    margin_mm: int = Field(default=20, ge=0, le=80)


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Env vars use ``MEDSCRIBE_OBSERVABILITY_`` prefix.
    """

    model_config = {"env_prefix": "MEDSCRIBE_OBSERVABILITY_"}

    log_level: str = "INFO"
    json_logs: bool | None = None


class AppSettings(BaseSettings):
    """Top-level settings aggregating all sub-configs."""

    pdf: RasterLayoutConfig = RasterLayoutConfig()
    docx: DocxConfig = DocxConfig()
    snapshot: SnapshotConfig = SnapshotConfig()
    observability: ObservabilityConfig = ObservabilityConfig()
