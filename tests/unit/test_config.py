"""Tests for settings defaults and env overrides."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from medscribe.core.config import (
    AppSettings,
    DocxConfig,
    ObservabilityConfig,
    RasterLayoutConfig,
    SnapshotConfig,
)


class TestRasterLayoutConfigDefaults:
    def test_page_size_default(self) -> None:
        assert RasterLayoutConfig().page_size == "a4"

    def test_margin_default(self) -> None:
        assert RasterLayoutConfig().margin_mm == 20.0

    def test_font_sizes(self) -> None:
        cfg = RasterLayoutConfig()
        assert (cfg.title_font_size, cfg.heading1_font_size, cfg.heading2_font_size, cfg.body_font_size) == (
            18,
            16,
            14,
            11,
        )

    def test_page_height_override_unset(self) -> None:
        assert RasterLayoutConfig().page_height_mm is None


class TestRasterLayoutConfigEnv:
    def test_page_size_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MEDSCRIBE_PDF_PAGE_SIZE", "letter")
        assert RasterLayoutConfig().page_size == "letter"

    def test_margin_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MEDSCRIBE_PDF_MARGIN_MM", "25")
        assert RasterLayoutConfig().margin_mm == 25.0

    def test_invalid_page_size(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MEDSCRIBE_PDF_PAGE_SIZE", "tabloid")
        with pytest.raises(ValidationError):
            RasterLayoutConfig()

    def test_non_positive_height_rejected(self) -> None:
        with pytest.raises(ValidationError):
            RasterLayoutConfig(page_height_mm=0)


class TestOtherConfigs:
    def test_docx_defaults(self) -> None:
        cfg = DocxConfig()
        assert cfg.title == "MEDICAL REPORT"
        assert cfg.margin_inches == 1.0

    def test_docx_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MEDSCRIBE_DOCX_FONT_NAME", "Arial")
        assert DocxConfig().font_name == "Arial"

    def test_snapshot_defaults(self) -> None:
        assert SnapshotConfig().document_title == "Medical Report - Print"

    def test_observability_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MEDSCRIBE_OBSERVABILITY_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("MEDSCRIBE_OBSERVABILITY_JSON_LOGS", "true")
        cfg = ObservabilityConfig()
        assert cfg.log_level == "DEBUG"
        assert cfg.json_logs is True

    def test_app_settings_groups(self) -> None:
        settings = AppSettings()
        assert isinstance(settings.pdf, RasterLayoutConfig)
        assert isinstance(settings.docx, DocxConfig)
        assert isinstance(settings.snapshot, SnapshotConfig)
        assert isinstance(settings.observability, ObservabilityConfig)
