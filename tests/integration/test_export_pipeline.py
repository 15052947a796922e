"""End-to-end tests: report text through extraction, model building and every renderer."""

from __future__ import annotations

from io import BytesIO
from pathlib import Path

import pytest

from medscribe.core.config import AppSettings
from medscribe.exceptions import UnsupportedFormatError
from medscribe.formatters.text_formatter import TextFormatter
from medscribe.models import ArtifactKind
from medscribe.naming import timestamp_ms
from medscribe.services.export_service import DEFAULT_FORMATS, ReportExporter
from tests.fakes.fake_clock import FixedClock

pytest.importorskip("reportlab")
docx = pytest.importorskip("docx")


@pytest.fixture
def exporter(clock: FixedClock) -> ReportExporter:
    return ReportExporter(AppSettings(), clock=clock)


class TestReportExporter:
    def test_formats(self, exporter: ReportExporter) -> None:
        assert exporter.formats == ["docx", "pdf", "txt"]

    def test_export_all(self, exporter: ReportExporter, scenario_text: str, clock: FixedClock) -> None:
        artifacts = exporter.export_all(scenario_text)
        assert list(artifacts) == list(DEFAULT_FORMATS)
        ts = timestamp_ms(clock)
        assert artifacts["pdf"].filename == f"jane_doe_report_{ts}.pdf"
        assert artifacts["docx"].filename == f"jane_doe_report_{ts}.docx"
        assert artifacts["txt"].filename == f"medical-report-{ts}.txt"
        assert artifacts["pdf"].content.startswith(b"%PDF-")
        assert artifacts["txt"].content == scenario_text.encode("utf-8")

    def test_docx_carries_extracted_front_matter(self, exporter: ReportExporter, scenario_text: str) -> None:
        artifact = exporter.export(scenario_text, "docx")
        paragraphs = docx.Document(BytesIO(artifact.content)).paragraphs
        assert paragraphs[1].text == "Patient Name: Jane Doe"
        assert paragraphs[2].text == "Specialty: Ophthalmology"
        assert paragraphs[-2].style.name == "Heading 2"
        assert paragraphs[-1].style.name == "List Bullet"

    def test_specialty_override(self, exporter: ReportExporter, scenario_text: str) -> None:
        artifact = exporter.export(scenario_text, "DOCX", specialty="Glaucoma Clinic")
        paragraphs = docx.Document(BytesIO(artifact.content)).paragraphs
        assert paragraphs[2].text == "Specialty: Glaucoma Clinic"

    def test_patient_name_override_in_filename(self, exporter: ReportExporter, scenario_text: str) -> None:
        artifact = exporter.export(scenario_text, "pdf", patient_name="Mary-Ann Lee")
        assert artifact.filename.startswith("mary_ann_lee_report_")

    def test_unsupported_format(self, exporter: ReportExporter, scenario_text: str) -> None:
        with pytest.raises(UnsupportedFormatError):
            exporter.export(scenario_text, "rtf")

    def test_export_all_validates_before_rendering(self, exporter: ReportExporter, scenario_text: str) -> None:
        with pytest.raises(UnsupportedFormatError):
            exporter.export_all(scenario_text, formats=["pdf", "odt"])

    def test_empty_report(self, exporter: ReportExporter) -> None:
        artifacts = exporter.export_all("")
        assert artifacts["pdf"].filename.startswith("unknown_patient_report_")
        assert artifacts["txt"].content == b""

    def test_write_artifacts(self, exporter: ReportExporter, sample_report: str, tmp_path: Path) -> None:
        for artifact in exporter.export_all(sample_report).values():
            path = artifact.write_to(tmp_path)
            assert path.stat().st_size == artifact.size

    def test_custom_formatter_registry(self, clock: FixedClock, scenario_text: str) -> None:
        exporter = ReportExporter(formatters={"txt": TextFormatter(clock)})
        assert exporter.formats == ["txt"]
        assert exporter.export(scenario_text, "txt").kind is ArtifactKind.PLAIN_TEXT
        with pytest.raises(UnsupportedFormatError):
            exporter.export(scenario_text, "pdf")
