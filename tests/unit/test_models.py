"""Tests for medscribe data models."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from medscribe.models import (
    ArtifactKind,
    BlockKind,
    ContentBlock,
    DocumentModel,
    ExtractedFields,
    RawReport,
    RenderedArtifact,
)


class TestExtractedFields:
    def test_defaults(self) -> None:
        fields = ExtractedFields()
        assert fields.patient_name == "Unknown Patient"
        assert fields.specialty == "General"
        assert fields.icd10_codes == ()

    def test_frozen(self) -> None:
        fields = ExtractedFields()
        with pytest.raises(ValidationError):
            fields.patient_name = "Someone"  # type: ignore[misc]

    def test_to_record(self) -> None:
        fields = ExtractedFields(
            patient_name="Jane Doe",
            patient_age=54,
            icd10_codes=("H40.1",),
            specialty="Ophthalmology",
        )
        record = fields.to_record(report_content="body")
        assert record["patient_name"] == "Jane Doe"
        assert record["patient_age"] == 54
        assert record["icd10_codes"] == ["H40.1"]
        assert record["report_type"] == "Ophthalmology"
        assert record["specialty"] == "Ophthalmology"
        assert record["report_content"] == "body"
        assert record["patient_mrn"] is None

    def test_to_record_without_content(self) -> None:
        assert "report_content" not in ExtractedFields().to_record()


class TestContentBlock:
    def test_heading_factory(self) -> None:
        block = ContentBlock.heading(2, "Findings")
        assert block.kind is BlockKind.HEADING
        assert block.raw == "## Findings"

    @pytest.mark.parametrize("level", [0, 3])
    def test_heading_level_restricted(self, level: int) -> None:
        with pytest.raises(ValueError):
            ContentBlock.heading(level, "x")

    def test_factories(self) -> None:
        assert ContentBlock.bold("B").raw == "**B**"
        assert ContentBlock.bullet("item").raw == "- item"
        assert ContentBlock.paragraph("p").kind is BlockKind.PARAGRAPH
        assert ContentBlock.blank().is_blank

    def test_kind_serializes_as_string(self) -> None:
        assert ContentBlock.paragraph("p").model_dump(mode="json")["kind"] == "paragraph"


class TestDocumentModel:
    def test_empty(self) -> None:
        assert DocumentModel().is_empty

    def test_raw_report_defaults(self) -> None:
        report = RawReport(text="x")
        assert report.specialty is None


class TestRenderedArtifact:
    def test_size_and_write(self, tmp_path: Path) -> None:
        artifact = RenderedArtifact(
            content=b"hello",
            filename="a.txt",
            kind=ArtifactKind.PLAIN_TEXT,
            content_type="text/plain",
        )
        assert artifact.size == 5
        path = artifact.write_to(tmp_path / "out")
        assert path.read_bytes() == b"hello"
        assert path.name == "a.txt"
