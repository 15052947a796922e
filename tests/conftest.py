"""Shared fixtures for medscribe tests."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from medscribe.core.config import DocxConfig, RasterLayoutConfig, SnapshotConfig
from medscribe.document import build_from_text
from medscribe.models import DocumentModel
from tests.fakes.fake_clock import FixedClock

FIXED_INSTANT = datetime(2024, 3, 15, 9, 30, 0, tzinfo=timezone.utc)


@pytest.fixture
def clock() -> FixedClock:
    """Clock pinned to 2024-03-15 09:30 UTC."""
    return FixedClock(FIXED_INSTANT)


@pytest.fixture
def pdf_config() -> RasterLayoutConfig:
    return RasterLayoutConfig()


@pytest.fixture
def docx_config() -> DocxConfig:
    return DocxConfig()


@pytest.fixture
def snapshot_config() -> SnapshotConfig:
    return SnapshotConfig()


@pytest.fixture
def scenario_text() -> str:
    """Minimal ophthalmology report used across extraction tests."""
    return (
        "[Ophthalmology Report]\n"
        "Patient Name: Jane Doe\n"
        "Age: 54\n"
        "ICD-10: H40.1\n"
        "## Findings\n"
        "- IOP elevated"
    )


@pytest.fixture
def macular_report() -> str:
    """Retina follow-up with every single-value label and no specialty tag."""
    return (
        "Patient Name: Jane Doe\n"
        "MRN: AB123\n"
        "Age: 45\n"
        "## Findings\n"
        "- Macula normal\n"
        "Primary Diagnosis: AMD\n"
        "ICD-10: H35.31"
    )


@pytest.fixture
def sample_report() -> str:
    """Full generated report covering every block kind and label."""
    return "\n".join(
        [
            "[Cardiology Report]",
            "# Cardiology Consultation",
            "",
            "Patient Name: John Smith",
            "MRN: A123456",
            "Age: 67",
            "Gender: Male",
            "Date of Examination: 2024-03-14",
            "",
            "## Assessment",
            "**Primary Diagnosis: Atrial fibrillation**",
            "ICD-10: I48.91",
            "ICD-10: I10",
            "",
            "## Plan",
            "- Start anticoagulation",
            "* Repeat ECG in 2 weeks",
            "Follow up in clinic after the repeat ECG has been reviewed by cardiology.",
        ]
    )


@pytest.fixture
def sample_model(sample_report: str) -> DocumentModel:
    return build_from_text(sample_report)
