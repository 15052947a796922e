"""Field extraction and block parsing for generated report text."""

from __future__ import annotations

from medscribe.extraction.blocks import classify_line, parse, split_lines
from medscribe.extraction.fields import extract, extract_patient_name, extract_specialty

__all__ = [
    "classify_line",
    "extract",
    "extract_patient_name",
    "extract_specialty",
    "parse",
    "split_lines",
]
