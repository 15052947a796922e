"""Pattern-based extraction of clinical fields from generated report text.

Every rule is case-insensitive and first-match-wins over the whole text.
Extraction is total: a rule that finds nothing leaves its field at the
default (``None``, an empty tuple, or the documented sentinel).
"""

from __future__ import annotations

import logging
import re
from typing import Optional, Pattern

from medscribe.models import DEFAULT_SPECIALTY, UNKNOWN_PATIENT, ExtractedFields

log = logging.getLogger(__name__)

# Label values stop at the end of their line; ``[ \t]*`` keeps an empty
# label from borrowing the next line's text.

PATIENT_NAME_PATTERN: Pattern[str] = re.compile(
    r"(?:Patient Name|Full Patient Name|Full Name):[ \t]*([^\r\n]*)",
    re.IGNORECASE,
)
SPECIALTY_BRACKET_PATTERN: Pattern[str] = re.compile(r"\[(.*?)\s+Report\]", re.IGNORECASE)
SPECIALTY_LABEL_PATTERN: Pattern[str] = re.compile(r"\bSpecialty:[ \t]*([^\r\n]*)", re.IGNORECASE)
MRN_PATTERN: Pattern[str] = re.compile(r"\bMRN[:\s]+([A-Z0-9]+)", re.IGNORECASE)
AGE_PATTERN: Pattern[str] = re.compile(r"\bAge:[ \t]*(\d+)", re.IGNORECASE)
GENDER_PATTERN: Pattern[str] = re.compile(r"\bGender:[ \t]*(\w+)", re.IGNORECASE)
DIAGNOSIS_PATTERN: Pattern[str] = re.compile(r"\bPrimary Diagnosis:[ \t]*([^\r\n]*)", re.IGNORECASE)
EXAM_DATE_PATTERN: Pattern[str] = re.compile(r"\bDate of Examination:[ \t]*([^\r\n]*)", re.IGNORECASE)
ICD10_PATTERN: Pattern[str] = re.compile(r"\bICD-10:[ \t]*([A-Z0-9.]+)", re.IGNORECASE)


def _first(pattern: Pattern[str], text: str) -> Optional[str]:
    """Return the first non-blank trimmed capture of *pattern*, else ``None``."""
    for match in pattern.finditer(text):
        value = match.group(1).strip()
        if value:
            return value
    return None


def extract_patient_name(text: str) -> str:
    name = _first(PATIENT_NAME_PATTERN, text)
    if name is None:
        log.debug("No patient name label found; using %r", UNKNOWN_PATIENT)
        return UNKNOWN_PATIENT
    return name


def extract_specialty(text: str, override: str | None = None) -> str:
    """Resolve the report specialty.

    Precedence: caller override, then a ``[<Specialty> Report]`` tag, then a
    ``Specialty:`` label, then ``"General"``.  A specialty the caller already
    selected is never replaced by text that happens to match.
    """
    if override and override.strip():
        return override.strip()
    for pattern in (SPECIALTY_BRACKET_PATTERN, SPECIALTY_LABEL_PATTERN):
        value = _first(pattern, text)
        if value is not None:
            return value
    return DEFAULT_SPECIALTY


def extract_age(text: str) -> Optional[int]:
    raw = _first(AGE_PATTERN, text)
    if raw is None:
        return None
    try:
        return int(raw)
    except ValueError:
        log.debug("Unparseable age value %r", raw)
        return None


def extract_icd10_codes(text: str) -> tuple[str, ...]:
    """All ICD-10 codes in order of appearance, duplicates included."""
    return tuple(m.group(1).strip() for m in ICD10_PATTERN.finditer(text))


def extract(text: str, specialty: str | None = None) -> ExtractedFields:
    """Extract every structured field from *text*.

    Pure and idempotent: the same input always yields an equal result.
    """
    fields = ExtractedFields(
        patient_name=extract_patient_name(text),
        patient_mrn=_first(MRN_PATTERN, text),
        patient_age=extract_age(text),
        patient_gender=_first(GENDER_PATTERN, text),
        diagnosis=_first(DIAGNOSIS_PATTERN, text),
        exam_date=_first(EXAM_DATE_PATTERN, text),
        icd10_codes=extract_icd10_codes(text),
        specialty=extract_specialty(text, specialty),
    )
    missing = [name for name, value in fields if value is None]
    if missing:
        log.debug("Fields absent from report: %s", ", ".join(missing))
    return fields
