"""Search filter for saved reports.

Matches on patient name, MRN and diagnosis, the same fields shown in the
saved-reports list.  Works on ``ExtractedFields`` and on stored records.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, TypeVar, Union

from medscribe.models import ExtractedFields

SEARCHABLE_FIELDS: tuple[str, ...] = ("patient_name", "patient_mrn", "diagnosis")

ReportLike = Union[ExtractedFields, Mapping[str, Any]]
R = TypeVar("R", ExtractedFields, Mapping[str, Any])


def _field(report: ReportLike, name: str) -> Any:
    if isinstance(report, Mapping):
        return report.get(name)
    return getattr(report, name, None)


def matches_search(report: ReportLike, term: str) -> bool:
    """Case-insensitive substring match; a blank term matches every report."""
    needle = term.strip().lower()
    if not needle:
        return True
    for name in SEARCHABLE_FIELDS:
        value = _field(report, name)
        if value and needle in str(value).lower():
            return True
    return False


def filter_reports(reports: Iterable[R], term: str) -> list[R]:
    return [r for r in reports if matches_search(r, term)]
