"""Artifact filename helpers.

Timestamps in filenames are uniqueness tokens only.  Every helper takes the
clock as a parameter so callers (and tests) control the value.
"""

from __future__ import annotations

import re
from datetime import datetime, timezone
from typing import Callable

Clock = Callable[[], datetime]

_NON_ALNUM = re.compile(r"[^A-Za-z0-9]")
_UNDERSCORE_RUN = re.compile(r"_+")


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def long_date(value: datetime) -> str:
    """``March 5, 2024`` style date, without a zero-padded day."""
    return f"{value:%B} {value.day}, {value.year}"


def sanitize(name: str) -> str:
    """Normalize a human name into a filename-safe token.

    Non-alphanumerics become ``_``, runs of ``_`` collapse to one, leading
    and trailing separators are dropped and the result is lowercased::

        >>> sanitize("Dr. Jane O'Brien!!")
        'dr_jane_o_brien'
    """
    token = _NON_ALNUM.sub("_", name)
    token = _UNDERSCORE_RUN.sub("_", token)
    return token.strip("_").lower()


def timestamp_ms(clock: Clock = utc_now) -> int:
    """Milliseconds since the epoch according to *clock*."""
    return int(clock().timestamp() * 1000)


def report_filename(patient_name: str, extension: str, clock: Clock = utc_now) -> str:
    """``<sanitized-name>_report_<ms>.<ext>``; falls back to ``report`` for unusable names."""
    stem = sanitize(patient_name) or "report"
    return f"{stem}_report_{timestamp_ms(clock)}.{extension.lstrip('.')}"


def download_filename(extension: str, clock: Clock = utc_now) -> str:
    """``medical-report-<ms>.<ext>`` for the text download and print snapshot."""
    return f"medical-report-{timestamp_ms(clock)}.{extension.lstrip('.')}"
