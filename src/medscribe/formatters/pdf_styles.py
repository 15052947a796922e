"""Centralized style constants for PDF output formatting."""

from __future__ import annotations

# ── Colors (hex strings) ─────────────────────────────────────────────
# Kept as plain hex so the formatter can convert to reportlab HexColor.

TITLE_TEXT_COLOR = "#111827"
HEADING_TEXT_COLOR = "#111827"
BODY_TEXT_COLOR = "#374151"
MUTED_TEXT_COLOR = "#6B7280"

# ── Header block ─────────────────────────────────────────────────────

REPORT_TITLE = "Medical Report"
GENERATED_LABEL = "Generated"
DATE_FONT_SIZE = 10
TITLE_ADVANCE_MM = 10.0
DATE_ADVANCE_MM = 6.0
HEADER_GAP_MM = 9.0

# ── Lists ────────────────────────────────────────────────────────────

BULLET_GLYPH = "\u2022"

# ── Unicode replacements ─────────────────────────────────────────────
# The standard Type 1 fonts lack glyphs for characters report generators
# commonly emit; these are mapped to ASCII before measuring and drawing.

UNICODE_REPLACEMENTS: dict[str, str] = {
    "\u2011": "-",       # non-breaking hyphen
    "\u2010": "-",       # hyphen
    "\u2012": "-",       # figure dash
    "\u2013": "-",       # en-dash
    "\u2014": "-",       # em-dash
    "\u202f": " ",       # narrow no-break space
    "\u00a0": " ",       # non-breaking space
    "\u2009": " ",       # thin space
    "\u2018": "'",       # left single quote
    "\u2019": "'",       # right single quote
    "\u201c": '"',       # left double quote
    "\u201d": '"',       # right double quote
    "\u2026": "...",     # ellipsis
    "\u2192": "->",      # rightwards arrow
    "\u2191": "^",       # upwards arrow
    "\u2193": "v",       # downwards arrow
    "\u2264": "<=",      # less-than or equal
    "\u2265": ">=",      # greater-than or equal
}
