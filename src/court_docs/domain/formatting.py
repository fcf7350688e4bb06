"""Pure formatting helpers shared by the builder, the wizard and the CLI."""

from __future__ import annotations

import html
import re
from datetime import date
from typing import Optional

from court_docs.domain.models.enums import DocumentType
from court_docs.domain.rules.constants import (
    FILENAME_FALLBACK_SUBJECT,
    FILENAME_LABELS,
    MONTH_NAMES,
    UNKNOWN_INITIALS,
)

_NON_ALNUM_RE = re.compile(r"[^a-zA-Z0-9]")
_BLANK_LINE_RE = re.compile(r"\n\s*\n")


def format_long_date(value: date) -> str:
    """Format a date in long British form, e.g. ``3 June 2025``."""
    return f"{value.day} {MONTH_NAMES[value.month - 1]} {value.year}"


def normalize_for_filename(text: str) -> str:
    """Replace every non-alphanumeric character with an underscore."""
    return _NON_ALNUM_RE.sub("_", text)


def generate_filename(
    document_type: DocumentType,
    case_number: str,
    witness_name: str,
    on: date,
    ext: str,
) -> str:
    """Build ``{Label}_{WitnessNameOrCaseNumber}_{ISODate}.{ext}``.

    The witness name is only used for witness statements; every other type
    (or a witness statement without a name) uses the case number.
    """
    label = FILENAME_LABELS.get(document_type, "Document")
    name = normalize_for_filename(witness_name.strip()) if witness_name else ""

    if document_type == DocumentType.WITNESS_STATEMENT and name:
        subject = name
    else:
        subject = normalize_for_filename(case_number.strip()) or FILENAME_FALLBACK_SUBJECT

    return f"{label}_{subject}_{on.isoformat()}.{ext.lstrip('.')}"


def escape_markup(text: str) -> str:
    """Escape text for the HTML preview. Other renderers take raw strings."""
    return html.escape(text or "", quote=True)


# ---------------------------------------------------------------------------
# Exhibits
# ---------------------------------------------------------------------------


def witness_initials(witness_name: str) -> str:
    """Uppercase first letters of the space-separated name tokens.

    >>> witness_initials("John Adam Smith")
    'JAS'
    >>> witness_initials("")
    'XX'
    """
    initials = "".join(token[0].upper() for token in witness_name.split(" ") if token)
    return initials or UNKNOWN_INITIALS


def exhibit_mark(witness_name: str, sequence: int) -> str:
    """Exhibit label ``{initials}-{sequence}``."""
    return f"{witness_initials(witness_name)}-{sequence}"


def describe_exhibit(description: str, dated: Optional[date] = None) -> str:
    """Compose an exhibit description, appending ``dated <long date>``."""
    description = description.strip()
    if dated is None:
        return description
    formatted = format_long_date(dated)
    if description:
        return f"{description}, dated {formatted}"
    return f"dated {formatted}"


# ---------------------------------------------------------------------------
# Free-text splitting
# ---------------------------------------------------------------------------


def split_paragraphs(text: Optional[str]) -> list[str]:
    """Split on blank lines; strip pieces and drop empty ones."""
    if not text or not text.strip():
        return []
    return [p.strip() for p in _BLANK_LINE_RE.split(text.replace("\r\n", "\n")) if p.strip()]


def split_lines(text: Optional[str]) -> list[str]:
    """Split on single newlines; strip pieces and drop empty ones."""
    if not text or not text.strip():
        return []
    return [line.strip() for line in text.splitlines() if line.strip()]
