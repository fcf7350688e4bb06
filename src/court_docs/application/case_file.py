"""JSON case files — the non-interactive way to hand records to the engine.

Shape::

    {
      "case": {"case_number": "...", "parties": [...], ...},
      "document": {"kind": "witness-statement", ...},
      "signoff": {"prepared_by": "...", "document_date": "2025-06-03"}
    }
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ValidationError

from court_docs.application.error_messages import format_validation_errors
from court_docs.domain.errors import CaseValidationError
from court_docs.domain.models.case import CaseRecord
from court_docs.domain.models.content import DocumentContent, SignOff


class CaseFile(BaseModel):
    """A complete, validated document request."""

    case: CaseRecord
    document: DocumentContent
    signoff: Optional[SignOff] = None


def parse_case_file(raw: dict) -> CaseFile:
    """Validate an already-decoded case file.

    Raises:
        CaseValidationError: with one friendly message per problem, joined by newlines.
    """
    try:
        return CaseFile.model_validate(raw)
    except ValidationError as exc:
        raise CaseValidationError("\n".join(format_validation_errors(exc.errors()))) from exc


def load_case_file(path: Path) -> CaseFile:
    """Read and validate a JSON case file."""
    path = Path(path)
    if not path.exists():
        raise CaseValidationError(f"Case file not found: {path}")
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise CaseValidationError(f"Case file is not valid JSON: {exc}") from exc
    return parse_case_file(raw)
