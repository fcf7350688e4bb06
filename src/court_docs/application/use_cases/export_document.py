"""Use Case: Export Document.

Orchestrates build → render → serialize → write through an injected
renderer port, and names the output file.

Usage::

    uc = ExportDocumentUseCase(renderer=DocxRenderer())
    result = uc.execute(case, content, output_dir=Path("."), on=date.today())
    print(result.output_path)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Optional

from court_docs.application.error_messages import EXPORT_FAILED
from court_docs.domain.builders import build
from court_docs.domain.errors import DocumentGenerationError
from court_docs.domain.formatting import generate_filename
from court_docs.domain.models.case import CaseRecord
from court_docs.domain.models.content import (
    DocumentContent,
    SignOff,
    WitnessStatement,
    document_type_of,
)
from court_docs.domain.ports.document_renderer import DocumentRendererPort

logger = logging.getLogger(__name__)


@dataclass
class ExportResult:
    """Outcome of a successful export.

    Attributes:
        output_path: Where the file was written.
        filename:    The generated file name.
        size:        Number of bytes written.
    """

    output_path: Path
    filename: str
    size: int


class ExportDocumentUseCase:
    """Export one document in the renderer's format."""

    def __init__(self, renderer: DocumentRendererPort) -> None:
        self._renderer = renderer

    def filename_for(self, case: CaseRecord, content: DocumentContent, on: date) -> str:
        witness = content.witness_name if isinstance(content, WitnessStatement) else ""
        return generate_filename(
            document_type_of(content), case.case_number, witness, on, self._renderer.extension
        )

    def execute(
        self,
        case: CaseRecord,
        content: DocumentContent,
        output_dir: Path,
        on: Optional[date] = None,
        signoff: Optional[SignOff] = None,
    ) -> ExportResult:
        """Render and write the document into *output_dir*.

        Raises:
            DocumentGenerationError: If rendering, serialization or writing fails.
                The underlying exception is logged and chained.
        """
        on = on or date.today()
        filename = self.filename_for(case, content, on)
        output_path = Path(output_dir) / filename

        try:
            data = self._renderer.render_bytes(build(case, content, signoff))
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_bytes(data)
        except Exception as exc:
            logger.exception("Error generating %s document %s", self._renderer.extension, filename)
            raise DocumentGenerationError(EXPORT_FAILED) from exc

        logger.info("Exported %s (%d bytes)", output_path, len(data))
        return ExportResult(output_path=output_path, filename=filename, size=len(data))
