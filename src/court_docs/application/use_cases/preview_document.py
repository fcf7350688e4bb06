"""Use Case: Preview Document.

Rebuilds the instruction sequence from the current records and renders it
as markup. Nothing is cached between previews.
"""

from __future__ import annotations

from typing import Optional

from court_docs.domain.builders import build
from court_docs.domain.models.case import CaseRecord
from court_docs.domain.models.content import DocumentContent, SignOff
from court_docs.domain.ports.document_renderer import DocumentRendererPort


class PreviewDocumentUseCase:
    """Build instructions and render them through an injected markup renderer."""

    def __init__(self, renderer: DocumentRendererPort) -> None:
        self._renderer = renderer

    def execute(
        self,
        case: CaseRecord,
        content: DocumentContent,
        signoff: Optional[SignOff] = None,
    ) -> str:
        return self._renderer.render(build(case, content, signoff))
