"""Instruction builder — turns case + content records into render instructions.

``build`` is pure and deterministic: equal inputs always yield an equal
instruction tuple, so the HTML preview and both exports never diverge.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, NamedTuple, Optional

from court_docs.domain.builders import (
    draft_order,
    position_statement,
    skeleton_argument,
    witness_statement,
)
from court_docs.domain.builders.header import case_heading, sign_off
from court_docs.domain.models.case import CaseRecord
from court_docs.domain.models.content import DocumentContent, SignOff, document_type_of
from court_docs.domain.models.enums import DocumentType
from court_docs.domain.models.instructions import RenderInstruction
from court_docs.domain.rules.constants import DOCUMENT_TITLES, TITLE_FALLBACKS

logger = logging.getLogger(__name__)


class DocumentTemplate(NamedTuple):
    """Per-type hooks: the subject interpolated into the title, and the body."""

    title_subject: Callable[[CaseRecord, Any], str]
    build_body: Callable[[CaseRecord, Any], list[RenderInstruction]]


TEMPLATES: dict[DocumentType, DocumentTemplate] = {
    DocumentType.WITNESS_STATEMENT: DocumentTemplate(
        witness_statement.title_subject, witness_statement.build_body
    ),
    DocumentType.SKELETON_ARGUMENT: DocumentTemplate(
        skeleton_argument.title_subject, skeleton_argument.build_body
    ),
    DocumentType.POSITION_STATEMENT: DocumentTemplate(
        position_statement.title_subject, position_statement.build_body
    ),
    DocumentType.DRAFT_ORDER: DocumentTemplate(
        draft_order.title_subject, draft_order.build_body
    ),
}


def document_title(case: CaseRecord, content: DocumentContent) -> str:
    """Resolve the document title from the lookup tables."""
    doc_type = document_type_of(content)
    subject = TEMPLATES[doc_type].title_subject(case, content) or TITLE_FALLBACKS[doc_type]
    return DOCUMENT_TITLES[doc_type].format(subject=subject)


def build(
    case: CaseRecord,
    content: DocumentContent,
    signoff: Optional[SignOff] = None,
) -> tuple[RenderInstruction, ...]:
    """Build the full instruction sequence for one document."""
    doc_type = document_type_of(content)
    template = TEMPLATES[doc_type]
    logger.debug("Building %s for case %s", doc_type.value, case.case_number)

    instructions: list[RenderInstruction] = case_heading(case, document_title(case, content))
    instructions.extend(template.build_body(case, content))
    if signoff is not None:
        instructions.extend(sign_off(signoff))
    return tuple(instructions)


__all__ = ["DocumentTemplate", "TEMPLATES", "build", "document_title"]
