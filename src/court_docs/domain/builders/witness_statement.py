"""Witness statement body."""

from __future__ import annotations

from court_docs.domain.builders.header import Numbering
from court_docs.domain.formatting import split_paragraphs
from court_docs.domain.models.case import CaseRecord
from court_docs.domain.models.content import Exhibit, WitnessStatement
from court_docs.domain.models.instructions import (
    Heading,
    KeyValue,
    Paragraph,
    RenderInstruction,
    SignatureBlock,
)
from court_docs.domain.rules.constants import (
    EXHIBIT_KEY,
    EXHIBITS_HEADING,
    STATEMENT_OF_TRUTH_HEADING,
    STATEMENT_OF_TRUTH_TEXT,
)


def title_subject(case: CaseRecord, content: WitnessStatement) -> str:
    return content.witness_name.strip().upper()


def exhibit_line(exhibit: Exhibit) -> str:
    """``JAS-1: Letter (from the landlord, dated 3 June 2025)``."""
    line = f"{exhibit.mark}: {exhibit.type}"
    if exhibit.description.strip():
        line += f" ({exhibit.description.strip()})"
    return line


def build_body(case: CaseRecord, content: WitnessStatement) -> list[RenderInstruction]:
    name = content.witness_name.strip()
    out: list[RenderInstruction] = []

    if content.statement_ordinal.strip():
        out.append(Paragraph(text=f"{content.statement_ordinal.strip()} witness statement of {name}"))

    if content.exhibit_mark.strip():
        out.append(KeyValue(key=EXHIBIT_KEY, value=content.exhibit_mark.strip()))

    out.extend(Paragraph(text=p) for p in split_paragraphs(content.introduction))

    body = [p.strip() for p in content.paragraphs if p.strip()]
    out.extend(Numbering().paragraphs(body))

    if content.exhibits:
        out.append(Heading(text=EXHIBITS_HEADING, level=3))
        out.extend(Paragraph(text=exhibit_line(ex)) for ex in content.exhibits)

    out.append(Heading(text=STATEMENT_OF_TRUTH_HEADING, level=3))
    out.append(Paragraph(text=STATEMENT_OF_TRUTH_TEXT))
    out.append(SignatureBlock(name=name))
    return out
