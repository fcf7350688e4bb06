"""Draft order body."""

from __future__ import annotations

from court_docs.domain.builders.header import Numbering
from court_docs.domain.formatting import split_lines, split_paragraphs
from court_docs.domain.models.case import CaseRecord
from court_docs.domain.models.content import DraftOrder
from court_docs.domain.models.instructions import KeyValue, Paragraph, RenderInstruction
from court_docs.domain.rules.constants import JUDGE_KEY, ORDERED_LABEL


def title_subject(case: CaseRecord, content: DraftOrder) -> str:
    return content.order_type.strip()


def build_body(case: CaseRecord, content: DraftOrder) -> list[RenderInstruction]:
    out: list[RenderInstruction] = []

    if content.judge_name.strip():
        out.append(KeyValue(key=JUDGE_KEY, value=content.judge_name.strip()))

    out.extend(Paragraph(text=line) for line in split_lines(content.recitals))

    # Always present, even before any provision has been written.
    out.append(Paragraph(text=ORDERED_LABEL, bold=True))
    out.extend(Numbering().paragraphs(split_paragraphs(content.provisions)))

    out.extend(Paragraph(text=p) for p in split_paragraphs(content.service_provisions))
    out.extend(Paragraph(text=p) for p in split_paragraphs(content.costs_provisions))
    return out
