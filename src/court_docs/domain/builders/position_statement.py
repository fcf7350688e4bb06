"""Position statement body.

The introduction and the current position form a single numbered block.
"""

from __future__ import annotations

from court_docs.domain.builders.header import Numbering, line_section, section
from court_docs.domain.formatting import format_long_date, split_paragraphs
from court_docs.domain.models.case import CaseRecord
from court_docs.domain.models.content import PositionStatement
from court_docs.domain.models.instructions import Heading, KeyValue, RenderInstruction
from court_docs.domain.rules.constants import (
    CURRENT_POSITION_HEADING,
    HEARING_DATE_KEY,
    ORDERS_SOUGHT_HEADING,
    OUTSTANDING_HEADING,
)


def title_subject(case: CaseRecord, content: PositionStatement) -> str:
    if content.on_behalf_of.strip():
        return content.on_behalf_of.strip().upper()
    return case.parties[0].designation.strip().upper() if case.parties else ""


def build_body(case: CaseRecord, content: PositionStatement) -> list[RenderInstruction]:
    out: list[RenderInstruction] = []
    numbering = Numbering()

    if content.hearing_date:
        out.append(KeyValue(key=HEARING_DATE_KEY, value=format_long_date(content.hearing_date)))

    out.extend(numbering.paragraphs(split_paragraphs(content.introduction)))

    current = split_paragraphs(content.current_position)
    if current:
        out.append(Heading(text=CURRENT_POSITION_HEADING, level=2))
        out.extend(numbering.paragraphs(current))

    out.extend(line_section(ORDERS_SOUGHT_HEADING, content.orders_sought))
    out.extend(section(OUTSTANDING_HEADING, content.outstanding))
    return out
