"""Skeleton argument body."""

from __future__ import annotations

from court_docs.domain.builders.header import line_section, section
from court_docs.domain.formatting import format_long_date
from court_docs.domain.models.case import CaseRecord
from court_docs.domain.models.content import SkeletonArgument
from court_docs.domain.models.instructions import KeyValue, RenderInstruction
from court_docs.domain.rules.constants import (
    AUTHORITIES_HEADING,
    HEARING_DATE_KEY,
    HEARING_KEY,
    SKELETON_SECTIONS,
    TIME_ESTIMATE_KEY,
)


def title_subject(case: CaseRecord, content: SkeletonArgument) -> str:
    return ""


def build_body(case: CaseRecord, content: SkeletonArgument) -> list[RenderInstruction]:
    out: list[RenderInstruction] = []

    if content.hearing_type.strip():
        out.append(KeyValue(key=HEARING_KEY, value=content.hearing_type.strip()))
    if content.hearing_date:
        out.append(KeyValue(key=HEARING_DATE_KEY, value=format_long_date(content.hearing_date)))

    for field_name, heading in SKELETON_SECTIONS:
        out.extend(section(heading, getattr(content, field_name)))

    if content.time_estimate.strip():
        out.append(KeyValue(key=TIME_ESTIMATE_KEY, value=content.time_estimate.strip()))

    out.extend(line_section(AUTHORITIES_HEADING, content.authorities))
    return out
