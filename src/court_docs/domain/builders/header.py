"""Shared instructions: case heading, party block, title and sign-off."""

from __future__ import annotations

from court_docs.domain.formatting import format_long_date, split_lines, split_paragraphs
from court_docs.domain.models.case import CaseRecord, Party
from court_docs.domain.models.content import SignOff
from court_docs.domain.models.enums import Align
from court_docs.domain.models.instructions import (
    Heading,
    KeyValue,
    Paragraph,
    RenderInstruction,
    Rule,
)
from court_docs.domain.rules.constants import (
    ACCREDITED_REPRESENTATIVE_ROLE,
    BETWEEN_LABEL,
    CASE_NUMBER_KEY,
    LITIGATION_FRIEND_TEMPLATES,
    MATTER_OF_PERSON_LABEL,
    MATTER_OF_PREFIX,
    PARTY_SEPARATORS,
    PREPARED_BY_KEY,
)


def _filled(text: str | None) -> bool:
    return bool(text and text.strip())


def litigation_friend_line(party: Party) -> str | None:
    """Return the bracketed litigation friend line, or ``None`` if not applicable."""
    if not party.has_litigation_friend or not _filled(party.litigation_friend_name):
        return None
    accredited = party.litigation_friend_role == ACCREDITED_REPRESENTATIVE_ROLE
    return LITIGATION_FRIEND_TEMPLATES[accredited].format(
        name=party.litigation_friend_name.strip()
    )


def party_block(case: CaseRecord) -> list[RenderInstruction]:
    """``B E T W E E N:`` followed by every party, separated by the style's separator."""
    separator = PARTY_SEPARATORS[case.proceeding_style]
    out: list[RenderInstruction] = [Paragraph(text=BETWEEN_LABEL, bold=True)]

    for index, party in enumerate(case.parties):
        if index > 0:
            out.append(Paragraph(text=separator, align=Align.CENTER))
        out.append(Paragraph(text=party.name.strip().upper(), align=Align.CENTER, bold=True))
        friend = litigation_friend_line(party)
        if friend:
            out.append(Paragraph(text=friend, align=Align.CENTER))
        out.append(Paragraph(text=party.designation.strip(), align=Align.RIGHT, italic=True))
    return out


def case_heading(case: CaseRecord, title: str) -> list[RenderInstruction]:
    """Case number, court, matter lines, parties and the ruled-off title."""
    out: list[RenderInstruction] = [
        KeyValue(key=CASE_NUMBER_KEY, value=case.case_number, align=Align.RIGHT)
    ]

    for line in split_lines(case.court):
        out.append(Paragraph(text=line, bold=True))

    if _filled(case.matter_of_statute):
        out.append(Paragraph(text=f"{MATTER_OF_PREFIX} {case.matter_of_statute.strip()}", bold=True))

    if _filled(case.matter_of_person):
        out.append(Paragraph(text=MATTER_OF_PERSON_LABEL, bold=True))
        out.append(Paragraph(text=case.matter_of_person.strip(), align=Align.CENTER, bold=True))

    out.extend(party_block(case))
    out.append(Rule())
    out.append(Heading(text=title, level=1))
    out.append(Rule())
    return out


def sign_off(signoff: SignOff) -> list[RenderInstruction]:
    """Right-aligned ``Prepared by`` line and document date."""
    out: list[RenderInstruction] = []
    if _filled(signoff.prepared_by):
        out.append(
            KeyValue(key=PREPARED_BY_KEY, value=signoff.prepared_by.strip(), align=Align.RIGHT)
        )
    out.append(Paragraph(text=format_long_date(signoff.document_date), align=Align.RIGHT))
    return out


# ---------------------------------------------------------------------------
# Body helpers used by the per-type builders
# ---------------------------------------------------------------------------


def section(heading: str, text: str | None, *, level: int = 2) -> list[RenderInstruction]:
    """A heading followed by one paragraph per blank-line-separated block.

    Returns nothing at all when the text is empty.
    """
    paragraphs = split_paragraphs(text)
    if not paragraphs:
        return []
    return [Heading(text=heading, level=level)] + [Paragraph(text=p) for p in paragraphs]


def line_section(heading: str, text: str | None) -> list[RenderInstruction]:
    """A heading followed by one paragraph per non-blank line."""
    lines = split_lines(text)
    if not lines:
        return []
    return [Heading(text=heading, level=2)] + [Paragraph(text=line) for line in lines]


class Numbering:
    """Ordinal counter for one logical block of numbered paragraphs."""

    def __init__(self) -> None:
        self._next = 1

    def paragraphs(self, pieces: list[str]) -> list[RenderInstruction]:
        out: list[RenderInstruction] = []
        for piece in pieces:
            out.append(Paragraph(text=piece, numbered=self._next))
            self._next += 1
        return out
