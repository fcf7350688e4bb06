"""Wizard session — the form-binding adapter between user input and the engine.

A ``DocumentSession`` is an immutable record passed by value through the
wizard steps. Every step function validates its input and returns a *new*
session; on a validation failure it raises ``CaseValidationError`` and the
caller keeps the session it already had.
"""

from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Optional, Sequence

from pydantic import BaseModel, ConfigDict

from court_docs.application.error_messages import (
    MISSING_CASE_DETAILS,
    MISSING_CASE_NUMBER,
    MISSING_CUSTOM_EXHIBIT_TYPE,
    MISSING_EXHIBIT_TYPE,
    TOO_FEW_PARTIES,
)
from court_docs.domain.errors import CaseValidationError
from court_docs.domain.formatting import describe_exhibit, split_paragraphs
from court_docs.domain.formatting import exhibit_mark as make_exhibit_mark
from court_docs.domain.models.case import CaseRecord, Party
from court_docs.domain.models.content import (
    DocumentContent,
    DraftOrder,
    Exhibit,
    PositionStatement,
    SkeletonArgument,
    WitnessStatement,
)
from court_docs.domain.models.enums import DocumentType, ProceedingStyle, WritingMode
from court_docs.domain.rules.constants import OTHER_EXHIBIT_TYPE


class WizardStep(int, Enum):
    """The four linear wizard steps."""

    DOCUMENT_TYPE = 1
    CASE_DETAILS = 2
    CONTENT = 3
    PREVIEW = 4


class PartyEntry(BaseModel):
    """Raw party row as typed into the form (not yet normalized)."""

    name: str = ""
    designation: str = ""
    has_litigation_friend: bool = False
    litigation_friend_name: str = ""
    litigation_friend_role: str = ""

    def to_party(self) -> Party:
        """Normalize: litigation friend details are kept only when ticked."""
        friend = self.has_litigation_friend
        return Party(
            name=self.name.strip(),
            designation=self.designation.strip(),
            has_litigation_friend=friend,
            litigation_friend_name=self.litigation_friend_name.strip() if friend else None,
            litigation_friend_role=self.litigation_friend_role if friend else None,
        )


class DocumentSession(BaseModel):
    """Everything collected so far for the document being prepared."""

    model_config = ConfigDict(frozen=True)

    step: WizardStep = WizardStep.DOCUMENT_TYPE
    document_type: Optional[DocumentType] = None
    proceeding_style: ProceedingStyle = ProceedingStyle.NON_ADVERSARIAL
    writing_mode: WritingMode = WritingMode.STRUCTURED
    paragraphs: tuple[str, ...] = ()
    exhibits: tuple[Exhibit, ...] = ()
    exhibit_counter: int = 0
    case: Optional[CaseRecord] = None
    content: Optional[DocumentContent] = None
    last_witness_name: str = ""

    @property
    def is_ready(self) -> bool:
        return self.case is not None and self.content is not None


def reset() -> DocumentSession:
    """Start over with an empty session."""
    return DocumentSession()


# ---------------------------------------------------------------------------
# Navigation
# ---------------------------------------------------------------------------


def can_navigate_to(session: DocumentSession, step: WizardStep | int) -> bool:
    """Whether the progress bar may jump to *step* from the current session."""
    step = WizardStep(step)
    if step <= session.step:
        return True
    if step == WizardStep.DOCUMENT_TYPE:
        return True
    if step == WizardStep.CASE_DETAILS:
        return session.document_type is not None
    if step == WizardStep.CONTENT:
        return session.case is not None
    return True


def go_to(session: DocumentSession, step: WizardStep | int) -> DocumentSession:
    step = WizardStep(step)
    if not can_navigate_to(session, step):
        return session
    return session.model_copy(update={"step": step})


# ---------------------------------------------------------------------------
# Step 1: document type
# ---------------------------------------------------------------------------


def select_document_type(session: DocumentSession, document_type: DocumentType | str) -> DocumentSession:
    return session.model_copy(
        update={"document_type": DocumentType(document_type), "step": WizardStep.CASE_DETAILS}
    )


# ---------------------------------------------------------------------------
# Step 2: case details
# ---------------------------------------------------------------------------


def collect_case_details(
    session: DocumentSession,
    *,
    case_number: str,
    parties: Sequence[PartyEntry],
    court: str = "",
    matter_of_statute: str = "",
    matter_of_person: str = "",
    proceeding_style: ProceedingStyle | str | None = None,
) -> DocumentSession:
    """Validate the case form and store the resulting ``CaseRecord``.

    Rows without a party name are ignored, as in the form.
    """
    if not case_number.strip():
        raise CaseValidationError(MISSING_CASE_NUMBER)

    named = [entry.to_party() for entry in parties if entry.name.strip()]
    if len(named) < 2:
        raise CaseValidationError(TOO_FEW_PARTIES)

    style = ProceedingStyle(proceeding_style) if proceeding_style else session.proceeding_style
    case = CaseRecord(
        court=court,
        case_number=case_number.strip(),
        matter_of_statute=matter_of_statute.strip() or None,
        matter_of_person=matter_of_person.strip() or None,
        parties=named,
        proceeding_style=style,
    )
    return session.model_copy(
        update={"case": case, "proceeding_style": style, "step": WizardStep.CONTENT}
    )


# ---------------------------------------------------------------------------
# Step 3: witness statement paragraphs
# ---------------------------------------------------------------------------


def set_writing_mode(session: DocumentSession, mode: WritingMode | str) -> DocumentSession:
    return session.model_copy(update={"writing_mode": WritingMode(mode)})


def add_paragraph(session: DocumentSession, text: str = "") -> DocumentSession:
    return session.model_copy(update={"paragraphs": session.paragraphs + (text,)})


def update_paragraph(session: DocumentSession, index: int, text: str) -> DocumentSession:
    paragraphs = list(session.paragraphs)
    paragraphs[index] = text
    return session.model_copy(update={"paragraphs": tuple(paragraphs)})


def remove_paragraph(session: DocumentSession, index: int) -> DocumentSession:
    paragraphs = list(session.paragraphs)
    del paragraphs[index]
    return session.model_copy(update={"paragraphs": tuple(paragraphs)})


def move_paragraph(session: DocumentSession, source: int, target: int) -> DocumentSession:
    """Drag-and-drop reorder: take the paragraph at *source* and insert it at *target*."""
    paragraphs = list(session.paragraphs)
    moved = paragraphs.pop(source)
    paragraphs.insert(target, moved)
    return session.model_copy(update={"paragraphs": tuple(paragraphs)})


# ---------------------------------------------------------------------------
# Step 3: exhibits
# ---------------------------------------------------------------------------


def add_exhibit(
    session: DocumentSession,
    *,
    witness_name: str,
    exhibit_type: str,
    custom_type: str = "",
    description: str = "",
    dated: Optional[date] = None,
) -> DocumentSession:
    """Append an exhibit, computing and storing its mark once.

    The sequence number comes from the session's exhibit counter, which
    only ever increases, so removing an exhibit never reuses a mark.
    """
    if not exhibit_type.strip():
        raise CaseValidationError(MISSING_EXHIBIT_TYPE)
    if exhibit_type == OTHER_EXHIBIT_TYPE and not custom_type.strip():
        raise CaseValidationError(MISSING_CUSTOM_EXHIBIT_TYPE)

    counter = session.exhibit_counter + 1
    exhibit = Exhibit(
        mark=make_exhibit_mark(witness_name, counter),
        type=custom_type.strip() if exhibit_type == OTHER_EXHIBIT_TYPE else exhibit_type,
        description=describe_exhibit(description, dated),
    )
    return session.model_copy(
        update={
            "exhibits": session.exhibits + (exhibit,),
            "exhibit_counter": counter,
            "last_witness_name": witness_name.strip(),
        }
    )


def remove_exhibit(session: DocumentSession, mark: str) -> DocumentSession:
    """Drop the exhibit with *mark*; the other exhibits keep their stored marks."""
    remaining = tuple(ex for ex in session.exhibits if ex.mark != mark)
    return session.model_copy(update={"exhibits": remaining})


# ---------------------------------------------------------------------------
# Step 3: document content
# ---------------------------------------------------------------------------


def _with_content(session: DocumentSession, content: DocumentContent) -> DocumentSession:
    if session.case is None:
        raise CaseValidationError(MISSING_CASE_DETAILS)
    return session.model_copy(
        update={
            "content": content,
            "document_type": DocumentType(content.kind),
            "step": WizardStep.PREVIEW,
        }
    )


def collect_witness_statement(
    session: DocumentSession,
    *,
    witness_name: str,
    witness_role: str = "",
    witness_address: str = "",
    statement_ordinal: str = "First",
    exhibit_mark: str = "",
    introduction: str = "",
    free_text: str = "",
) -> DocumentSession:
    """Build the witness statement from the paragraphs (or free text) and exhibits."""
    if session.writing_mode == WritingMode.STRUCTURED:
        body = [p for p in session.paragraphs if p.strip()]
    else:
        body = split_paragraphs(free_text)

    content = WitnessStatement(
        witness_name=witness_name.strip(),
        witness_role=witness_role.strip(),
        witness_address=witness_address.strip(),
        statement_ordinal=statement_ordinal or "First",
        exhibit_mark=exhibit_mark.strip(),
        introduction=introduction.strip(),
        paragraphs=body,
        exhibits=list(session.exhibits),
    )
    return _with_content(session, content)


def collect_skeleton_argument(
    session: DocumentSession,
    *,
    hearing_date: Optional[date] = None,
    hearing_type: str = "",
    time_estimate: str = "",
    introduction: str = "",
    issues: str = "",
    law: str = "",
    application: str = "",
    relief: str = "",
    authorities: str = "",
) -> DocumentSession:
    content = SkeletonArgument(
        hearing_date=hearing_date,
        hearing_type=hearing_type.strip(),
        time_estimate=time_estimate.strip(),
        introduction=introduction.strip(),
        issues=issues.strip(),
        law=law.strip(),
        application=application.strip(),
        relief=relief.strip(),
        authorities=authorities.strip(),
    )
    return _with_content(session, content)


def collect_position_statement(
    session: DocumentSession,
    *,
    hearing_date: Optional[date] = None,
    on_behalf_of: str = "",
    introduction: str = "",
    current_position: str = "",
    orders_sought: str = "",
    outstanding: str = "",
) -> DocumentSession:
    content = PositionStatement(
        hearing_date=hearing_date,
        on_behalf_of=on_behalf_of.strip(),
        introduction=introduction.strip(),
        current_position=current_position.strip(),
        orders_sought=orders_sought.strip(),
        outstanding=outstanding.strip(),
    )
    return _with_content(session, content)


def collect_draft_order(
    session: DocumentSession,
    *,
    order_type: str = "ORDER",
    judge_name: str = "",
    recitals: str = "",
    provisions: str = "",
    service_provisions: str = "",
    costs_provisions: str = "",
) -> DocumentSession:
    content = DraftOrder(
        order_type=order_type or "ORDER",
        judge_name=judge_name.strip(),
        recitals=recitals.strip(),
        provisions=provisions.strip(),
        service_provisions=service_provisions.strip(),
        costs_provisions=costs_provisions.strip(),
    )
    return _with_content(session, content)
