"""Document content models — one variant per document type.

``DocumentContent`` is a tagged union discriminated on ``kind``; builders
and use cases dispatch on that tag, never on ad hoc fields.
"""

from __future__ import annotations

from datetime import date
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field

from court_docs.domain.models.enums import DocumentType


class Exhibit(BaseModel):
    """An exhibit referred to in a witness statement.

    The ``mark`` is computed once when the exhibit is created and is never
    recomputed at render time.
    """

    mark: str = Field(..., description="Exhibit label, e.g. JAS-2")
    type: str = Field(..., description="Document type, e.g. Letter, Email")
    description: str = ""


class WitnessStatement(BaseModel):
    kind: Literal["witness-statement"] = "witness-statement"
    witness_name: str = ""
    witness_role: str = ""
    witness_address: str = ""
    statement_ordinal: str = Field("First", description="First, Second, Third ...")
    exhibit_mark: str = ""
    introduction: str = ""
    paragraphs: list[str] = Field(default_factory=list)
    exhibits: list[Exhibit] = Field(default_factory=list)


class SkeletonArgument(BaseModel):
    kind: Literal["skeleton-argument"] = "skeleton-argument"
    hearing_date: Optional[date] = None
    hearing_type: str = ""
    time_estimate: str = ""
    introduction: str = ""
    issues: str = ""
    law: str = ""
    application: str = ""
    relief: str = ""
    authorities: str = ""


class PositionStatement(BaseModel):
    kind: Literal["position-statement"] = "position-statement"
    hearing_date: Optional[date] = None
    on_behalf_of: str = ""
    introduction: str = ""
    current_position: str = ""
    orders_sought: str = ""
    outstanding: str = ""


class DraftOrder(BaseModel):
    kind: Literal["draft-order"] = "draft-order"
    order_type: str = "ORDER"
    judge_name: str = ""
    recitals: str = ""
    provisions: str = ""
    service_provisions: str = ""
    costs_provisions: str = ""


DocumentContent = Annotated[
    Union[WitnessStatement, SkeletonArgument, PositionStatement, DraftOrder],
    Field(discriminator="kind"),
]


def document_type_of(content: DocumentContent) -> DocumentType:
    """Return the ``DocumentType`` tag of a content record."""
    return DocumentType(content.kind)


class SignOff(BaseModel):
    """Footer of an exported document: who prepared it and when."""

    prepared_by: str
    document_date: date
