"""Case metadata models — parties and the case record.

This module belongs to the Domain layer. It only depends on:
- Python stdlib (typing)
- Pydantic (pragmatic exception for validation)
- Domain enums
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from court_docs.domain.models.enums import ProceedingStyle


# ---------------------------------------------------------------------------
# Parties
# ---------------------------------------------------------------------------


class Party(BaseModel):
    """A named party to the proceedings."""

    name: str = Field(..., description="Party name as it appears in the heading")
    designation: str = Field(..., description="e.g. Applicant, Respondent, Claimant")
    has_litigation_friend: bool = False
    litigation_friend_name: Optional[str] = Field(
        None, description="Litigation friend / accredited representative name"
    )
    litigation_friend_role: Optional[str] = Field(
        None, description="Prefix chosen for the litigation friend line"
    )

    @model_validator(mode="after")
    def _friend_fields_need_flag(self) -> Party:
        if not self.has_litigation_friend and (
            self.litigation_friend_name or self.litigation_friend_role
        ):
            raise ValueError(
                "litigation_friend_name/role require has_litigation_friend to be true"
            )
        return self


# ---------------------------------------------------------------------------
# Case Record
# ---------------------------------------------------------------------------


class CaseRecord(BaseModel):
    """Normalized case metadata shared by every document type."""

    court: str = Field("", description="Court name; one heading line per text line")
    case_number: str = Field(..., description="Court case number")
    matter_of_statute: Optional[str] = Field(None, description="IN THE MATTER OF <statute>")
    matter_of_person: Optional[str] = Field(None, description="IN THE MATTER OF: <person>")
    parties: list[Party] = Field(..., min_length=2)
    proceeding_style: ProceedingStyle = ProceedingStyle.NON_ADVERSARIAL

    @field_validator("case_number")
    @classmethod
    def _case_number_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("case number must not be blank")
        return value

    @field_validator("parties")
    @classmethod
    def _at_least_two_named(cls, value: list[Party]) -> list[Party]:
        named = [party for party in value if party.name.strip()]
        if len(named) < 2:
            raise ValueError("at least two named parties are required")
        return named
