"""Tests for the domain models: parties, case records, content and instructions."""

from __future__ import annotations

from datetime import date

import pytest
from pydantic import TypeAdapter, ValidationError

from court_docs.domain.models import (
    INSTRUCTION_TYPES,
    CaseRecord,
    DocumentContent,
    DocumentType,
    DraftOrder,
    Heading,
    Paragraph,
    Party,
    ProceedingStyle,
    RenderInstruction,
    SkeletonArgument,
    WitnessStatement,
    document_type_of,
)


# ---------------------------------------------------------------------------
# Party
# ---------------------------------------------------------------------------


class TestParty:
    def test_minimal(self):
        p = Party(name="Jane Doe", designation="Applicant")
        assert p.has_litigation_friend is False
        assert p.litigation_friend_name is None
        assert p.litigation_friend_role is None

    def test_friend_fields_with_flag(self):
        p = Party(
            name="Jane Doe",
            designation="Applicant",
            has_litigation_friend=True,
            litigation_friend_name="Official Solicitor",
            litigation_friend_role="by her litigation friend",
        )
        assert p.litigation_friend_name == "Official Solicitor"

    def test_friend_fields_without_flag_rejected(self):
        with pytest.raises(ValidationError):
            Party(name="Jane Doe", designation="Applicant", litigation_friend_name="X")


# ---------------------------------------------------------------------------
# CaseRecord
# ---------------------------------------------------------------------------


class TestCaseRecord:
    def _parties(self, n: int = 2) -> list[Party]:
        return [Party(name=f"Party {i}", designation="Applicant") for i in range(n)]

    def test_defaults(self):
        case = CaseRecord(case_number="1", parties=self._parties())
        assert case.court == ""
        assert case.proceeding_style == ProceedingStyle.NON_ADVERSARIAL
        assert case.matter_of_statute is None

    def test_case_number_is_stripped(self):
        case = CaseRecord(case_number="  AB/1  ", parties=self._parties())
        assert case.case_number == "AB/1"

    def test_blank_case_number_rejected(self):
        with pytest.raises(ValidationError):
            CaseRecord(case_number="   ", parties=self._parties())

    def test_needs_two_parties(self):
        with pytest.raises(ValidationError):
            CaseRecord(case_number="1", parties=self._parties(1))

    def test_blank_named_parties_dropped(self):
        parties = self._parties() + [Party(name="  ", designation="Respondent")]
        case = CaseRecord(case_number="1", parties=parties)
        assert [p.name for p in case.parties] == ["Party 0", "Party 1"]

    def test_blank_names_do_not_count(self):
        parties = [Party(name="", designation="Applicant"), Party(name="  ", designation="Respondent")]
        with pytest.raises(ValidationError):
            CaseRecord(case_number="1", parties=parties)

    def test_style_from_string(self):
        case = CaseRecord(case_number="1", parties=self._parties(), proceeding_style="adversarial")
        assert case.proceeding_style is ProceedingStyle.ADVERSARIAL


# ---------------------------------------------------------------------------
# Document content union
# ---------------------------------------------------------------------------


class TestDocumentContent:
    adapter = TypeAdapter(DocumentContent)

    def test_discriminates_on_kind(self):
        content = self.adapter.validate_python({"kind": "draft-order", "provisions": "x"})
        assert isinstance(content, DraftOrder)
        assert document_type_of(content) is DocumentType.DRAFT_ORDER

    def test_dates_parsed(self):
        content = self.adapter.validate_python(
            {"kind": "skeleton-argument", "hearing_date": "2025-07-01"}
        )
        assert isinstance(content, SkeletonArgument)
        assert content.hearing_date == date(2025, 7, 1)

    def test_unknown_kind_rejected(self):
        with pytest.raises(ValidationError):
            self.adapter.validate_python({"kind": "affidavit"})

    def test_witness_statement_defaults(self):
        ws = WitnessStatement()
        assert ws.statement_ordinal == "First"
        assert ws.paragraphs == []
        assert ws.exhibits == []

    @pytest.mark.parametrize("doc_type", list(DocumentType))
    def test_every_type_has_a_variant(self, doc_type):
        content = self.adapter.validate_python({"kind": doc_type.value})
        assert document_type_of(content) is doc_type


# ---------------------------------------------------------------------------
# Render instructions
# ---------------------------------------------------------------------------


class TestInstructions:
    def test_frozen(self):
        h = Heading(text="Title", level=1)
        with pytest.raises(ValidationError):
            h.text = "Other"

    def test_equal_by_value(self):
        assert Paragraph(text="a", numbered=1) == Paragraph(text="a", numbered=1)
        assert Paragraph(text="a", numbered=1) != Paragraph(text="a", numbered=2)

    def test_heading_level_bounds(self):
        with pytest.raises(ValidationError):
            Heading(text="x", level=4)

    def test_numbering_starts_at_one(self):
        with pytest.raises(ValidationError):
            Paragraph(text="x", numbered=0)

    def test_union_round_trip_by_kind(self):
        adapter = TypeAdapter(RenderInstruction)
        item = adapter.validate_python({"kind": "key_value", "key": "Case No", "value": "1"})
        assert type(item) in INSTRUCTION_TYPES
        assert item.key == "Case No"
