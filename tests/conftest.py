"""Shared fixtures: minimal and full records for every document type."""

from __future__ import annotations

from datetime import date

import pytest

from court_docs.config.loader import clear_cache
from court_docs.domain.models import (
    CaseRecord,
    DraftOrder,
    Exhibit,
    Party,
    PositionStatement,
    ProceedingStyle,
    SignOff,
    SkeletonArgument,
    WitnessStatement,
)


@pytest.fixture(autouse=True)
def _fresh_cache():
    """Ensure a clean config cache for every test."""
    clear_cache()
    yield
    clear_cache()


@pytest.fixture()
def case() -> CaseRecord:
    """Two-party, non-adversarial case with every heading field filled."""
    return CaseRecord(
        court="IN THE FAMILY COURT\nSITTING AT LEEDS",
        case_number="CASE/2024-001",
        matter_of_statute="the Children Act 1989",
        matter_of_person="A CHILD",
        parties=[
            Party(name="Jane Doe", designation="Applicant"),
            Party(name="John Roe", designation="Respondent"),
        ],
    )


@pytest.fixture()
def minimal_case() -> CaseRecord:
    return CaseRecord(
        case_number="AB12/34",
        parties=[
            Party(name="Alpha", designation="Claimant"),
            Party(name="Beta", designation="Defendant"),
        ],
    )


@pytest.fixture()
def adversarial_case() -> CaseRecord:
    return CaseRecord(
        case_number="CV-9",
        parties=[
            Party(name="Alpha Ltd", designation="Claimant"),
            Party(name="Beta Ltd", designation="First Defendant"),
            Party(name="Gamma Ltd", designation="Second Defendant"),
        ],
        proceeding_style=ProceedingStyle.ADVERSARIAL,
    )


@pytest.fixture()
def witness_statement() -> WitnessStatement:
    return WitnessStatement(
        witness_name="Jane Doe",
        witness_role="Applicant",
        statement_ordinal="First",
        exhibit_mark="JD",
        introduction="I am the Applicant in these proceedings.",
        paragraphs=["I live in Leeds.", "", "I have two children."],
        exhibits=[
            Exhibit(mark="JD-1", type="Letter", description="from the school, dated 3 June 2025"),
            Exhibit(mark="JD-2", type="Photograph"),
        ],
    )


@pytest.fixture()
def skeleton_argument() -> SkeletonArgument:
    return SkeletonArgument(
        hearing_date=date(2025, 7, 1),
        hearing_type="Final hearing",
        time_estimate="1 day",
        introduction="This is a skeleton argument.",
        issues="Whether the order should be varied.\n\nWhether costs follow.",
        law="",
        application="The facts meet the test.",
        relief="The order should be varied.",
        authorities="Re B [2013] UKSC 33\nRe W [2016] EWCA Civ 793",
    )


@pytest.fixture()
def position_statement() -> PositionStatement:
    return PositionStatement(
        hearing_date=date(2025, 7, 1),
        on_behalf_of="Respondent",
        introduction="This is the Respondent's position statement.\n\nIt is brief.",
        current_position="The Respondent agrees to contact.",
        orders_sought="Contact every Saturday\nNo order as to costs",
        outstanding="Holiday arrangements.",
    )


@pytest.fixture()
def draft_order() -> DraftOrder:
    return DraftOrder(
        order_type="CONSENT ORDER",
        judge_name="District Judge Smith",
        recitals="UPON hearing the parties\nAND UPON the parties agreeing",
        provisions="The child shall live with the Applicant.\n\nThe Respondent shall have contact.",
        service_provisions="The Applicant shall serve this order.",
        costs_provisions="No order as to costs.",
    )


@pytest.fixture()
def signoff() -> SignOff:
    return SignOff(prepared_by="A. Solicitor", document_date=date(2025, 6, 3))
