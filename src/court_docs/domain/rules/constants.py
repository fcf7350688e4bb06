"""Court document conventions — pure domain values.

These are the fixed wording and lookup tables shared by every renderer.
They have NO dependency on configuration files or external libraries.

Page geometry and typography are configuration-derived and live in
``court_docs.config``.
"""

from court_docs.domain.models.enums import DocumentType, ProceedingStyle


# ---------------------------------------------------------------------------
# Dates
# ---------------------------------------------------------------------------

MONTH_NAMES: tuple[str, ...] = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


# ---------------------------------------------------------------------------
# Heading block
# ---------------------------------------------------------------------------

CASE_NUMBER_KEY: str = "Case No"
MATTER_OF_PREFIX: str = "IN THE MATTER OF"
MATTER_OF_PERSON_LABEL: str = "IN THE MATTER OF:"
BETWEEN_LABEL: str = "B E T W E E N:"

PARTY_SEPARATORS: dict[ProceedingStyle, str] = {
    ProceedingStyle.ADVERSARIAL: "- v -",
    ProceedingStyle.NON_ADVERSARIAL: "- and -",
}

# Litigation friend line. Only the exact role below selects the accredited
# representative wording; every other role falls back to "his/her".
ACCREDITED_REPRESENTATIVE_ROLE: str = "Accredited Legal Representative"
LITIGATION_FRIEND_TEMPLATES: dict[bool, str] = {
    True: "(By her Accredited Legal Representative {name})",
    False: "(By his/her litigation friend {name})",
}

LITIGATION_FRIEND_PREFIXES: tuple[str, ...] = (
    "by his litigation friend",
    "by her litigation friend",
    "by their litigation friend",
    "by his Accredited Legal Representative",
    "by her Accredited Legal Representative",
)

FIRST_PARTY_DESIGNATIONS: tuple[str, ...] = ("Applicant", "Claimant", "Petitioner", "Appellant")
OTHER_PARTY_DESIGNATIONS: tuple[str, ...] = (
    "Respondent",
    "Defendant",
    "First Respondent",
    "Second Respondent",
)

# ---------------------------------------------------------------------------
# Titles
# ---------------------------------------------------------------------------

DOCUMENT_TITLES: dict[DocumentType, str] = {
    DocumentType.WITNESS_STATEMENT: "WITNESS STATEMENT OF {subject}",
    DocumentType.SKELETON_ARGUMENT: "SKELETON ARGUMENT",
    DocumentType.POSITION_STATEMENT: "POSITION STATEMENT ON BEHALF OF THE {subject}",
    DocumentType.DRAFT_ORDER: "{subject}",
}

TITLE_FALLBACKS: dict[DocumentType, str] = {
    DocumentType.WITNESS_STATEMENT: "WITNESS",
    DocumentType.SKELETON_ARGUMENT: "",
    DocumentType.POSITION_STATEMENT: "APPLICANT",
    DocumentType.DRAFT_ORDER: "ORDER",
}

DOCUMENT_LABELS: dict[DocumentType, str] = {
    DocumentType.WITNESS_STATEMENT: "Witness Statement",
    DocumentType.SKELETON_ARGUMENT: "Skeleton Argument",
    DocumentType.POSITION_STATEMENT: "Position Statement",
    DocumentType.DRAFT_ORDER: "Draft Order",
}

FILENAME_LABELS: dict[DocumentType, str] = {
    DocumentType.WITNESS_STATEMENT: "Witness_Statement",
    DocumentType.SKELETON_ARGUMENT: "Skeleton_Argument",
    DocumentType.POSITION_STATEMENT: "Position_Statement",
    DocumentType.DRAFT_ORDER: "Draft_Order",
}
FILENAME_FALLBACK_SUBJECT: str = "Draft"

# ---------------------------------------------------------------------------
# Witness statement
# ---------------------------------------------------------------------------

EXHIBIT_KEY: str = "Exhibit"
EXHIBITS_HEADING: str = "EXHIBITS"
STATEMENT_OF_TRUTH_HEADING: str = "STATEMENT OF TRUTH"
STATEMENT_OF_TRUTH_TEXT: str = (
    "I believe that the facts stated in this witness statement are true. "
    "I understand that proceedings for contempt of court may be brought against "
    "anyone who makes, or causes to be made, a false statement in a document "
    "verified by a statement of truth without an honest belief in its truth."
)
SIGNATURE_LINE: str = "____________________________"
UNKNOWN_INITIALS: str = "XX"
OTHER_EXHIBIT_TYPE: str = "Other"

STATEMENT_ORDINALS: tuple[str, ...] = ("First", "Second", "Third", "Fourth", "Fifth")

# ---------------------------------------------------------------------------
# Skeleton argument
# ---------------------------------------------------------------------------

# (field name, heading) in document order
SKELETON_SECTIONS: tuple[tuple[str, str], ...] = (
    ("introduction", "Introduction"),
    ("issues", "Issues"),
    ("law", "Legal Framework"),
    ("application", "Application of Law to Facts"),
    ("relief", "Relief Sought"),
)
TIME_ESTIMATE_KEY: str = "Time Estimate"
AUTHORITIES_HEADING: str = "Authorities"
HEARING_KEY: str = "Hearing"
HEARING_DATE_KEY: str = "Hearing date"

# ---------------------------------------------------------------------------
# Position statement
# ---------------------------------------------------------------------------

CURRENT_POSITION_HEADING: str = "CURRENT POSITION"
ORDERS_SOUGHT_HEADING: str = "ORDERS SOUGHT"
OUTSTANDING_HEADING: str = "OUTSTANDING ISSUES"

# ---------------------------------------------------------------------------
# Draft order
# ---------------------------------------------------------------------------

JUDGE_KEY: str = "BEFORE"
ORDERED_LABEL: str = "IT IS ORDERED THAT:"
ORDER_TYPES: tuple[str, ...] = ("ORDER", "DRAFT ORDER", "CONSENT ORDER", "ORDER ON APPLICATION")

# ---------------------------------------------------------------------------
# Footer
# ---------------------------------------------------------------------------

PREPARED_BY_KEY: str = "Prepared by"
