"""Enumerations for court document generation."""

from enum import Enum


class DocumentType(str, Enum):
    """The four fixed court-document templates."""

    WITNESS_STATEMENT = "witness-statement"
    SKELETON_ARGUMENT = "skeleton-argument"
    POSITION_STATEMENT = "position-statement"
    DRAFT_ORDER = "draft-order"


class ProceedingStyle(str, Enum):
    """Whether the parties are opposed (``v``) or merely joined (``and``)."""

    ADVERSARIAL = "adversarial"
    NON_ADVERSARIAL = "non-adversarial"


class WritingMode(str, Enum):
    """How the witness statement body is entered."""

    STRUCTURED = "structured"  # one card per numbered paragraph
    FREE = "free"  # one text area, paragraphs separated by blank lines


class Align(str, Enum):
    """Horizontal alignment of a rendered block."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class OutputFormat(str, Enum):
    """Export file formats."""

    DOCX = "docx"
    PDF = "pdf"
