"""Domain models — public API.

Provides convenient imports for the most commonly used domain entities.
"""

from court_docs.domain.models.case import CaseRecord, Party
from court_docs.domain.models.content import (
    DocumentContent,
    DraftOrder,
    Exhibit,
    PositionStatement,
    SignOff,
    SkeletonArgument,
    WitnessStatement,
    document_type_of,
)
from court_docs.domain.models.enums import (
    Align,
    DocumentType,
    OutputFormat,
    ProceedingStyle,
    WritingMode,
)
from court_docs.domain.models.instructions import (
    INSTRUCTION_TYPES,
    Heading,
    KeyValue,
    Paragraph,
    RenderInstruction,
    Rule,
    SignatureBlock,
)

__all__ = [
    # Case
    "CaseRecord",
    "Party",
    # Content
    "DocumentContent",
    "DraftOrder",
    "Exhibit",
    "PositionStatement",
    "SignOff",
    "SkeletonArgument",
    "WitnessStatement",
    "document_type_of",
    # Enums
    "Align",
    "DocumentType",
    "OutputFormat",
    "ProceedingStyle",
    "WritingMode",
    # Instructions
    "INSTRUCTION_TYPES",
    "Heading",
    "KeyValue",
    "Paragraph",
    "RenderInstruction",
    "Rule",
    "SignatureBlock",
]
