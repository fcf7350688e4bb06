"""Rendering instruction model — renderer-agnostic document blocks.

The instruction builder derives a ``tuple`` of these from a case record and
a document content record. Instances are frozen; adapters only read them.
"""

from __future__ import annotations

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from court_docs.domain.models.enums import Align


class _Instruction(BaseModel):
    model_config = ConfigDict(frozen=True)


class Heading(_Instruction):
    """A heading. Level 1 = document title, 2 = section, 3 = run-in label."""

    kind: Literal["heading"] = "heading"
    text: str
    level: int = Field(2, ge=1, le=3)


class Paragraph(_Instruction):
    """A block of body text, optionally carrying a paragraph number."""

    kind: Literal["paragraph"] = "paragraph"
    text: str
    numbered: Optional[int] = Field(None, ge=1)
    align: Align = Align.LEFT
    bold: bool = False
    italic: bool = False


class Rule(_Instruction):
    """A full-width horizontal line."""

    kind: Literal["rule"] = "rule"


class KeyValue(_Instruction):
    """A ``Key: value`` line with an emphasised key."""

    kind: Literal["key_value"] = "key_value"
    key: str
    value: str
    align: Align = Align.LEFT


class SignatureBlock(_Instruction):
    """Signed / Name / Date lines for the person verifying the document."""

    kind: Literal["signature"] = "signature"
    name: str = ""


RenderInstruction = Annotated[
    Union[Heading, Paragraph, Rule, KeyValue, SignatureBlock],
    Field(discriminator="kind"),
]

INSTRUCTION_TYPES: tuple[type, ...] = (Heading, Paragraph, Rule, KeyValue, SignatureBlock)
