"""Port: Document renderer — turns render instructions into one output format.

This is a domain-level contract. Infrastructure adapters (html, docx, pdf)
implement this interface.
"""

from abc import ABC, abstractmethod
from typing import Any, Sequence

from court_docs.domain.models.instructions import RenderInstruction


class DocumentRendererPort(ABC):
    """Contract for rendering an instruction sequence."""

    #: File extension of the serialized output, without the dot.
    extension: str = ""

    @abstractmethod
    def render(self, instructions: Sequence[RenderInstruction]) -> Any:
        """Return the renderer's native output (markup, document object, bytes)."""
        ...

    @abstractmethod
    def render_bytes(self, instructions: Sequence[RenderInstruction]) -> bytes:
        """Render and serialize to bytes ready to be written to disk."""
        ...
