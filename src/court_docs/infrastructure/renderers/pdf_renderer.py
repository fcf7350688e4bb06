"""PDF renderer — implements DocumentRendererPort using fpdf2.

fpdf2's automatic page breaking is switched off: pagination is driven by a
``PageCursor`` so a given instruction sequence always breaks at the same
places for a given page geometry.
"""

from __future__ import annotations

import re
from typing import Callable, Optional, Sequence

from fpdf import FPDF

from court_docs.config import CourtDocsConfig, get_config
from court_docs.domain.models.enums import Align
from court_docs.domain.models.instructions import (
    Heading,
    KeyValue,
    Paragraph,
    RenderInstruction,
    Rule,
    SignatureBlock,
)
from court_docs.domain.ports.document_renderer import DocumentRendererPort
from court_docs.domain.rules.constants import SIGNATURE_LINE

_ALIGNMENTS: dict[Align, str] = {Align.LEFT: "L", Align.CENTER: "C", Align.RIGHT: "R"}

# Emphasis markers fpdf2 recognises in markdown mode
_MARKDOWN_MARKER_RE = re.compile(r"(\*\*|__|~~|--)")

# Common replacements for "smart" punctuation
_REPLACEMENTS = {
    "\u2013": "-",  # en-dash
    "\u2014": "--",  # em-dash
    "\u2018": "'",  # left single quote
    "\u2019": "'",  # right single quote
    "\u201c": '"',  # left double quote
    "\u201d": '"',  # right double quote
    "\u2026": "...",  # ellipsis
}


def sanitize(text: str) -> str:
    """Replace characters not supported by the core PDF fonts (Latin-1)."""
    if not text:
        return ""
    for char, repl in _REPLACEMENTS.items():
        text = text.replace(char, repl)
    # Fallback: encode to latin-1, replace errors with '?'
    return text.encode("latin-1", "replace").decode("latin-1")


def escape_markdown(text: str) -> str:
    """Make *text* literal under fpdf2's ``markdown=True`` parsing."""
    return _MARKDOWN_MARKER_RE.sub(r"\\\1", text.replace("\\", "\\\\"))


class PageCursor:
    """Running vertical position over a fixed page geometry (millimetres)."""

    def __init__(self, page_height: float, top: float, bottom: float) -> None:
        self.top = top
        self.limit = page_height - bottom
        self.y = top
        self.page = 1

    @property
    def at_top(self) -> bool:
        return self.y <= self.top

    def fits(self, height: float) -> bool:
        return self.y + height <= self.limit

    def advance(self, height: float) -> None:
        self.y += height

    def next_page(self) -> None:
        self.page += 1
        self.y = self.top


class PdfRenderer(DocumentRendererPort):
    """Render instructions as a PDF document."""

    extension = "pdf"

    def __init__(self, config: Optional[CourtDocsConfig] = None) -> None:
        self._config = config or get_config()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def render(self, instructions: Sequence[RenderInstruction]) -> bytes:
        """Return the PDF as bytes."""
        return bytes(self.build_pdf(instructions).output())

    def render_bytes(self, instructions: Sequence[RenderInstruction]) -> bytes:
        return self.render(instructions)

    def build_pdf(self, instructions: Sequence[RenderInstruction]) -> FPDF:
        """Draw every instruction and return the (unserialized) ``FPDF``."""
        return _PdfSession(self._config).draw(instructions)


class _PdfSession:
    """Drawing state for one render call: the FPDF object and its cursor."""

    def __init__(self, config: CourtDocsConfig) -> None:
        page = config.page
        self._cfg = config.pdf
        self._pdf = FPDF(orientation="P", unit="mm", format=(page.width_mm, page.height_mm))
        self._pdf.set_auto_page_break(auto=False)
        margin = self._cfg.margin_mm
        self._pdf.set_margins(margin, margin, margin)
        self._left = margin
        self._width = page.width_mm - 2 * margin
        self._line_h = self._cfg.line_height_mm
        self._cursor = PageCursor(page.height_mm, top=margin, bottom=margin)

        self._handlers: dict[type, Callable] = {
            Heading: self._heading,
            Paragraph: self._paragraph,
            Rule: self._rule,
            KeyValue: self._key_value,
            SignatureBlock: self._signature,
        }

    def draw(self, instructions: Sequence[RenderInstruction]) -> FPDF:
        self._pdf.add_page()
        for instruction in instructions:
            handler = self._handlers.get(type(instruction))
            if handler is None:
                raise TypeError(f"PdfRenderer cannot render {type(instruction).__name__}")
            handler(instruction)
        return self._pdf

    # ------------------------------------------------------------------
    # Pagination
    # ------------------------------------------------------------------

    def _ensure(self, height: float) -> None:
        """Start a new page if *height* does not fit below the cursor."""
        if not self._cursor.fits(height) and not self._cursor.at_top:
            self._pdf.add_page()
            self._cursor.next_page()

    def _font(self, style: str = "") -> None:
        self._pdf.set_font(self._cfg.font_family, style, self._cfg.font_size_pt)

    def _wrap(self, text: str, width: float, markdown: bool = False) -> list[str]:
        lines = self._pdf.multi_cell(
            width, self._line_h, text, dry_run=True, output="LINES", markdown=markdown
        )
        return list(lines) or [""]

    def _lines(self, text: str, *, style: str = "", align: Align = Align.LEFT,
               indent: float = 0.0, markdown: bool = False) -> None:
        """Wrap *text* and draw it line by line, breaking pages as needed."""
        self._font(style)
        width = self._width - indent
        for line in self._wrap(sanitize(text), width, markdown):
            self._ensure(self._line_h)
            self._pdf.set_xy(self._left + indent, self._cursor.y)
            self._pdf.cell(width, self._line_h, line, align=_ALIGNMENTS[align], markdown=markdown)
            self._cursor.advance(self._line_h)

    def _gap(self, factor: float = 1.0) -> None:
        self._cursor.advance(self._cfg.block_gap_mm * factor)

    # ------------------------------------------------------------------
    # Instruction handlers
    # ------------------------------------------------------------------

    def _heading(self, item: Heading) -> None:
        if item.level == 1:
            self._lines(item.text, style="B", align=Align.CENTER)
        else:
            self._gap(2)
            # Keep the heading with at least one following line.
            self._ensure(self._line_h * 2)
            self._lines(item.text, style="BU" if item.level == 2 else "B")
        self._gap()

    def _paragraph(self, item: Paragraph) -> None:
        style = ("B" if item.bold else "") + ("I" if item.italic else "")
        if item.numbered is None:
            self._lines(item.text, style=style, align=item.align)
        else:
            indent = self._cfg.number_indent_mm
            self._ensure(self._line_h)
            self._font(style)
            self._pdf.set_xy(self._left, self._cursor.y)
            self._pdf.cell(indent, self._line_h, f"{item.numbered}.")
            self._lines(item.text, style=style, align=item.align, indent=indent)
        self._gap()

    def _rule(self, item: Rule) -> None:
        self._ensure(self._cfg.block_gap_mm * 2)
        self._gap()
        self._pdf.set_line_width(self._cfg.rule_width_mm)
        self._pdf.line(self._left, self._cursor.y, self._left + self._width, self._cursor.y)
        self._gap(2)

    def _key_value(self, item: KeyValue) -> None:
        key = escape_markdown(sanitize(item.key))
        value = escape_markdown(sanitize(item.value))
        self._lines(f"**{key}:** {value}", align=item.align, markdown=True)
        self._gap()

    def _signature(self, item: SignatureBlock) -> None:
        # The three lines stay on one page.
        self._ensure(self._line_h * 3 + self._cfg.block_gap_mm * 2)
        for line in (f"Signed: {SIGNATURE_LINE}", f"Name: {item.name}", f"Date: {SIGNATURE_LINE}"):
            self._lines(line)
            self._gap()
