"""Word (.docx) renderer — implements DocumentRendererPort using python-docx."""

from __future__ import annotations

from io import BytesIO
from typing import Callable, Optional, Sequence

from docx import Document
from docx.document import Document as DocxDocument
from docx.enum.section import WD_ORIENT
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.oxml.ns import qn
from docx.shared import Inches, Mm, Pt, RGBColor

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

_ALIGNMENTS: dict[Align, WD_ALIGN_PARAGRAPH] = {
    Align.LEFT: WD_ALIGN_PARAGRAPH.LEFT,
    Align.CENTER: WD_ALIGN_PARAGRAPH.CENTER,
    Align.RIGHT: WD_ALIGN_PARAGRAPH.RIGHT,
}


class DocxRenderer(DocumentRendererPort):
    """Render instructions as a Word document.

    Each call to :meth:`render` starts from a fresh ``Document``; the
    renderer keeps no state between instructions other than that document.
    """

    extension = "docx"

    def __init__(self, config: Optional[CourtDocsConfig] = None) -> None:
        self._config = config or get_config()
        self._type = self._config.typography

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def render(self, instructions: Sequence[RenderInstruction]) -> DocxDocument:
        """Build and return the python-docx ``Document``."""
        doc = Document()
        self._setup_page_layout(doc)
        self._setup_default_style(doc)

        handlers: dict[type, Callable] = {
            Heading: self._heading,
            Paragraph: self._paragraph,
            Rule: self._rule,
            KeyValue: self._key_value,
            SignatureBlock: self._signature,
        }
        for instruction in instructions:
            handler = handlers.get(type(instruction))
            if handler is None:
                raise TypeError(f"DocxRenderer cannot render {type(instruction).__name__}")
            handler(doc, instruction)
        return doc

    def render_bytes(self, instructions: Sequence[RenderInstruction]) -> bytes:
        """Render and serialize to ``.docx`` bytes."""
        buffer = BytesIO()
        self.render(instructions).save(buffer)
        return buffer.getvalue()

    # ------------------------------------------------------------------
    # Page Layout & Default Style
    # ------------------------------------------------------------------

    def _setup_page_layout(self, doc: DocxDocument) -> None:
        """Configure paper size and margins."""
        page = self._config.page
        section = doc.sections[0]
        section.orientation = WD_ORIENT.PORTRAIT
        section.page_width = Mm(page.width_mm)
        section.page_height = Mm(page.height_mm)

        section.top_margin = Mm(page.margins.top_mm)
        section.bottom_margin = Mm(page.margins.bottom_mm)
        section.left_margin = Mm(page.margins.left_mm)
        section.right_margin = Mm(page.margins.right_mm)

    def _setup_default_style(self, doc: DocxDocument) -> None:
        """Set the Normal style font for the whole document."""
        style = doc.styles["Normal"]
        font = style.font
        font.name = self._type.font_name
        font.size = Pt(self._type.font_size_pt)
        font.color.rgb = RGBColor(0, 0, 0)

        pf = style.paragraph_format
        pf.space_before = Pt(0)
        pf.space_after = Pt(0)

    # ------------------------------------------------------------------
    # Instruction handlers
    # ------------------------------------------------------------------

    def _heading(self, doc: DocxDocument, item: Heading) -> None:
        p = doc.add_paragraph()
        pf = p.paragraph_format
        if item.level == 1:
            p.alignment = WD_ALIGN_PARAGRAPH.CENTER
            pf.space_before = Pt(self._type.space_after_pt)
        else:
            pf.space_before = Pt(self._type.heading_space_before_pt)
        pf.space_after = Pt(self._type.heading_space_after_pt)
        pf.keep_with_next = True
        self._add_run(p, item.text, bold=True, underline=item.level == 2)

    def _paragraph(self, doc: DocxDocument, item: Paragraph) -> None:
        p = doc.add_paragraph()
        p.alignment = _ALIGNMENTS[item.align]
        pf = p.paragraph_format

        if item.numbered is not None:
            indent = Inches(self._type.hanging_indent_inches)
            pf.left_indent = indent
            pf.first_line_indent = -indent
            text = f"{item.numbered}.\t{item.text}"
        else:
            text = item.text

        if item.align == Align.LEFT:
            pf.line_spacing = self._type.body_line_spacing
            pf.space_after = Pt(self._type.space_after_pt)
        self._add_run(p, text, bold=item.bold, italic=item.italic)

    def _rule(self, doc: DocxDocument, item: Rule) -> None:
        """Empty paragraph with a single bottom border."""
        p = doc.add_paragraph()
        p_pr = p._p.get_or_add_pPr()
        p_bdr = p_pr.makeelement(qn("w:pBdr"), {})
        bottom = p_bdr.makeelement(
            qn("w:bottom"),
            {
                qn("w:val"): "single",
                qn("w:sz"): str(self._type.rule_weight_eighths),
                qn("w:space"): "1",
                qn("w:color"): "000000",
            },
        )
        p_bdr.append(bottom)
        p_pr.append(p_bdr)
        # pBdr must precede spacing in pPr; python-docx inserts spacing in order.
        p.paragraph_format.space_after = Pt(self._type.space_after_pt)

    def _key_value(self, doc: DocxDocument, item: KeyValue) -> None:
        p = doc.add_paragraph()
        p.alignment = _ALIGNMENTS[item.align]
        p.paragraph_format.space_after = Pt(self._type.space_after_pt)
        self._add_run(p, f"{item.key}: ", bold=True)
        self._add_run(p, item.value)

    def _signature(self, doc: DocxDocument, item: SignatureBlock) -> None:
        for line in (f"Signed: {SIGNATURE_LINE}", f"Name: {item.name}", f"Date: {SIGNATURE_LINE}"):
            p = doc.add_paragraph()
            p.paragraph_format.space_after = Pt(self._type.space_after_pt)
            self._add_run(p, line)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _add_run(
        self,
        paragraph,
        text: str,
        *,
        bold: bool = False,
        italic: bool = False,
        underline: bool = False,
    ):
        run = paragraph.add_run(text)
        run.bold = bold
        run.italic = italic
        run.underline = underline
        run.font.name = self._type.font_name
        run.font.size = Pt(self._type.font_size_pt)
        return run
