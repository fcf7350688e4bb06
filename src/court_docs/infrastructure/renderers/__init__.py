"""Renderer adapters — one per output format."""

from court_docs.infrastructure.renderers.docx_renderer import DocxRenderer
from court_docs.infrastructure.renderers.html_renderer import HtmlRenderer
from court_docs.infrastructure.renderers.pdf_renderer import PdfRenderer

__all__ = ["DocxRenderer", "HtmlRenderer", "PdfRenderer"]
