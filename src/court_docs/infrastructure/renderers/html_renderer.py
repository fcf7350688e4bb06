"""HTML renderer — implements DocumentRendererPort for the live preview.

Every text value goes through ``escape_markup``; nothing else in the
pipeline knows about markup.
"""

from __future__ import annotations

from typing import Callable, Sequence

from court_docs.domain.formatting import escape_markup
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

esc = escape_markup

PREVIEW_CSS = """
body { background: #f3f3f3; }
.court-document { font-family: "Century Gothic", "Times New Roman", serif; font-size: 12pt;
  line-height: 1.5; max-width: 210mm; margin: 2em auto; padding: 25mm; background: #fff; }
.court-document p { margin: 0 0 0.6em 0; }
.align-center { text-align: center; }
.align-right { text-align: right; }
.doc-title { font-size: 12pt; font-weight: bold; text-align: center; margin: 0.6em 0; }
.section-heading { font-size: 12pt; font-weight: bold; text-decoration: underline; margin: 1.2em 0 0.6em; }
.label-heading { font-size: 12pt; font-weight: bold; margin: 1.2em 0 0.6em; }
.numbered { padding-left: 0.5in; text-indent: -0.5in; }
.para-num { display: inline-block; width: 0.5in; text-indent: 0; }
.header-line { border: 0; border-top: 1.5pt solid #000; }
.signature-block { margin-top: 2em; }
""".strip()

_ALIGN_CLASSES: dict[Align, str] = {
    Align.LEFT: "",
    Align.CENTER: "align-center",
    Align.RIGHT: "align-right",
}

_HEADING_TAGS: dict[int, tuple[str, str]] = {
    1: ("h1", "doc-title"),
    2: ("h2", "section-heading"),
    3: ("h3", "label-heading"),
}


def _class_attr(*names: str) -> str:
    classes = " ".join(n for n in names if n)
    return f' class="{classes}"' if classes else ""


class HtmlRenderer(DocumentRendererPort):
    """Render instructions as preview markup.

    Parameters
    ----------
    standalone : bool
        Wrap the fragment in a complete HTML page with the preview stylesheet.
    title : str
        ``<title>`` of the standalone page.
    """

    extension = "html"

    def __init__(self, standalone: bool = False, title: str = "Document preview") -> None:
        self._standalone = standalone
        self._title = title
        self._handlers: dict[type, Callable[..., str]] = {
            Heading: self._heading,
            Paragraph: self._paragraph,
            Rule: self._rule,
            KeyValue: self._key_value,
            SignatureBlock: self._signature,
        }

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def render(self, instructions: Sequence[RenderInstruction]) -> str:
        """Return the preview markup for *instructions*."""
        parts = [self._dispatch(instruction) for instruction in instructions]
        fragment = '<div class="court-document">\n' + "\n".join(parts) + "\n</div>"
        if not self._standalone:
            return fragment
        return (
            "<!DOCTYPE html>\n"
            '<html lang="en">\n<head>\n<meta charset="utf-8">\n'
            f"<title>{esc(self._title)}</title>\n"
            f"<style>\n{PREVIEW_CSS}\n</style>\n</head>\n<body>\n"
            f"{fragment}\n</body>\n</html>\n"
        )

    def render_bytes(self, instructions: Sequence[RenderInstruction]) -> bytes:
        return self.render(instructions).encode("utf-8")

    # ------------------------------------------------------------------
    # Instruction handlers
    # ------------------------------------------------------------------

    def _dispatch(self, instruction: RenderInstruction) -> str:
        handler = self._handlers.get(type(instruction))
        if handler is None:
            raise TypeError(f"HtmlRenderer cannot render {type(instruction).__name__}")
        return handler(instruction)

    def _heading(self, item: Heading) -> str:
        tag, css = _HEADING_TAGS[item.level]
        return f'<{tag} class="{css}">{esc(item.text)}</{tag}>'

    def _paragraph(self, item: Paragraph) -> str:
        text = esc(item.text)
        if item.bold:
            text = f"<strong>{text}</strong>"
        if item.italic:
            text = f"<em>{text}</em>"

        if item.numbered is not None:
            return (
                f'<p{_class_attr("numbered", _ALIGN_CLASSES[item.align])}>'
                f'<span class="para-num">{item.numbered}.</span> {text}</p>'
            )
        return f"<p{_class_attr(_ALIGN_CLASSES[item.align])}>{text}</p>"

    def _rule(self, item: Rule) -> str:
        return '<hr class="header-line">'

    def _key_value(self, item: KeyValue) -> str:
        return (
            f"<p{_class_attr(_ALIGN_CLASSES[item.align])}>"
            f"<strong>{esc(item.key)}:</strong> {esc(item.value)}</p>"
        )

    def _signature(self, item: SignatureBlock) -> str:
        return (
            '<div class="signature-block">\n'
            f"<p>Signed: {SIGNATURE_LINE}</p>\n"
            f"<p>Name: {esc(item.name)}</p>\n"
            f"<p>Date: {SIGNATURE_LINE}</p>\n"
            "</div>"
        )
