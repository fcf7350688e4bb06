"""Tests for the preview and export use cases and the container."""

from __future__ import annotations

from datetime import date
from io import BytesIO
from pathlib import Path

import docx
import pytest

from court_docs.application.use_cases.export_document import ExportDocumentUseCase
from court_docs.application.use_cases.preview_document import PreviewDocumentUseCase
from court_docs.bootstrap import DATA_DIR_ENV, Container, default_data_dir
from court_docs.domain.errors import DocumentGenerationError
from court_docs.domain.models import OutputFormat
from court_docs.infrastructure.renderers import DocxRenderer, HtmlRenderer, PdfRenderer


class BrokenRenderer(HtmlRenderer):
    extension = "docx"

    def render_bytes(self, instructions):
        raise RuntimeError("disk on fire")


class TestPreview:
    def test_renders_markup(self, case, witness_statement):
        html = PreviewDocumentUseCase(HtmlRenderer()).execute(case, witness_statement)
        assert "WITNESS STATEMENT OF JANE DOE" in html
        assert "CASE/2024-001" in html

    def test_signoff_optional(self, case, draft_order, signoff):
        uc = PreviewDocumentUseCase(HtmlRenderer())
        assert "Prepared by" not in uc.execute(case, draft_order)
        assert "Prepared by" in uc.execute(case, draft_order, signoff)


class TestExport:
    def test_docx(self, tmp_path: Path, case, witness_statement, signoff):
        uc = ExportDocumentUseCase(DocxRenderer())
        result = uc.execute(case, witness_statement, tmp_path, on=date(2025, 6, 3), signoff=signoff)
        assert result.filename == "Witness_Statement_Jane_Doe_2025-06-03.docx"
        assert result.output_path == tmp_path / result.filename
        assert result.size == result.output_path.stat().st_size
        texts = [p.text for p in docx.Document(BytesIO(result.output_path.read_bytes())).paragraphs]
        assert "Prepared by: A. Solicitor" in texts

    def test_pdf(self, tmp_path: Path, case, draft_order):
        uc = ExportDocumentUseCase(PdfRenderer())
        result = uc.execute(case, draft_order, tmp_path / "out", on=date(2025, 6, 3))
        assert result.filename == "Draft_Order_CASE_2024_001_2025-06-03.pdf"
        assert result.output_path.read_bytes()[:4] == b"%PDF"

    def test_defaults_to_today(self, tmp_path: Path, case, draft_order):
        result = ExportDocumentUseCase(PdfRenderer()).execute(case, draft_order, tmp_path)
        assert result.filename.endswith(f"_{date.today().isoformat()}.pdf")

    def test_failure_is_wrapped(self, tmp_path: Path, case, draft_order, caplog):
        uc = ExportDocumentUseCase(BrokenRenderer())
        with pytest.raises(DocumentGenerationError, match="Error generating document. Please try again."):
            uc.execute(case, draft_order, tmp_path, on=date(2025, 6, 3))
        assert "disk on fire" in caplog.text
        assert not list(tmp_path.iterdir())


class TestContainer:
    def test_wiring(self, tmp_path: Path):
        container = Container(data_dir=tmp_path)
        assert container.export_document(OutputFormat.PDF)._renderer is container.get_renderer(OutputFormat.PDF)
        assert isinstance(container.get_renderer(OutputFormat.DOCX), DocxRenderer)
        assert container.auth_service().current_session() is None
        assert container.data_dir == tmp_path

    def test_data_dir_env(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv(DATA_DIR_ENV, str(tmp_path))
        assert default_data_dir() == tmp_path
        assert Container().data_dir == tmp_path
