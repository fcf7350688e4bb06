"""Composition Root — Dependency Injection Container.

This module is the ONLY place where concrete infrastructure classes are
imported and wired together.  All other layers refer to ports (interfaces).
"""

from __future__ import annotations

import os
from pathlib import Path

import platformdirs

from court_docs.config.models import CourtDocsConfig
from court_docs.domain.models.enums import OutputFormat
from court_docs.domain.ports.auth_provider import AuthProviderPort
from court_docs.domain.ports.config_provider import ConfigProviderPort
from court_docs.domain.ports.document_renderer import DocumentRendererPort

from court_docs.infrastructure.auth.local_provider import LocalAuthProvider
from court_docs.infrastructure.config.json_config_provider import JsonConfigProvider
from court_docs.infrastructure.renderers.docx_renderer import DocxRenderer
from court_docs.infrastructure.renderers.html_renderer import HtmlRenderer
from court_docs.infrastructure.renderers.pdf_renderer import PdfRenderer

from court_docs.application.use_cases.authenticate import AuthService
from court_docs.application.use_cases.export_document import ExportDocumentUseCase
from court_docs.application.use_cases.preview_document import PreviewDocumentUseCase

DATA_DIR_ENV = "COURT_DOCS_DATA_DIR"


def default_data_dir() -> Path:
    """User data directory, overridable through ``COURT_DOCS_DATA_DIR``."""
    override = os.environ.get(DATA_DIR_ENV)
    if override:
        return Path(override)
    return Path(platformdirs.user_data_dir("court_docs"))


class Container:
    """Simple dependency injection container.

    Wires all infrastructure implementations to domain ports
    and provides pre-configured use cases.

    Usage::

        container = Container()
        uc = container.export_document(OutputFormat.DOCX)
        result = uc.execute(case, content, Path("."))
    """

    def __init__(self, config_path: str | Path | None = None, data_dir: Path | None = None) -> None:
        # -- Infrastructure singletons ---------------------------------------
        self._config_provider = JsonConfigProvider(config_path)
        self._config: CourtDocsConfig = self._config_provider.get_config()

        self._docx_renderer = DocxRenderer(config=self._config)
        self._pdf_renderer = PdfRenderer(config=self._config)

        self._data_dir = Path(data_dir) if data_dir else default_data_dir()
        self._auth_provider = LocalAuthProvider(self._data_dir)
        self._auth_service = AuthService(self._auth_provider)

    # -- Port accessors ------------------------------------------------------

    @property
    def config_provider(self) -> ConfigProviderPort:
        return self._config_provider

    @property
    def config(self) -> CourtDocsConfig:
        return self._config

    @property
    def data_dir(self) -> Path:
        return self._data_dir

    @property
    def auth_provider(self) -> AuthProviderPort:
        return self._auth_provider

    def get_renderer(self, fmt: OutputFormat) -> DocumentRendererPort:
        """Return the renderer for the given output format."""
        if fmt == OutputFormat.PDF:
            return self._pdf_renderer
        return self._docx_renderer

    # -- Use case factories --------------------------------------------------

    def preview_document(self, standalone: bool = True) -> PreviewDocumentUseCase:
        return PreviewDocumentUseCase(HtmlRenderer(standalone=standalone))

    def export_document(self, fmt: OutputFormat) -> ExportDocumentUseCase:
        return ExportDocumentUseCase(self.get_renderer(fmt))

    def auth_service(self) -> AuthService:
        return self._auth_service
