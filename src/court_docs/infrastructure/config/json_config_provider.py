"""JSON config provider — implements ConfigProviderPort."""

from __future__ import annotations

from pathlib import Path

from pydantic import ValidationError

from court_docs.config.loader import get_config, load_config
from court_docs.config.models import CourtDocsConfig
from court_docs.domain.errors import ConfigurationError
from court_docs.domain.ports.config_provider import ConfigProviderPort


class JsonConfigProvider(ConfigProviderPort):
    """Load configuration from a JSON file, lazily and once."""

    def __init__(self, config_path: str | Path | None = None) -> None:
        self._config_path = config_path
        self._config: CourtDocsConfig | None = None

    def get_config(self) -> CourtDocsConfig:
        """Return the configuration, wrapping load failures in ConfigurationError."""
        if self._config is None:
            try:
                if self._config_path:
                    self._config = load_config(Path(self._config_path))
                else:
                    self._config = get_config()
            except (FileNotFoundError, ValidationError, ValueError) as exc:
                raise ConfigurationError(f"Invalid configuration: {exc}") from exc
        return self._config
