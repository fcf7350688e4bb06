"""Reads page, typography and PDF settings for the renderers.

Settings live in JSON. The bundled ``court_docs_default.json`` mirrors the
model defaults; a user file may override any subset of it. Each resolved
path is parsed at most once per process until ``clear_cache`` is called.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from court_docs.config.models import CourtDocsConfig

_BUNDLED = Path(__file__).with_name("court_docs_default.json")

# resolved path -> parsed settings
_loaded: dict[Path, CourtDocsConfig] = {}


def load_config(path: Optional[Path] = None) -> CourtDocsConfig:
    """Return the settings stored at *path*, or the bundled ones.

    Raises:
        FileNotFoundError: *path* does not exist.
        pydantic.ValidationError: the file is not JSON or holds out-of-range values.
    """
    source = Path(path or _BUNDLED).resolve()
    cached = _loaded.get(source)
    if cached is not None:
        return cached

    if not source.is_file():
        raise FileNotFoundError(f"Config file not found: {source}")

    config = CourtDocsConfig.model_validate_json(source.read_bytes())
    _loaded[source] = config
    return config


def get_config() -> CourtDocsConfig:
    return load_config()


def default_config_path() -> Path:
    """Where the bundled settings file is installed; ``config init`` copies it."""
    return _BUNDLED


def clear_cache() -> None:
    _loaded.clear()
