"""Court documents configuration package."""

from court_docs.config.loader import get_config, load_config
from court_docs.config.models import CourtDocsConfig

__all__ = ["CourtDocsConfig", "get_config", "load_config"]
