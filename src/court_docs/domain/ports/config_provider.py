"""Port: Configuration provider — supply court document configuration."""

from abc import ABC, abstractmethod
from typing import Any


class ConfigProviderPort(ABC):
    """Contract for providing configuration to the application.

    The concrete return type is ``Any`` at the domain level; the config
    package's ``CourtDocsConfig`` provides the typed contract.
    """

    @abstractmethod
    def get_config(self) -> Any:
        """Return the current configuration object."""
        ...
