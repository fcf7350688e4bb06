"""Domain errors — custom exceptions for the court documents generator.

These exceptions are raised by domain services and caught by application
or presentation layers. They carry no infrastructure dependencies.
"""


class CourtDocsError(Exception):
    """Base exception for all court documents errors."""


class CaseValidationError(CourtDocsError):
    """Raised when collected form input is incomplete or invalid.

    The message is user-facing and is shown verbatim.
    """


class DocumentGenerationError(CourtDocsError):
    """Raised when rendering or serializing a document fails."""


class ConfigurationError(CourtDocsError):
    """Raised when configuration is invalid or missing."""


class AuthProviderError(CourtDocsError):
    """Raised by identity providers with a provider-specific error code."""

    def __init__(self, code: str, message: str = "") -> None:
        super().__init__(message or code)
        self.code = code
