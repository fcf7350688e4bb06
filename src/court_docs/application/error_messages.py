"""User-facing error messages.

Belongs to the Application layer. Translates Pydantic machine errors and
identity-provider error codes into fixed, user-friendly strings. Raw
provider errors are never shown to the user.
"""

from __future__ import annotations

from typing import Any

# ---------------------------------------------------------------------------
# Form validation
# ---------------------------------------------------------------------------

MISSING_CASE_NUMBER = "Please enter a case number"
TOO_FEW_PARTIES = "Please enter at least two parties"
MISSING_EXHIBIT_TYPE = "Please select a document type"
MISSING_CUSTOM_EXHIBIT_TYPE = "Please enter a custom document type"
MISSING_DOCUMENT_TYPE = "Please choose a document type first"
MISSING_CASE_DETAILS = "Please complete the case details first"
EXPORT_FAILED = "Error generating document. Please try again."

# Maps (field, error_type) → message
_ERROR_MAP: dict[tuple[str, str], str] = {
    ("case.case_number", "missing"): MISSING_CASE_NUMBER,
    ("case.case_number", "value_error"): MISSING_CASE_NUMBER,
    ("case.parties", "missing"): TOO_FEW_PARTIES,
    ("case.parties", "too_short"): TOO_FEW_PARTIES,
    ("case.parties", "value_error"): TOO_FEW_PARTIES,
    ("case.proceeding_style", "enum"): "Proceeding style must be 'adversarial' or 'non-adversarial'.",
    ("document", "union_tag_invalid"): (
        "Unknown document kind. Use witness-statement, skeleton-argument, "
        "position-statement or draft-order."
    ),
    ("document", "union_tag_not_found"): "The document needs a 'kind'.",
}


def friendly_error(field: str, error_type: str, fallback: str | None = None) -> str:
    """Return a user-friendly error message.

    Args:
        field: Dotted location of the field that failed validation.
        error_type: The Pydantic error type string (e.g., ``value_error``).
        fallback: Fallback message if no mapping exists.

    Returns:
        A user-facing error string.
    """
    message = _ERROR_MAP.get((field, error_type))
    if message:
        return message
    return fallback or f"Validation error on field '{field}'."


def format_validation_errors(errors: list[dict[str, Any]]) -> list[str]:
    """Convert a list of Pydantic error dicts to user-friendly messages.

    Args:
        errors: Output of ``ValidationError.errors()``.

    Returns:
        List of user-friendly error strings, without duplicates.
    """
    result: list[str] = []
    for err in errors:
        field = ".".join(str(loc) for loc in err.get("loc", []))
        msg = friendly_error(field, err.get("type", ""), fallback=f"{field}: {err.get('msg')}")
        if msg not in result:
            result.append(msg)
    return result


# ---------------------------------------------------------------------------
# Authentication
# ---------------------------------------------------------------------------

AUTH_ERROR_MESSAGES: dict[str, str] = {
    "auth/email-already-in-use": "This email is already registered. Please log in instead.",
    "auth/invalid-email": "Please enter a valid email address.",
    "auth/weak-password": "Password is too weak. Please use at least 6 characters.",
    "auth/user-not-found": "No account found with this email. Please register first.",
    "auth/wrong-password": "Incorrect password. Please try again.",
    "auth/invalid-credential": "Incorrect email or password. Please try again.",
    "auth/too-many-requests": "Too many failed attempts. Please try again later.",
}
AUTH_FALLBACK_MESSAGE = "An error occurred. Please try again."
PASSWORDS_DO_NOT_MATCH = "Passwords do not match"
PASSWORD_TOO_SHORT = "Password must be at least 6 characters"


def auth_error_message(code: str) -> str:
    """Map a provider error code to its fixed user-facing string."""
    return AUTH_ERROR_MESSAGES.get(code, AUTH_FALLBACK_MESSAGE)
