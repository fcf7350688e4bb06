"""Port: Identity provider — opaque sign-in / sign-up / sign-out capability."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from pydantic import BaseModel


class Identity(BaseModel):
    """The signed-in user as seen by the application."""

    uid: str
    email: str


class AuthProviderPort(ABC):
    """Contract for a hosted or local identity provider.

    Implementations raise ``AuthProviderError`` carrying a provider error
    code (``auth/wrong-password`` ...). They never return partial state.
    """

    @abstractmethod
    def sign_in(self, email: str, password: str) -> Identity:
        """Start a session for an existing account."""

    @abstractmethod
    def create_user(self, email: str, password: str) -> Identity:
        """Create an account and start a session for it."""

    @abstractmethod
    def sign_out(self) -> None:
        """End the current session, if any."""

    @abstractmethod
    def current_user(self) -> Optional[Identity]:
        """Return the identity of the active session, or ``None``."""
