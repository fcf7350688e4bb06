"""Use Case: Authenticate.

Wraps an ``AuthProviderPort`` so the rest of the application sees a
``login / register / logout`` API returning ``AuthResult`` values with
user-facing messages, plus observers notified whenever the session changes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from court_docs.application.error_messages import (
    PASSWORD_TOO_SHORT,
    PASSWORDS_DO_NOT_MATCH,
    auth_error_message,
)
from court_docs.domain.errors import AuthProviderError
from court_docs.domain.ports.auth_provider import AuthProviderPort, Identity

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6

SessionObserver = Callable[[Optional[Identity]], None]


@dataclass
class AuthResult:
    """Outcome of a login/register/logout attempt."""

    success: bool
    message: str = ""


class AuthService:
    """Gatekeeper for the application shell."""

    def __init__(self, provider: AuthProviderPort) -> None:
        self._provider = provider
        self._observers: list[SessionObserver] = []

    # -- Session observation -------------------------------------------------

    def current_session(self) -> Optional[Identity]:
        """The signed-in identity, or ``None`` when signed out or the session cannot be read."""
        try:
            return self._provider.current_user()
        except AuthProviderError as exc:
            logger.warning("Could not read session (%s): %s", exc.code, exc)
            return None

    def on_session_changed(self, observer: SessionObserver) -> Callable[[], None]:
        """Register *observer*; it is called once immediately with the current session.

        Returns a function that unregisters the observer.
        """
        self._observers.append(observer)
        observer(self.current_session())
        return lambda: self._observers.remove(observer)

    def _notify(self) -> None:
        identity = self.current_session()
        if identity:
            logger.info("User logged in: %s", identity.email)
        else:
            logger.info("No user logged in")
        for observer in list(self._observers):
            observer(identity)

    # -- Operations ----------------------------------------------------------

    def login(self, email: str, password: str) -> AuthResult:
        try:
            self._provider.sign_in(email.strip(), password)
        except AuthProviderError as exc:
            return AuthResult(False, auth_error_message(exc.code))
        self._notify()
        return AuthResult(True)

    def register(self, email: str, password: str, confirm: Optional[str] = None) -> AuthResult:
        if confirm is not None and password != confirm:
            return AuthResult(False, PASSWORDS_DO_NOT_MATCH)
        if len(password) < MIN_PASSWORD_LENGTH:
            return AuthResult(False, PASSWORD_TOO_SHORT)
        try:
            self._provider.create_user(email.strip(), password)
        except AuthProviderError as exc:
            return AuthResult(False, auth_error_message(exc.code))
        self._notify()
        return AuthResult(True)

    def logout(self) -> AuthResult:
        try:
            self._provider.sign_out()
        except AuthProviderError as exc:
            return AuthResult(False, auth_error_message(exc.code))
        self._notify()
        return AuthResult(True)
