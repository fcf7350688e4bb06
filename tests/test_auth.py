"""Tests for the auth service and the local identity provider."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import pytest

from court_docs.application.use_cases.authenticate import AuthService
from court_docs.domain.errors import AuthProviderError
from court_docs.domain.ports.auth_provider import AuthProviderPort, Identity
from court_docs.infrastructure.auth.local_provider import LocalAuthProvider


class FakeProvider(AuthProviderPort):
    """In-memory provider that can be told to fail with a given code."""

    def __init__(self) -> None:
        self.user: Optional[Identity] = None
        self.fail_with: Optional[str] = None
        self.session_error: Optional[str] = None
        self.calls: list[str] = []

    def _maybe_fail(self, name: str) -> None:
        self.calls.append(name)
        if self.fail_with:
            raise AuthProviderError(self.fail_with)

    def sign_in(self, email, password):
        self._maybe_fail("sign_in")
        self.user = Identity(uid="1", email=email)
        return self.user

    def create_user(self, email, password):
        self._maybe_fail("create_user")
        self.user = Identity(uid="1", email=email)
        return self.user

    def sign_out(self):
        self._maybe_fail("sign_out")
        self.user = None

    def current_user(self):
        if self.session_error:
            raise AuthProviderError(self.session_error)
        return self.user


@pytest.fixture()
def provider() -> FakeProvider:
    return FakeProvider()


@pytest.fixture()
def service(provider: FakeProvider) -> AuthService:
    return AuthService(provider)


# ---------------------------------------------------------------------------
# AuthService
# ---------------------------------------------------------------------------


class TestAuthService:
    def test_login(self, service):
        result = service.login(" jane@example.com ", "secret1")
        assert result.success
        assert service.current_session().email == "jane@example.com"

    @pytest.mark.parametrize(
        "code,message",
        [
            ("auth/wrong-password", "Incorrect password. Please try again."),
            ("auth/user-not-found", "No account found with this email. Please register first."),
            ("auth/invalid-credential", "Incorrect email or password. Please try again."),
            ("auth/too-many-requests", "Too many failed attempts. Please try again later."),
            ("auth/network-request-failed", "An error occurred. Please try again."),
        ],
    )
    def test_login_error_messages(self, service, provider, code, message):
        provider.fail_with = code
        result = service.login("jane@example.com", "secret1")
        assert not result.success
        assert result.message == message

    def test_register_password_mismatch_checked_first(self, service, provider):
        result = service.register("jane@example.com", "abc", "abd")
        assert result.message == "Passwords do not match"
        assert provider.calls == []

    def test_register_short_password(self, service, provider):
        result = service.register("jane@example.com", "abc", "abc")
        assert result.message == "Password must be at least 6 characters"
        assert provider.calls == []

    def test_register_email_in_use(self, service, provider):
        provider.fail_with = "auth/email-already-in-use"
        result = service.register("jane@example.com", "secret1", "secret1")
        assert result.message == "This email is already registered. Please log in instead."

    def test_register_success(self, service):
        assert service.register("jane@example.com", "secret1", "secret1").success
        assert service.current_session() is not None

    def test_logout(self, service):
        service.login("jane@example.com", "secret1")
        assert service.logout().success
        assert service.current_session() is None

    def test_observer_called_immediately_and_on_change(self, service):
        seen = []
        unsubscribe = service.on_session_changed(seen.append)
        service.login("jane@example.com", "secret1")
        service.logout()
        unsubscribe()
        service.login("jane@example.com", "secret1")
        assert [s.email if s else None for s in seen] == [None, "jane@example.com", None]

    def test_unreadable_session_reads_as_signed_out(self, service, provider, caplog):
        provider.session_error = "auth/internal-error"
        assert service.current_session() is None
        assert "auth/internal-error" in caplog.text

    def test_failed_login_does_not_notify(self, service, provider):
        seen = []
        service.on_session_changed(seen.append)
        provider.fail_with = "auth/wrong-password"
        service.login("jane@example.com", "secret1")
        assert seen == [None]


# ---------------------------------------------------------------------------
# LocalAuthProvider
# ---------------------------------------------------------------------------


class TestLocalAuthProvider:
    @pytest.fixture()
    def local(self, tmp_path: Path) -> LocalAuthProvider:
        return LocalAuthProvider(data_dir=tmp_path / "data")

    def _code(self, fn, *args) -> str:
        with pytest.raises(AuthProviderError) as exc_info:
            fn(*args)
        return exc_info.value.code

    def test_no_session_initially(self, local):
        assert local.current_user() is None

    def test_create_user_starts_session(self, local):
        identity = local.create_user("Jane@Example.com", "secret1")
        assert identity.email == "jane@example.com"
        assert local.current_user() == identity

    def test_session_persists_across_instances(self, local, tmp_path):
        local.create_user("jane@example.com", "secret1")
        again = LocalAuthProvider(data_dir=tmp_path / "data")
        assert again.current_user().email == "jane@example.com"

    def test_passwords_not_stored_in_clear(self, local):
        local.create_user("jane@example.com", "secret1")
        raw = local.store_path.read_text(encoding="utf-8")
        assert "secret1" not in raw
        assert json.loads(raw)["session"] == "jane@example.com"

    def test_sign_out_and_in(self, local):
        local.create_user("jane@example.com", "secret1")
        local.sign_out()
        assert local.current_user() is None
        assert local.sign_in("jane@example.com", "secret1").email == "jane@example.com"

    def test_error_codes(self, local):
        assert self._code(local.create_user, "not-an-email", "secret1") == "auth/invalid-email"
        assert self._code(local.create_user, "jane@example.com", "123") == "auth/weak-password"
        local.create_user("jane@example.com", "secret1")
        assert self._code(local.create_user, "jane@example.com", "secret1") == "auth/email-already-in-use"
        assert self._code(local.sign_in, "bob@example.com", "secret1") == "auth/user-not-found"
        assert self._code(local.sign_in, "jane@example.com", "wrong!") == "auth/wrong-password"

    def test_failed_sign_in_keeps_session(self, local):
        local.create_user("jane@example.com", "secret1")
        with pytest.raises(AuthProviderError):
            local.sign_in("jane@example.com", "wrong!")
        assert local.current_user() is not None

    def test_through_service(self, local):
        service = AuthService(local)
        assert service.register("jane@example.com", "secret1", "secret1").success
        assert service.logout().success
        result = service.login("jane@example.com", "nope123")
        assert result.message == "Incorrect password. Please try again."
