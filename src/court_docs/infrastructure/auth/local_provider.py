"""Local identity provider — implements AuthProviderPort on a JSON file.

Accounts and the active session are persisted under the user data
directory (``platformdirs.user_data_dir("court_docs")``). Errors use the
same ``auth/...`` codes as hosted providers so ``AuthService`` can map
them to fixed messages.
"""

from __future__ import annotations

import hashlib
import json
import re
import secrets
import tempfile
import uuid
from pathlib import Path
from typing import Optional

import platformdirs

from court_docs.domain.errors import AuthProviderError
from court_docs.domain.ports.auth_provider import AuthProviderPort, Identity

_APP_NAME = "court_docs"
_STORE_FILENAME = "accounts.json"
_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
_PBKDF2_ROUNDS = 200_000
_MIN_PASSWORD_LENGTH = 6


def _hash_password(password: str, salt: str) -> str:
    digest = hashlib.pbkdf2_hmac(
        "sha256", password.encode("utf-8"), bytes.fromhex(salt), _PBKDF2_ROUNDS
    )
    return digest.hex()


class LocalAuthProvider(AuthProviderPort):
    """Email/password accounts stored locally.

    Parameters
    ----------
    data_dir : Path | None
        Override the default data directory (useful for testing).
    """

    def __init__(self, data_dir: Path | None = None) -> None:
        self._data_dir = Path(data_dir) if data_dir else Path(
            platformdirs.user_data_dir(_APP_NAME, ensure_exists=True)
        )
        self._store_path = self._data_dir / _STORE_FILENAME

    # -- Public API ----------------------------------------------------------

    def sign_in(self, email: str, password: str) -> Identity:
        store = self._load()
        key = email.lower()
        if not _EMAIL_RE.match(email):
            raise AuthProviderError("auth/invalid-email")
        account = store["accounts"].get(key)
        if account is None:
            raise AuthProviderError("auth/user-not-found")
        if not secrets.compare_digest(_hash_password(password, account["salt"]), account["hash"]):
            raise AuthProviderError("auth/wrong-password")

        store["session"] = key
        self._save(store)
        return Identity(uid=account["uid"], email=key)

    def create_user(self, email: str, password: str) -> Identity:
        store = self._load()
        key = email.lower()
        if not _EMAIL_RE.match(email):
            raise AuthProviderError("auth/invalid-email")
        if len(password) < _MIN_PASSWORD_LENGTH:
            raise AuthProviderError("auth/weak-password")
        if key in store["accounts"]:
            raise AuthProviderError("auth/email-already-in-use")

        salt = secrets.token_hex(16)
        uid = uuid.uuid4().hex
        store["accounts"][key] = {"uid": uid, "salt": salt, "hash": _hash_password(password, salt)}
        store["session"] = key
        self._save(store)
        return Identity(uid=uid, email=key)

    def sign_out(self) -> None:
        store = self._load()
        if store.get("session") is not None:
            store["session"] = None
            self._save(store)

    def current_user(self) -> Optional[Identity]:
        store = self._load()
        key = store.get("session")
        account = store["accounts"].get(key) if key else None
        if account is None:
            return None
        return Identity(uid=account["uid"], email=key)

    @property
    def store_path(self) -> Path:
        """Absolute path to the accounts JSON file."""
        return self._store_path

    # -- Persistence ---------------------------------------------------------

    def _load(self) -> dict:
        if not self._store_path.exists():
            return {"accounts": {}, "session": None}
        try:
            raw = json.loads(self._store_path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise AuthProviderError("auth/internal-error", f"Unreadable account store: {exc}") from exc
        raw.setdefault("accounts", {})
        raw.setdefault("session", None)
        return raw

    def _save(self, store: dict) -> None:
        """Persist atomically (write to temp, then rename)."""
        self._data_dir.mkdir(parents=True, exist_ok=True)
        tmp_fd, tmp_path = tempfile.mkstemp(dir=self._data_dir, suffix=".tmp")
        try:
            with open(tmp_fd, "w", encoding="utf-8") as fh:
                json.dump(store, fh, indent=2)
            Path(tmp_path).replace(self._store_path)
        except Exception:
            Path(tmp_path).unlink(missing_ok=True)
            raise
