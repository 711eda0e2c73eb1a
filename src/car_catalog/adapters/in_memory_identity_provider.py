from __future__ import annotations

import hashlib
import hmac
import secrets
import threading
import uuid
from dataclasses import dataclass

from email_validator import EmailNotValidError, validate_email

from car_catalog.domain.errors import ConflictError, UnauthorizedError, ValidationError
from car_catalog.domain.user import MIN_PASSWORD_LENGTH, AuthSession, User
from car_catalog.ports.identity_provider import IdentityProvider

PBKDF2_ITERATIONS = 200_000


@dataclass(frozen=True, slots=True)
class _Account:
    user: User
    salt: bytes
    password_hash: bytes


class InMemoryIdentityProvider(IdentityProvider):
    """
    Process-local identity provider for development and tests.

    - Emails are matched case-insensitively and stored lower-cased
    - Passwords are PBKDF2-SHA256 hashed with a per-account salt
    - Session tokens are opaque random strings, valid until sign_out()
    """

    def __init__(self, iterations: int = PBKDF2_ITERATIONS) -> None:
        self._iterations = iterations
        self._lock = threading.Lock()
        self._accounts: dict[str, _Account] = {}
        self._sessions: dict[str, User] = {}

    def sign_up(self, email: str, password: str) -> AuthSession:
        email = self._validate_credentials(email, password)
        salt = secrets.token_bytes(16)
        account = _Account(
            user=User(uid=uuid.uuid4().hex, email=email),
            salt=salt,
            password_hash=self._hash(password, salt),
        )

        with self._lock:
            if email in self._accounts:
                raise ConflictError("An account with this email already exists")
            self._accounts[email] = account

        return self._open_session(account.user)

    def sign_in(self, email: str, password: str) -> AuthSession:
        with self._lock:
            account = self._accounts.get(email.strip().lower())

        if account is None or not hmac.compare_digest(
            account.password_hash, self._hash(password, account.salt)
        ):
            raise UnauthorizedError("Invalid email or password")

        return self._open_session(account.user)

    def sign_out(self, token: str) -> None:
        with self._lock:
            self._sessions.pop(token, None)

    def resolve(self, token: str) -> User | None:
        with self._lock:
            return self._sessions.get(token)

    def _open_session(self, user: User) -> AuthSession:
        token = secrets.token_urlsafe(32)
        with self._lock:
            self._sessions[token] = user
        return AuthSession(token=token, user=user)

    def _hash(self, password: str, salt: bytes) -> bytes:
        return hashlib.pbkdf2_hmac("sha256", password.encode(), salt, self._iterations)

    def _validate_credentials(self, email: str, password: str) -> str:
        errors: list[dict[str, str]] = []
        normalized = email.strip().lower()

        try:
            normalized = validate_email(normalized, check_deliverability=False).normalized.lower()
        except EmailNotValidError:
            errors.append(
                {"field": "email", "message": "Must be a valid email address", "code": "INVALID_EMAIL"}
            )
        if len(password) < MIN_PASSWORD_LENGTH:
            errors.append(
                {
                    "field": "password",
                    "message": f"Must be at least {MIN_PASSWORD_LENGTH} characters",
                    "code": "TOO_SHORT",
                }
            )

        if errors:
            raise ValidationError(errors=errors)
        return normalized
