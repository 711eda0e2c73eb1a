from __future__ import annotations

from dataclasses import dataclass

MIN_PASSWORD_LENGTH = 6


@dataclass(frozen=True, slots=True)
class User:
    uid: str
    email: str


@dataclass(frozen=True, slots=True)
class AuthSession:
    """Bearer token issued by the identity provider for a signed-in user."""

    token: str
    user: User
