from __future__ import annotations

from abc import ABC, abstractmethod

from car_catalog.domain.user import AuthSession, User


class IdentityProvider(ABC):
    """
    Port for the managed identity provider (email + password sessions).

    Implementations raise:
        - ConflictError when signing up with an email that already exists
        - UnauthorizedError when credentials are wrong
        - ValidationError for malformed email or too-short password
    """

    @abstractmethod
    def sign_up(self, email: str, password: str) -> AuthSession: ...

    @abstractmethod
    def sign_in(self, email: str, password: str) -> AuthSession: ...

    @abstractmethod
    def sign_out(self, token: str) -> None:
        """Invalidate a session token. Unknown tokens are ignored."""
        ...

    @abstractmethod
    def resolve(self, token: str) -> User | None:
        """Current user for a session token, or None when it is not valid."""
        ...
