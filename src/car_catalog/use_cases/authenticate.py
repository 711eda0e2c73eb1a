"""Sign-up, sign-in and sign-out use cases.

Thin wrappers over the identity provider; they exist so routes depend on
use cases only, like every other endpoint.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from car_catalog.domain.user import AuthSession
from car_catalog.ports.identity_provider import IdentityProvider

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CredentialsRequest:
    email: str
    password: str


class SignUp:
    def __init__(self, identity_provider: IdentityProvider) -> None:
        self._identity_provider = identity_provider

    def execute(self, request: CredentialsRequest) -> AuthSession:
        """
        Raises:
            ValidationError: If email or password is malformed
            ConflictError: If the email is already registered
        """
        session = self._identity_provider.sign_up(request.email, request.password)
        logger.info("User signed up", extra={"uid": session.user.uid})
        return session


class SignIn:
    def __init__(self, identity_provider: IdentityProvider) -> None:
        self._identity_provider = identity_provider

    def execute(self, request: CredentialsRequest) -> AuthSession:
        """
        Raises:
            UnauthorizedError: If the credentials are wrong
        """
        session = self._identity_provider.sign_in(request.email, request.password)
        logger.info("User signed in", extra={"uid": session.user.uid})
        return session


class SignOut:
    def __init__(self, identity_provider: IdentityProvider) -> None:
        self._identity_provider = identity_provider

    def execute(self, token: str) -> None:
        self._identity_provider.sign_out(token)
