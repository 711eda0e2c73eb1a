from __future__ import annotations

from unittest.mock import Mock

import pytest

from car_catalog.domain.errors import UnauthorizedError
from car_catalog.domain.user import AuthSession, User
from car_catalog.ports.identity_provider import IdentityProvider
from car_catalog.use_cases.authenticate import CredentialsRequest, SignIn, SignOut, SignUp

SESSION = AuthSession(token="tok", user=User(uid="u-1", email="driver@example.com"))
CREDENTIALS = CredentialsRequest(email="driver@example.com", password="secret1")


@pytest.fixture()
def mock_provider() -> Mock:
    return Mock(spec=IdentityProvider)


def test_sign_up_delegates_to_provider(mock_provider: Mock) -> None:
    mock_provider.sign_up.return_value = SESSION

    assert SignUp(mock_provider).execute(CREDENTIALS) == SESSION
    mock_provider.sign_up.assert_called_once_with("driver@example.com", "secret1")


def test_sign_in_delegates_to_provider(mock_provider: Mock) -> None:
    mock_provider.sign_in.return_value = SESSION

    assert SignIn(mock_provider).execute(CREDENTIALS) == SESSION


def test_sign_in_propagates_bad_credentials(mock_provider: Mock) -> None:
    mock_provider.sign_in.side_effect = UnauthorizedError("Invalid email or password")

    with pytest.raises(UnauthorizedError):
        SignIn(mock_provider).execute(CREDENTIALS)


def test_sign_out_revokes_token(mock_provider: Mock) -> None:
    SignOut(mock_provider).execute("tok")

    mock_provider.sign_out.assert_called_once_with("tok")
