from __future__ import annotations

from car_catalog.domain.user import AuthSession, User
from car_catalog.entrypoints.http.dtos.auth import AuthSessionDTO, CredentialsDTO, UserDTO
from car_catalog.use_cases.authenticate import CredentialsRequest


class AuthMapper:
    @staticmethod
    def to_credentials(dto: CredentialsDTO) -> CredentialsRequest:
        return CredentialsRequest(email=dto.email, password=dto.password)

    @staticmethod
    def to_session_response(session: AuthSession) -> AuthSessionDTO:
        return AuthSessionDTO(
            token=session.token,
            uid=session.user.uid,
            email=session.user.email,
        )

    @staticmethod
    def to_user_response(user: User) -> UserDTO:
        return UserDTO(uid=user.uid, email=user.email)
