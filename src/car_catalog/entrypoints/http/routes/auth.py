from fastapi import APIRouter, Depends, Response, status

from car_catalog.domain.user import User
from car_catalog.entrypoints.http.dependencies import (
    get_bearer_token,
    get_current_user,
    get_sign_in_use_case,
    get_sign_out_use_case,
    get_sign_up_use_case,
)
from car_catalog.entrypoints.http.dtos.auth import AuthSessionDTO, CredentialsDTO, UserDTO
from car_catalog.entrypoints.http.error_responses import ErrorResponse
from car_catalog.entrypoints.http.mappers.auth_mapper import AuthMapper
from car_catalog.use_cases.authenticate import SignIn, SignOut, SignUp


router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post(
    "/signup",
    response_model=AuthSessionDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Create an account and sign in",
    responses={
        409: {"model": ErrorResponse, "description": "Email already registered"},
        422: {"model": ErrorResponse, "description": "Invalid email or short password"},
    },
)
def sign_up(
    body: CredentialsDTO,
    use_case: SignUp = Depends(get_sign_up_use_case),
) -> AuthSessionDTO:
    session = use_case.execute(AuthMapper.to_credentials(body))
    return AuthMapper.to_session_response(session)


@router.post(
    "/login",
    response_model=AuthSessionDTO,
    summary="Sign in",
    responses={401: {"model": ErrorResponse, "description": "Invalid email or password"}},
)
def login(
    body: CredentialsDTO,
    use_case: SignIn = Depends(get_sign_in_use_case),
) -> AuthSessionDTO:
    session = use_case.execute(AuthMapper.to_credentials(body))
    return AuthMapper.to_session_response(session)


@router.post(
    "/logout",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Sign out",
    description="Revokes the bearer token. Calling it without a token is a no-op.",
)
def logout(
    token: str | None = Depends(get_bearer_token),
    use_case: SignOut = Depends(get_sign_out_use_case),
) -> Response:
    if token is not None:
        use_case.execute(token)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/me",
    response_model=UserDTO,
    summary="Current user",
    responses={401: {"model": ErrorResponse, "description": "Not signed in"}},
)
def me(user: User = Depends(get_current_user)) -> UserDTO:
    return AuthMapper.to_user_response(user)
