"""Login and registration endpoints (mock authentication)."""

from fastapi import APIRouter, Depends

from clientportal.application.schemas import (
    ApiResponse,
    ClientRegistrationRequest,
    ClientRegistrationResponse,
    ClientResponse,
    LoginRequest,
    LoginResponse,
    LoginUser,
    RegisteredUser,
)
from clientportal.application.services import AuthService, AuthSession, ClientService
from clientportal.infrastructure.dependencies import get_auth_service, get_client_service

router = APIRouter(tags=["Auth"])


def _login_response(session: AuthSession) -> LoginResponse:
    return LoginResponse(
        user=LoginUser.model_validate(session.user),
        token=session.token,
    )


@router.post("/admin/login", response_model=ApiResponse[LoginResponse])
async def admin_login(
    data: LoginRequest,
    service: AuthService = Depends(get_auth_service),
) -> ApiResponse[LoginResponse]:
    """Log in with the static admin credentials."""
    session = await service.admin_login(data.email, data.password)
    return ApiResponse(data=_login_response(session))


@router.post("/clients/register", response_model=ApiResponse[ClientRegistrationResponse])
async def register_client(
    data: ClientRegistrationRequest,
    service: ClientService = Depends(get_client_service),
) -> ApiResponse[ClientRegistrationResponse]:
    """Register a lead as a client; the generated password is returned only here."""
    client, user, password = await service.register(data)
    return ApiResponse(
        data=ClientRegistrationResponse(
            client=ClientResponse.model_validate(client),
            user=RegisteredUser.model_validate(user),
            password_plaintext=password,
        )
    )


@router.post("/clients/login", response_model=ApiResponse[LoginResponse])
async def client_login(
    data: LoginRequest,
    service: AuthService = Depends(get_auth_service),
) -> ApiResponse[LoginResponse]:
    session = await service.client_login(data.email, data.password)
    return ApiResponse(data=_login_response(session))
