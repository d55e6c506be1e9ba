from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import RedirectResponse

from src.platform.config.core_setting import settings
from src.platform.constant.route_constant import (
    DASHBOARD,
    ENTRY_PAGE,
    USER_LOGIN,
    USER_LOGOUT,
    USER_REGISTER,
)
from src.platform.logging.loguru_io import Logger
from src.platform.security.rate_limiter import api_rate_limit
from src.service.clubverse.app.command.login_use_case import LoginUseCase
from src.service.clubverse.app.command.register_user_use_case import RegisterUserUseCase
from src.service.clubverse.domain.entity.user_entity import UserEntity
from src.service.clubverse.driving_adapter.http_controller.auth.current_user import (
    get_current_user,
)
from src.service.clubverse.driving_adapter.http_controller.schema.user_schema import (
    DashboardResponse,
    LoginRequest,
    LoginResponse,
    MessageResponse,
    RegisterRequest,
    UserResponse,
)


# === API Router ===

router = APIRouter()


def _to_user_response(user_entity: UserEntity) -> UserResponse:
    return UserResponse(
        id=user_entity.id or 0,
        email=user_entity.email,
        name=user_entity.name,
    )


@router.post(USER_REGISTER, response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
@api_rate_limit
@Logger.io
async def register(
    request: Request,
    payload: RegisterRequest,
    use_case: RegisterUserUseCase = Depends(RegisterUserUseCase.depends),
) -> MessageResponse:
    await use_case.register(
        name=payload.name,
        email=payload.email,
        password=payload.password.get_secret_value(),
    )
    return MessageResponse(message='Registration successful! Please login.')


@router.post(USER_LOGIN, response_model=LoginResponse)
@api_rate_limit
@Logger.io
async def login(
    request: Request,
    response: Response,
    payload: LoginRequest,
    use_case: LoginUseCase = Depends(LoginUseCase.depends),
) -> LoginResponse:
    user_entity, token = await use_case.login(
        email=payload.email,
        password=payload.password.get_secret_value(),
    )

    response.set_cookie(
        key=settings.AUTH_COOKIE_NAME,
        value=token,
        max_age=settings.ACCESS_TOKEN_EXPIRE_HOURS * 60 * 60,
        httponly=True,
        samesite='strict',
        secure=settings.COOKIE_SECURE,
    )

    return LoginResponse(
        message='Login successful',
        redirect_to=DASHBOARD,
        user=_to_user_response(user_entity),
    )


@router.get(USER_LOGOUT)
@api_rate_limit
@Logger.io
async def logout(request: Request) -> RedirectResponse:
    # Stateless tokens: dropping the cookie is the whole logout
    response = RedirectResponse(
        url=f'{ENTRY_PAGE}?success=logged_out', status_code=status.HTTP_302_FOUND
    )
    response.delete_cookie(
        key=settings.AUTH_COOKIE_NAME,
        httponly=True,
        samesite='strict',
        secure=settings.COOKIE_SECURE,
    )
    return response


@router.get(DASHBOARD, response_model=DashboardResponse)
@api_rate_limit
@Logger.io
async def dashboard(
    request: Request, current_user: UserEntity = Depends(get_current_user)
) -> DashboardResponse:
    return DashboardResponse(user=_to_user_response(current_user))
