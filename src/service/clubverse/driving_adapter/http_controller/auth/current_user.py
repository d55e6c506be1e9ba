from typing import Optional

from dependency_injector.wiring import Provide, inject
from fastapi import Cookie, Depends, Header

from src.platform.config.core_setting import settings
from src.platform.config.di import Container
from src.service.clubverse.domain.entity.user_entity import UserEntity
from src.service.clubverse.driving_adapter.http_controller.auth.auth_gate import AuthGate


@inject
async def get_current_user(
    authorization: Optional[str] = Header(None),
    token: Optional[str] = Cookie(None, alias=settings.AUTH_COOKIE_NAME),
    auth_gate: AuthGate = Depends(Provide[Container.auth_gate]),
) -> UserEntity:
    """
    Resolve the caller through the auth gate (bearer header, then session cookie)

    Rejections raise UnauthorizedError, rendered as a 401 pointing back at
    the entry page with the rejection reason.
    """
    return await auth_gate.authenticate(
        AuthGate.extract_token(authorization=authorization, cookie_token=token)
    )
