from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.di import Container
from src.platform.exception.exceptions import InvalidCredentialsError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.clubverse_metrics import metrics
from src.service.clubverse.app.interface.i_password_hasher import IPasswordHasher
from src.service.clubverse.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.clubverse.domain.entity.user_entity import UserEntity
from src.service.clubverse.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


class LoginUseCase:
    def __init__(
        self,
        *,
        user_query_repo: IUserQueryRepo,
        password_hasher: IPasswordHasher,
        jwt_auth: JwtAuth,
    ) -> None:
        self.user_query_repo = user_query_repo
        self.password_hasher = password_hasher
        self.jwt_auth = jwt_auth
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        user_query_repo: IUserQueryRepo = Depends(Provide[Container.user_query_repo]),
        password_hasher: IPasswordHasher = Depends(Provide[Container.password_hasher]),
        jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
    ) -> Self:
        return cls(
            user_query_repo=user_query_repo,
            password_hasher=password_hasher,
            jwt_auth=jwt_auth,
        )

    async def login(self, *, email: str, password: str) -> tuple[UserEntity, str]:
        """
        Returns:
            (user without password hash, signed session token)

        Raises:
            InvalidCredentialsError: unknown email or wrong password, indistinguishably
        """
        with self.tracer.start_as_current_span('use_case.login'):
            user_entity = await self.user_query_repo.get_by_email(
                UserEntity.normalize_email(email)
            )

            if user_entity is None or not user_entity.check_password(
                password or '', self.password_hasher
            ):
                metrics.record_login(result='invalid_credentials')
                Logger.base.warning('🔑 [LOGIN] Rejected credentials')
                raise InvalidCredentialsError()

            token = self.jwt_auth.issue_token(user_entity)
            metrics.record_login(result='success')
            Logger.base.info(f'🔑 [LOGIN] User {user_entity.id} signed in')
            return user_entity.without_password(), token
