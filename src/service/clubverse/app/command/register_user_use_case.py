from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.di import Container
from src.platform.exception.exceptions import DuplicateUserError, ValidationError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.clubverse_metrics import metrics
from src.service.clubverse.app.interface.i_password_hasher import IPasswordHasher
from src.service.clubverse.app.interface.i_user_command_repo import IUserCommandRepo
from src.service.clubverse.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.clubverse.domain.entity.user_entity import UserEntity


class RegisterUserUseCase:
    """
    Register a new account

    Validation and the duplicate-email check both run before anything is
    written. No token is issued here: the user logs in separately.
    """

    def __init__(
        self,
        *,
        user_command_repo: IUserCommandRepo,
        user_query_repo: IUserQueryRepo,
        password_hasher: IPasswordHasher,
    ) -> None:
        self.user_command_repo = user_command_repo
        self.user_query_repo = user_query_repo
        self.password_hasher = password_hasher
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        user_command_repo: IUserCommandRepo = Depends(Provide[Container.user_command_repo]),
        user_query_repo: IUserQueryRepo = Depends(Provide[Container.user_query_repo]),
        password_hasher: IPasswordHasher = Depends(Provide[Container.password_hasher]),
    ) -> Self:
        return cls(
            user_command_repo=user_command_repo,
            user_query_repo=user_query_repo,
            password_hasher=password_hasher,
        )

    @Logger.io
    async def register(self, *, name: str, email: str, password: str) -> UserEntity:
        with self.tracer.start_as_current_span('use_case.register_user'):
            try:
                UserEntity.validate_registration(name=name, email=email, password=password)
            except ValidationError:
                metrics.record_registration(result='validation_error')
                raise

            if await self.user_query_repo.exists_by_email(UserEntity.normalize_email(email)):
                metrics.record_registration(result='duplicate_user')
                raise DuplicateUserError()

            user_entity = UserEntity.register(
                name=name, email=email, password=password, password_hasher=self.password_hasher
            )
            created = await self.user_command_repo.create(user_entity)

            metrics.record_registration(result='success')
            Logger.base.info(f'👤 [REGISTER] Created user {created.id} <{created.email}>')
            return created
