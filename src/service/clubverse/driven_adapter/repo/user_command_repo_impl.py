from typing import AsyncContextManager, Callable

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import DuplicateUserError
from src.platform.logging.loguru_io import Logger
from src.service.clubverse.app.interface.i_user_command_repo import IUserCommandRepo
from src.service.clubverse.domain.entity.user_entity import UserEntity
from src.service.clubverse.driven_adapter.model.user_model import UserModel


class UserCommandRepoImpl(IUserCommandRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory

    @Logger.io
    async def create(self, user_entity: UserEntity) -> UserEntity:
        async with self.session_factory() as session:
            user_model = UserModel(
                email=user_entity.email,
                hashed_password=user_entity.hashed_password,
                name=user_entity.name,
            )

            session.add(user_model)
            try:
                await session.commit()
            except IntegrityError as e:
                # Two registrations raced past the exists_by_email check
                raise DuplicateUserError() from e
            await session.refresh(user_model)

            return self._model_to_entity(user_model)

    def _model_to_entity(self, user_model: UserModel) -> UserEntity:
        return UserEntity(
            id=user_model.id,
            email=user_model.email,
            name=user_model.name,
            hashed_password=user_model.hashed_password,
            created_at=user_model.created_at,
        )
