"""
In-memory fakes of the clubverse ports, shared by unit tests.
"""

from datetime import datetime, timezone
from typing import Optional

import attrs
import pytest

from src.platform.exception.exceptions import NotificationError, PersistenceError
from src.service.clubverse.app.interface.i_notifier import INotifier
from src.service.clubverse.app.interface.i_reservation_command_repo import (
    IReservationCommandRepo,
)
from src.service.clubverse.app.interface.i_user_command_repo import IUserCommandRepo
from src.service.clubverse.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.clubverse.domain.entity.reservation_entity import ReservationEntity
from src.service.clubverse.domain.entity.user_entity import UserEntity
from src.service.clubverse.driven_adapter.notification.notification_dispatcher import (
    NotificationDispatcher,
)
from src.service.clubverse.driven_adapter.security.bcrypt_password_hasher import (
    BcryptPasswordHasher,
)
from src.service.clubverse.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


TEST_SECRET = 'unit-test-secret'


class InMemoryUserRepo(IUserCommandRepo, IUserQueryRepo):
    def __init__(self) -> None:
        self.users: dict[int, UserEntity] = {}
        self.create_calls = 0

    async def create(self, user_entity: UserEntity) -> UserEntity:
        self.create_calls += 1
        stored = attrs.evolve(
            user_entity, id=len(self.users) + 1, created_at=datetime.now(timezone.utc)
        )
        self.users[stored.id] = stored  # type: ignore[index]
        return stored

    async def get_by_email(self, email: str) -> Optional[UserEntity]:
        return next((u for u in self.users.values() if u.email == email), None)

    async def get_by_id(self, user_id: int) -> Optional[UserEntity]:
        return self.users.get(user_id)

    async def exists_by_email(self, email: str) -> bool:
        return await self.get_by_email(email) is not None


class InMemoryReservationRepo(IReservationCommandRepo):
    def __init__(self, *, fail_with: Optional[Exception] = None) -> None:
        self.reservations: list[ReservationEntity] = []
        self.fail_with = fail_with

    async def create(self, reservation: ReservationEntity) -> ReservationEntity:
        if self.fail_with is not None:
            raise self.fail_with
        stored = attrs.evolve(
            reservation,
            id=len(self.reservations) + 1,
            created_at=datetime.now(timezone.utc),
        )
        self.reservations.append(stored)
        return stored


class RecordingNotifier(INotifier):
    def __init__(self, *, fail_with: Optional[Exception] = None) -> None:
        self.sent: list[ReservationEntity] = []
        self.fail_with = fail_with

    async def send_reservation_confirmation(self, *, reservation: ReservationEntity) -> None:
        if self.fail_with is not None:
            raise self.fail_with
        self.sent.append(reservation)


@pytest.fixture
def user_repo() -> InMemoryUserRepo:
    return InMemoryUserRepo()


@pytest.fixture
def reservation_repo() -> InMemoryReservationRepo:
    return InMemoryReservationRepo()


@pytest.fixture
def failing_reservation_repo() -> InMemoryReservationRepo:
    return InMemoryReservationRepo(fail_with=PersistenceError(detail='connection refused'))


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def failing_notifier() -> RecordingNotifier:
    return RecordingNotifier(fail_with=NotificationError('relay unreachable'))


@pytest.fixture
def password_hasher() -> BcryptPasswordHasher:
    return BcryptPasswordHasher(rounds=4)


@pytest.fixture
def jwt_auth() -> JwtAuth:
    return JwtAuth(secret=TEST_SECRET)


@pytest.fixture
def dispatcher_factory():
    def _make(notifier: INotifier) -> NotificationDispatcher:
        return NotificationDispatcher(notifier=notifier)

    return _make


@pytest.fixture
async def alice(user_repo: InMemoryUserRepo, password_hasher: BcryptPasswordHasher) -> UserEntity:
    """A stored user registered with password 'secret123'."""
    user_entity = UserEntity.register(
        name='Alice', email='a@x.io', password='secret123', password_hasher=password_hasher
    )
    return await user_repo.create(user_entity)
