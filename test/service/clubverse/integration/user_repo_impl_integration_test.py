import pytest

from src.platform.exception.exceptions import DuplicateUserError
from src.service.clubverse.domain.entity.user_entity import UserEntity
from src.service.clubverse.driven_adapter.repo.user_command_repo_impl import UserCommandRepoImpl
from src.service.clubverse.driven_adapter.repo.user_query_repo_impl import UserQueryRepoImpl


def _user(email: str = 'alice@example.com') -> UserEntity:
    return UserEntity(email=email, name='Alice', hashed_password='$2b$04$notarealhashbutstored')


@pytest.mark.integration
class TestUserRepoImpl:
    async def test_create_assigns_id_and_timestamp(
        self, user_command_repo: UserCommandRepoImpl
    ) -> None:
        created = await user_command_repo.create(_user())

        assert created.id is not None
        assert created.created_at is not None
        assert created.hashed_password == '$2b$04$notarealhashbutstored'

    async def test_lookup_by_email_and_id(
        self, user_command_repo: UserCommandRepoImpl, user_query_repo: UserQueryRepoImpl
    ) -> None:
        created = await user_command_repo.create(_user())

        by_email = await user_query_repo.get_by_email('alice@example.com')
        by_id = await user_query_repo.get_by_id(created.id)  # type: ignore[arg-type]

        assert by_email is not None and by_email.id == created.id
        assert by_id is not None and by_id.email == 'alice@example.com'
        assert await user_query_repo.exists_by_email('alice@example.com')
        assert not await user_query_repo.exists_by_email('bob@example.com')
        assert await user_query_repo.get_by_id(9999) is None

    async def test_unique_email_is_enforced_by_the_store(
        self, user_command_repo: UserCommandRepoImpl
    ) -> None:
        await user_command_repo.create(_user())

        with pytest.raises(DuplicateUserError):
            await user_command_repo.create(_user())
