import pytest

from src.platform.exception.exceptions import InvalidCredentialsError
from src.service.clubverse.app.command.login_use_case import LoginUseCase
from src.service.clubverse.domain.entity.user_entity import UserEntity
from src.service.clubverse.driven_adapter.security.bcrypt_password_hasher import (
    BcryptPasswordHasher,
)
from src.service.clubverse.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


@pytest.mark.unit
class TestLogin:
    @pytest.fixture
    def use_case(
        self, user_repo, password_hasher: BcryptPasswordHasher, jwt_auth: JwtAuth
    ) -> LoginUseCase:
        return LoginUseCase(
            user_query_repo=user_repo, password_hasher=password_hasher, jwt_auth=jwt_auth
        )

    async def test_login_returns_user_and_verifiable_token(
        self, use_case: LoginUseCase, jwt_auth: JwtAuth, alice: UserEntity
    ) -> None:
        user, token = await use_case.login(email='a@x.io', password='secret123')

        assert user.id == alice.id
        assert user.hashed_password == ''
        assert jwt_auth.verify_token(token).user_id == alice.id

    async def test_wrong_password_and_unknown_email_are_indistinguishable(
        self, use_case: LoginUseCase, alice: UserEntity
    ) -> None:
        with pytest.raises(InvalidCredentialsError) as wrong_password:
            await use_case.login(email='a@x.io', password='wrong-pass')
        with pytest.raises(InvalidCredentialsError) as unknown_email:
            await use_case.login(email='nobody@x.io', password='secret123')

        assert wrong_password.value.message == unknown_email.value.message
        assert wrong_password.value.message == 'Invalid email or password'
        assert wrong_password.value.status_code == unknown_email.value.status_code == 401

    async def test_email_lookup_ignores_case_and_surrounding_spaces(
        self, use_case: LoginUseCase, alice: UserEntity
    ) -> None:
        user, _ = await use_case.login(email='  A@X.IO ', password='secret123')

        assert user.id == alice.id
