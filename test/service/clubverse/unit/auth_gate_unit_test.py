from datetime import datetime, timedelta, timezone

import pytest

from src.platform.exception.exceptions import UnauthorizedError
from src.service.clubverse.domain.entity.user_entity import UserEntity
from src.service.clubverse.driving_adapter.http_controller.auth.auth_gate import AuthGate
from src.service.clubverse.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


@pytest.mark.unit
class TestExtractToken:
    def test_bearer_header_wins_over_cookie(self) -> None:
        token = AuthGate.extract_token(authorization='Bearer header-token', cookie_token='cookie')

        assert token == 'header-token'

    def test_falls_back_to_cookie(self) -> None:
        assert AuthGate.extract_token(authorization=None, cookie_token='cookie') == 'cookie'

    def test_non_bearer_header_is_ignored(self) -> None:
        token = AuthGate.extract_token(authorization='Basic abc', cookie_token='cookie')

        assert token == 'cookie'

    def test_bearer_without_token_yields_nothing(self) -> None:
        assert AuthGate.extract_token(authorization='Bearer', cookie_token='cookie') is None

    def test_nothing_presented(self) -> None:
        assert AuthGate.extract_token(authorization=None, cookie_token=None) is None


@pytest.mark.unit
class TestAuthenticate:
    @pytest.fixture
    def gate(self, jwt_auth: JwtAuth, user_repo) -> AuthGate:
        return AuthGate(jwt_auth=jwt_auth, user_query_repo=user_repo)

    async def test_valid_token_admits_user_without_hash(
        self, gate: AuthGate, jwt_auth: JwtAuth, alice: UserEntity
    ) -> None:
        user = await gate.authenticate(jwt_auth.issue_token(alice))

        assert user.id == alice.id
        assert user.email == 'a@x.io'
        assert user.hashed_password == ''

    async def test_missing_token_is_unauthorized(self, gate: AuthGate) -> None:
        with pytest.raises(UnauthorizedError) as exc_info:
            await gate.authenticate(None)

        assert exc_info.value.reason == 'unauthorized'
        assert exc_info.value.status_code == 401

    async def test_expired_token_is_token_error(
        self, gate: AuthGate, jwt_auth: JwtAuth, alice: UserEntity
    ) -> None:
        stale = jwt_auth.issue_token(
            alice, now=datetime.now(timezone.utc) - timedelta(hours=25)
        )

        with pytest.raises(UnauthorizedError) as exc_info:
            await gate.authenticate(stale)

        assert exc_info.value.reason == 'token_error'

    async def test_forged_token_is_token_error(self, gate: AuthGate, alice: UserEntity) -> None:
        forged = JwtAuth(secret='attacker-secret').issue_token(alice)

        with pytest.raises(UnauthorizedError) as exc_info:
            await gate.authenticate(forged)

        assert exc_info.value.reason == 'token_error'

    async def test_unknown_user_is_invalid_user(self, gate: AuthGate, jwt_auth: JwtAuth) -> None:
        ghost = UserEntity(id=999, email='ghost@x.io', name='Ghost')

        with pytest.raises(UnauthorizedError) as exc_info:
            await gate.authenticate(jwt_auth.issue_token(ghost))

        assert exc_info.value.reason == 'invalid_user'
