"""
Auth Gate

Admits or rejects requests to protected endpoints. Three rejection causes,
one status: every rejection is a 401 redirect to the entry page and only the
`error` indicator tells them apart (unauthorized / token_error / invalid_user).
Clients depend on this shape, keep it.
"""

from typing import Optional

from src.platform.exception.exceptions import TokenError, UnauthorizedError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.clubverse_metrics import metrics
from src.service.clubverse.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.clubverse.domain.entity.user_entity import UserEntity
from src.service.clubverse.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


class AuthGate:
    def __init__(self, *, jwt_auth: JwtAuth, user_query_repo: IUserQueryRepo) -> None:
        self.jwt_auth = jwt_auth
        self.user_query_repo = user_query_repo

    @staticmethod
    def extract_token(
        *, authorization: Optional[str], cookie_token: Optional[str]
    ) -> Optional[str]:
        """Bearer header first, then the session cookie."""
        if authorization and authorization.startswith('Bearer'):
            parts = authorization.split(' ')
            return parts[1] if len(parts) > 1 and parts[1] else None
        return cookie_token or None

    def _reject(self, reason: str, detail: str) -> UnauthorizedError:
        metrics.record_auth_rejection(reason=reason)
        Logger.base.warning(f'🚫 [AUTH-GATE] {reason}: {detail}')
        return UnauthorizedError(reason)  # type: ignore[arg-type]

    async def authenticate(self, token: Optional[str]) -> UserEntity:
        if not token:
            raise self._reject('unauthorized', 'no token presented')

        try:
            claims = self.jwt_auth.verify_token(token)
        except TokenError as e:
            raise self._reject('token_error', e.message) from e

        user = await self.user_query_repo.get_by_id(claims.user_id)
        if user is None:
            raise self._reject('invalid_user', f'user {claims.user_id} no longer exists')

        return user.without_password()
