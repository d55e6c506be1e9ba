"""
Session Token Service

Stateless HS256 JWTs. Nothing is stored server side: a token is valid while its
signature checks out against the process secret and `exp` is in the future.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Optional

import attrs
import jwt

from src.platform.exception.exceptions import ExpiredTokenError, InvalidTokenError
from src.service.clubverse.domain.entity.user_entity import UserEntity


@attrs.frozen
class TokenClaims:
    user_id: int
    email: str
    name: str
    issued_at: datetime
    expires_at: datetime


class JwtAuth:
    def __init__(self, *, secret: str, algorithm: str = 'HS256', expire_hours: int = 24) -> None:
        if not secret:
            raise ValueError('JWT signing secret is required')
        self._secret = secret
        self.algorithm = algorithm
        self.token_lifetime = timedelta(hours=expire_hours)

    def issue_token(self, user_entity: UserEntity, *, now: Optional[datetime] = None) -> str:
        if user_entity.id is None:
            raise ValueError('Cannot issue a token for an unsaved user')

        issued_at = now or datetime.now(timezone.utc)
        payload = {
            'sub': str(user_entity.id),
            'iat': issued_at,
            'exp': issued_at + self.token_lifetime,
            'user_id': user_entity.id,
            'email': user_entity.email,
            'name': user_entity.name,
        }
        return jwt.encode(payload, self._secret, algorithm=self.algorithm)

    def verify_token(self, token: str) -> TokenClaims:
        try:
            payload: dict[str, Any] = jwt.decode(
                token,
                self._secret,
                algorithms=[self.algorithm],
                options={'require': ['exp', 'iat', 'sub']},
            )
        except jwt.ExpiredSignatureError as e:
            raise ExpiredTokenError('Token has expired') from e
        except jwt.PyJWTError as e:
            raise InvalidTokenError(f'Invalid token: {e}') from e

        user_id = payload.get('user_id')
        email = payload.get('email')
        name = payload.get('name')
        if not isinstance(user_id, int) or not email or not name:
            raise InvalidTokenError('Invalid token: missing identity claims')

        return TokenClaims(
            user_id=user_id,
            email=email,
            name=name,
            issued_at=datetime.fromtimestamp(payload['iat'], tz=timezone.utc),
            expires_at=datetime.fromtimestamp(payload['exp'], tz=timezone.utc),
        )
