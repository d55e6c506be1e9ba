from datetime import datetime
from typing import TYPE_CHECKING, Optional

import attrs
from pydantic import SecretStr

from src.platform.exception.exceptions import ValidationError


if TYPE_CHECKING:
    from src.service.clubverse.app.interface.i_password_hasher import IPasswordHasher


PASSWORD_MIN_LENGTH = 6
PASSWORD_MAX_BYTES = 72  # bcrypt ignores/rejects anything longer


@attrs.define
class UserEntity:
    email: str = ''
    name: str = ''
    hashed_password: str = attrs.field(default='', repr=False)  # Hide from repr for security
    id: Optional[int] = None
    created_at: Optional[datetime] = None

    @staticmethod
    def normalize_email(email: str) -> str:
        # Registration and login must agree on the stored form
        return (email or '').strip().lower()

    @staticmethod
    def validate_registration(*, name: str, email: str, password: str) -> None:
        if not (name or '').strip() or not (email or '').strip() or not password:
            raise ValidationError('All fields are required')

        if len(password) < PASSWORD_MIN_LENGTH:
            raise ValidationError(
                f'Password must be at least {PASSWORD_MIN_LENGTH} characters long'
            )

        if len(password.encode('utf-8')) > PASSWORD_MAX_BYTES:
            raise ValidationError(f'Password must be at most {PASSWORD_MAX_BYTES} bytes long')

    @classmethod
    def register(
        cls, *, name: str, email: str, password: str, password_hasher: 'IPasswordHasher'
    ) -> 'UserEntity':
        cls.validate_registration(name=name, email=email, password=password)
        user_entity = cls(email=cls.normalize_email(email), name=name.strip())
        user_entity.set_password(password, password_hasher)
        return user_entity

    def set_password(self, plain_password: str, password_hasher: 'IPasswordHasher') -> None:
        self.hashed_password = password_hasher.hash_password(
            plain_password=SecretStr(plain_password)
        )

    def check_password(self, plain_password: str, password_hasher: 'IPasswordHasher') -> bool:
        if not self.hashed_password:
            return False
        return password_hasher.verify_password(
            plain_password=SecretStr(plain_password), hashed_password=self.hashed_password
        )

    def without_password(self) -> 'UserEntity':
        return attrs.evolve(self, hashed_password='')
