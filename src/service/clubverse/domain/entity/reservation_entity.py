from datetime import datetime
from typing import Any, Optional

import attrs

from src.platform.exception.exceptions import MissingFieldsError


REQUIRED_FIELDS = ('name', 'email', 'phone', 'date', 'time', 'guests', 'club')


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    # a guest count of 0 is as good as no guest count
    return isinstance(value, int) and not isinstance(value, bool) and value == 0


@attrs.define
class ReservationEntity:
    """
    A single table booking. Email is a free-text contact field, not a link to a user.

    No uniqueness or slot-conflict rule: two bookings for the same club,
    date and time are both accepted.
    """

    name: str
    email: str
    phone: str
    date: str
    time: str
    guests: int
    club: str
    special_requests: Optional[str] = None
    club_location: Optional[str] = None
    id: Optional[int] = None
    created_at: Optional[datetime] = None

    @staticmethod
    def find_missing_fields(fields: dict[str, Any]) -> list[str]:
        return [name for name in REQUIRED_FIELDS if _is_missing(fields.get(name))]

    @classmethod
    def create(
        cls,
        *,
        name: Optional[str],
        email: Optional[str],
        phone: Optional[str],
        date: Optional[str],
        time: Optional[str],
        guests: Optional[int],
        club: Optional[str],
        special_requests: Optional[str] = None,
        club_location: Optional[str] = None,
    ) -> 'ReservationEntity':
        missing = cls.find_missing_fields(
            {
                'name': name,
                'email': email,
                'phone': phone,
                'date': date,
                'time': time,
                'guests': guests,
                'club': club,
            }
        )
        if missing:
            raise MissingFieldsError(missing)

        return cls(
            name=str(name).strip(),
            email=str(email).strip(),
            phone=str(phone).strip(),
            date=str(date).strip(),
            time=str(time).strip(),
            guests=int(guests),  # type: ignore[arg-type]
            club=str(club).strip(),
            special_requests=special_requests or None,
            club_location=club_location or None,
        )
