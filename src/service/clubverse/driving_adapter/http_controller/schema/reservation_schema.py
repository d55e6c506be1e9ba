"""
Reservation API Schemas

Every field is optional at the schema level: missing required fields are
collected by the domain and reported together as MISSING_FIELDS.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator


class CreateReservationRequest(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    date: Optional[str] = None
    time: Optional[str] = None
    guests: Optional[int] = None
    club: Optional[str] = None
    special_requests: Optional[str] = Field(None, alias='specialRequests')
    club_location: Optional[str] = Field(None, alias='clubLocation')

    @field_validator('guests', mode='before')
    @classmethod
    def blank_guests_is_missing(cls, v: object) -> object:
        # HTML forms send an empty string for an untouched number input
        if isinstance(v, str) and not v.strip():
            return None
        return v

    class Config:
        populate_by_name = True
        json_schema_extra = {
            'example': {
                'name': 'Bob',
                'email': 'bob@example.com',
                'phone': '555-0100',
                'date': '2025-06-01',
                'time': '21:00',
                'guests': 4,
                'club': 'Neon',
                'specialRequests': 'Window table',
                'clubLocation': 'Downtown',
            }
        }


class CreateReservationResponse(BaseModel):
    message: str
    reservation_id: int
