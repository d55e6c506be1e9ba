from src.service.clubverse.domain.entity.reservation_entity import ReservationEntity
from src.service.clubverse.driven_adapter.model.reservation_model import ReservationModel


def model_to_entity(reservation_model: ReservationModel) -> ReservationEntity:
    return ReservationEntity(
        id=reservation_model.id,
        name=reservation_model.name,
        email=reservation_model.email,
        phone=reservation_model.phone,
        date=reservation_model.date,
        time=reservation_model.time,
        guests=reservation_model.guests,
        special_requests=reservation_model.special_requests,
        club=reservation_model.club,
        club_location=reservation_model.club_location,
        created_at=reservation_model.created_at,
    )
