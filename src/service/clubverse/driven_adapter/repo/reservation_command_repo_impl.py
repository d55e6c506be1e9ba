from typing import AsyncContextManager, Callable

from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.clubverse.app.interface.i_reservation_command_repo import (
    IReservationCommandRepo,
)
from src.service.clubverse.domain.entity.reservation_entity import ReservationEntity
from src.service.clubverse.driven_adapter.model.reservation_model import ReservationModel
from src.service.clubverse.driven_adapter.repo.reservation_mapper import model_to_entity


class ReservationCommandRepoImpl(IReservationCommandRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory

    @Logger.io
    async def create(self, reservation: ReservationEntity) -> ReservationEntity:
        async with self.session_factory() as session:
            reservation_model = ReservationModel(
                name=reservation.name,
                email=reservation.email,
                phone=reservation.phone,
                date=reservation.date,
                time=reservation.time,
                guests=reservation.guests,
                special_requests=reservation.special_requests,
                club=reservation.club,
                club_location=reservation.club_location,
            )

            session.add(reservation_model)
            await session.commit()
            await session.refresh(reservation_model)

            return model_to_entity(reservation_model)
