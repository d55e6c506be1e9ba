from typing import AsyncContextManager, Callable, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.clubverse.app.interface.i_reservation_query_repo import IReservationQueryRepo
from src.service.clubverse.domain.entity.reservation_entity import ReservationEntity
from src.service.clubverse.driven_adapter.model.reservation_model import ReservationModel
from src.service.clubverse.driven_adapter.repo.reservation_mapper import model_to_entity


class ReservationQueryRepoImpl(IReservationQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def get_by_id(self, reservation_id: int) -> Optional[ReservationEntity]:
        async with self.session_factory() as session:
            reservation_model = await session.get(ReservationModel, reservation_id)
            return model_to_entity(reservation_model) if reservation_model else None

    @Logger.io
    async def count(self) -> int:
        async with self.session_factory() as session:
            result = await session.execute(select(func.count()).select_from(ReservationModel))
            return result.scalar_one()
