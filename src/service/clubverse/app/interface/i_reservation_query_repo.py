from abc import ABC, abstractmethod
from typing import Optional

from src.service.clubverse.domain.entity.reservation_entity import ReservationEntity


class IReservationQueryRepo(ABC):
    """Reservation Query Repository Abstract Interface - Handles read operations"""

    @abstractmethod
    async def get_by_id(self, reservation_id: int) -> Optional[ReservationEntity]:
        pass

    @abstractmethod
    async def count(self) -> int:
        pass
