from abc import ABC, abstractmethod

from src.service.clubverse.domain.entity.reservation_entity import ReservationEntity


class IReservationCommandRepo(ABC):
    """Reservation Command Repository Abstract Interface - Handles write operations"""

    @abstractmethod
    async def create(self, reservation: ReservationEntity) -> ReservationEntity:
        """Persist a new reservation exactly once and return it with its id"""
        pass
