from abc import ABC, abstractmethod

from src.service.clubverse.domain.entity.reservation_entity import ReservationEntity


class INotifier(ABC):
    """Outbound mail relay port"""

    @abstractmethod
    async def send_reservation_confirmation(self, *, reservation: ReservationEntity) -> None:
        """
        Send the booking confirmation to reservation.email

        Raises:
            NotificationError: the relay refused or could not be reached
        """
        pass
