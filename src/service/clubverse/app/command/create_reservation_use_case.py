from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.clubverse_metrics import metrics
from src.service.clubverse.app.interface.i_reservation_command_repo import (
    IReservationCommandRepo,
)
from src.service.clubverse.domain.entity.reservation_entity import ReservationEntity
from src.service.clubverse.driven_adapter.notification.notification_dispatcher import (
    NotificationDispatcher,
)


class CreateReservationUseCase:
    """
    Reservation intake: validate -> persist -> best-effort notify

    Flow:
    1. Reject with MissingFieldsError before any side effect
    2. Persist the reservation once
    3. Hand it to the dispatcher (fire-and-forget) and return

    The booking result does not depend on the mail relay: a failed
    confirmation is logged by the dispatcher, never rolled into this result.
    """

    def __init__(
        self,
        *,
        reservation_command_repo: IReservationCommandRepo,
        notification_dispatcher: NotificationDispatcher,
    ) -> None:
        self.reservation_command_repo = reservation_command_repo
        self.notification_dispatcher = notification_dispatcher
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        reservation_command_repo: IReservationCommandRepo = Depends(
            Provide[Container.reservation_command_repo]
        ),
        notification_dispatcher: NotificationDispatcher = Depends(
            Provide[Container.notification_dispatcher]
        ),
    ) -> Self:
        return cls(
            reservation_command_repo=reservation_command_repo,
            notification_dispatcher=notification_dispatcher,
        )

    @Logger.io
    async def create_reservation(
        self,
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
    ) -> ReservationEntity:
        with self.tracer.start_as_current_span('use_case.create_reservation'):
            reservation = ReservationEntity.create(
                name=name,
                email=email,
                phone=phone,
                date=date,
                time=time,
                guests=guests,
                club=club,
                special_requests=special_requests,
                club_location=club_location,
            )

            stored = await self.reservation_command_repo.create(reservation)
            metrics.record_reservation()
            Logger.base.info(
                f'📝 [RESERVATION] Stored reservation {stored.id} at {stored.club} '
                f'on {stored.date} {stored.time} for {stored.guests} guest(s)'
            )

            self.notification_dispatcher.dispatch(stored)
            return stored
