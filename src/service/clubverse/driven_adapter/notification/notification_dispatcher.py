"""
Fire-and-forget delivery of booking confirmations

The reservation response never waits on the mail relay: dispatch() schedules
the send on the running event loop and returns at once. A failed send is logged
and counted, never raised, and never touches the stored reservation.
"""

import asyncio

from src.platform.exception.exceptions import NotificationError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.clubverse_metrics import metrics
from src.service.clubverse.app.interface.i_notifier import INotifier
from src.service.clubverse.domain.entity.reservation_entity import ReservationEntity


class NotificationDispatcher:
    def __init__(self, *, notifier: INotifier) -> None:
        self.notifier = notifier
        # Strong references so pending tasks are not garbage collected mid-flight
        self._pending: set[asyncio.Task[bool]] = set()

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    def dispatch(self, reservation: ReservationEntity) -> asyncio.Task[bool]:
        task = asyncio.create_task(
            self._send(reservation), name=f'reservation-confirmation-{reservation.id}'
        )
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def _send(self, reservation: ReservationEntity) -> bool:
        try:
            await self.notifier.send_reservation_confirmation(reservation=reservation)
        except NotificationError as e:
            metrics.record_notification(result='failed')
            Logger.base.error(
                f'📭 [NOTIFY] Confirmation for reservation {reservation.id} failed: {e.message}'
            )
            return False
        except Exception as e:
            metrics.record_notification(result='failed')
            Logger.base.exception(
                f'📭 [NOTIFY] Unexpected error sending confirmation for reservation '
                f'{reservation.id}: {type(e).__name__}: {e}'
            )
            return False

        metrics.record_notification(result='sent')
        return True

    async def drain(self) -> None:
        """Wait for every in-flight send (shutdown and tests)."""
        if self._pending:
            await asyncio.gather(*self._pending, return_exceptions=True)
