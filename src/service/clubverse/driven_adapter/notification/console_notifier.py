from datetime import datetime, timezone
from typing import Any, List

from src.platform.logging.loguru_io import Logger
from src.service.clubverse.app.interface.i_notifier import INotifier
from src.service.clubverse.domain.entity.reservation_entity import ReservationEntity
from src.service.clubverse.driven_adapter.notification.confirmation_email import (
    build_html_body,
    build_subject,
)


class ConsoleNotifier(INotifier):
    """Development backend: logs the email instead of sending it."""

    def __init__(self) -> None:
        self.sent_emails: List[dict[str, Any]] = []  # inspected by tests

    @Logger.io
    async def send_reservation_confirmation(self, *, reservation: ReservationEntity) -> None:
        email_data = {
            'to': reservation.email,
            'subject': build_subject(reservation),
            'body': build_html_body(reservation),
            'sent_at': datetime.now(timezone.utc),
        }
        self.sent_emails.append(email_data)

        Logger.base.info(
            f'📧 [CONSOLE-MAIL] To: {email_data["to"]} | Subject: {email_data["subject"]}'
        )
