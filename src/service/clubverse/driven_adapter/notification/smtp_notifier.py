"""
SMTP mail relay adapter

smtplib is blocking, so the whole connect/STARTTLS/login/send exchange runs in a
worker thread and the event loop keeps serving requests.
"""

from email.message import EmailMessage
import smtplib

import anyio

from src.platform.exception.exceptions import NotificationError
from src.platform.logging.loguru_io import Logger
from src.service.clubverse.app.interface.i_notifier import INotifier
from src.service.clubverse.domain.entity.reservation_entity import ReservationEntity
from src.service.clubverse.driven_adapter.notification.confirmation_email import (
    build_html_body,
    build_subject,
)


class SmtpNotifier(INotifier):
    def __init__(
        self,
        *,
        host: str,
        port: int,
        username: str,
        password: str,
        timeout: float = 10.0,
    ) -> None:
        self.host = host
        self.port = port
        self.username = username
        self._password = password
        self.timeout = timeout

    def build_message(self, reservation: ReservationEntity) -> EmailMessage:
        message = EmailMessage()
        message['From'] = self.username
        message['To'] = reservation.email
        message['Subject'] = build_subject(reservation)
        message.set_content('Your reservation is confirmed. View this email in HTML.')
        message.add_alternative(build_html_body(reservation), subtype='html')
        return message

    def _send_blocking(self, message: EmailMessage) -> None:
        with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as server:
            server.starttls()
            server.login(self.username, self._password)
            server.send_message(message)

    @Logger.io
    async def send_reservation_confirmation(self, *, reservation: ReservationEntity) -> None:
        if not self.username or not self._password:
            raise NotificationError('Email credentials not configured (EMAIL_USER / EMAIL_PASSWORD)')

        message = self.build_message(reservation)
        try:
            await anyio.to_thread.run_sync(self._send_blocking, message)
        except (smtplib.SMTPException, OSError) as e:
            raise NotificationError(f'SMTP error sending to {reservation.email}: {e}') from e

        Logger.base.info(
            f'📧 [SMTP] Confirmation sent to {reservation.email} for reservation {reservation.id}'
        )
