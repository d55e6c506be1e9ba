"""
Unit tests for CreateReservationUseCase

Test Focus:
1. Missing required fields: nothing persisted, nothing sent
2. Success: persisted exactly once, confirmation dispatched
3. Mail relay failure never changes the booking outcome
"""

import pytest

from src.platform.exception.exceptions import MissingFieldsError, PersistenceError
from src.service.clubverse.app.command.create_reservation_use_case import (
    CreateReservationUseCase,
)


VALID_FIELDS = {
    'name': 'Bob',
    'email': 'bob@example.com',
    'phone': '555-0100',
    'date': '2025-06-01',
    'time': '21:00',
    'guests': 4,
    'club': 'Neon',
    'special_requests': None,
    'club_location': 'Downtown',
}


@pytest.mark.unit
class TestCreateReservation:
    async def test_success_persists_once_and_sends_confirmation(
        self, reservation_repo, notifier, dispatcher_factory
    ) -> None:
        dispatcher = dispatcher_factory(notifier)
        use_case = CreateReservationUseCase(
            reservation_command_repo=reservation_repo, notification_dispatcher=dispatcher
        )

        reservation = await use_case.create_reservation(**VALID_FIELDS)
        await dispatcher.drain()

        assert reservation.id == 1
        assert len(reservation_repo.reservations) == 1
        assert [r.id for r in notifier.sent] == [1]
        assert notifier.sent[0].email == 'bob@example.com'

    async def test_missing_guests_is_rejected_before_side_effects(
        self, reservation_repo, notifier, dispatcher_factory
    ) -> None:
        dispatcher = dispatcher_factory(notifier)
        use_case = CreateReservationUseCase(
            reservation_command_repo=reservation_repo, notification_dispatcher=dispatcher
        )

        with pytest.raises(MissingFieldsError) as exc_info:
            await use_case.create_reservation(**{**VALID_FIELDS, 'guests': None})
        await dispatcher.drain()

        assert exc_info.value.fields == ['guests']
        assert exc_info.value.message == 'Missing required fields'
        assert reservation_repo.reservations == []
        assert notifier.sent == []

    async def test_all_missing_fields_are_reported(
        self, reservation_repo, notifier, dispatcher_factory
    ) -> None:
        use_case = CreateReservationUseCase(
            reservation_command_repo=reservation_repo,
            notification_dispatcher=dispatcher_factory(notifier),
        )

        with pytest.raises(MissingFieldsError) as exc_info:
            await use_case.create_reservation(
                **{**VALID_FIELDS, 'name': '  ', 'phone': None, 'club': ''}
            )

        assert exc_info.value.fields == ['name', 'phone', 'club']

    async def test_relay_failure_does_not_fail_the_booking(
        self, reservation_repo, failing_notifier, dispatcher_factory
    ) -> None:
        dispatcher = dispatcher_factory(failing_notifier)
        use_case = CreateReservationUseCase(
            reservation_command_repo=reservation_repo, notification_dispatcher=dispatcher
        )

        reservation = await use_case.create_reservation(**VALID_FIELDS)
        await dispatcher.drain()

        assert reservation.id == 1
        assert len(reservation_repo.reservations) == 1
        assert failing_notifier.sent == []

    async def test_double_booking_is_accepted(
        self, reservation_repo, notifier, dispatcher_factory
    ) -> None:
        use_case = CreateReservationUseCase(
            reservation_command_repo=reservation_repo,
            notification_dispatcher=dispatcher_factory(notifier),
        )

        first = await use_case.create_reservation(**VALID_FIELDS)
        second = await use_case.create_reservation(**VALID_FIELDS)

        assert first.id != second.id
        assert len(reservation_repo.reservations) == 2

    async def test_store_failure_sends_nothing(
        self, failing_reservation_repo, notifier, dispatcher_factory
    ) -> None:
        dispatcher = dispatcher_factory(notifier)
        use_case = CreateReservationUseCase(
            reservation_command_repo=failing_reservation_repo, notification_dispatcher=dispatcher
        )

        with pytest.raises(PersistenceError):
            await use_case.create_reservation(**VALID_FIELDS)
        await dispatcher.drain()

        assert notifier.sent == []
