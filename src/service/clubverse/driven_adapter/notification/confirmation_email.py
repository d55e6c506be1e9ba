from html import escape

from src.service.clubverse.domain.entity.reservation_entity import ReservationEntity


def build_subject(reservation: ReservationEntity) -> str:
    return f'Your Table Reservation at {reservation.club}'


def build_html_body(reservation: ReservationEntity) -> str:
    location = escape(reservation.club_location or '')
    special_requests = escape(reservation.special_requests or 'None')
    return (
        '<h2>Thank you for booking with Club-Verse!</h2>'
        f'<p>Hi {escape(reservation.name)},</p>'
        f'<p>Your reservation at <b>{escape(reservation.club)}</b> is confirmed for '
        f'<b>{escape(reservation.date)}</b> at <b>{escape(reservation.time)}</b> '
        f'for <b>{reservation.guests}</b> guest(s).</p>'
        f'<p>Location: {location}</p>'
        f'<p>Special Requests: {special_requests}</p>'
        '<p>We look forward to hosting you!</p>'
        '<br><small>This is an automated email. Please do not reply.</small>'
    )
