from fastapi import APIRouter, Depends, Request, status

from src.platform.constant.route_constant import RESERVATION_CREATE
from src.platform.logging.loguru_io import Logger
from src.platform.security.rate_limiter import api_rate_limit
from src.service.clubverse.app.command.create_reservation_use_case import (
    CreateReservationUseCase,
)
from src.service.clubverse.driving_adapter.http_controller.schema.reservation_schema import (
    CreateReservationRequest,
    CreateReservationResponse,
)


router = APIRouter()


@router.post(
    RESERVATION_CREATE,
    response_model=CreateReservationResponse,
    status_code=status.HTTP_201_CREATED,
)
@api_rate_limit
@Logger.io
async def create_reservation(
    request: Request,
    payload: CreateReservationRequest,
    use_case: CreateReservationUseCase = Depends(CreateReservationUseCase.depends),
) -> CreateReservationResponse:
    reservation = await use_case.create_reservation(
        name=payload.name,
        email=payload.email,
        phone=payload.phone,
        date=payload.date,
        time=payload.time,
        guests=payload.guests,
        club=payload.club,
        special_requests=payload.special_requests,
        club_location=payload.club_location,
    )
    return CreateReservationResponse(
        message='Reservation successful! Confirmation email sent.',
        reservation_id=reservation.id or 0,
    )
