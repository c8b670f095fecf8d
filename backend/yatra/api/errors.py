from fastapi import HTTPException, status
from fastapi.responses import JSONResponse

from yatra.exceptions import (
    AccessDeniedError,
    BookingError,
    CheckoutStateError,
    InvalidStatusTransitionError,
    InventoryUnavailableError,
    NotFoundError,
    PaymentDeclinedError,
)

BOOKING_ERROR_STATUS = [
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (AccessDeniedError, status.HTTP_403_FORBIDDEN),
    (InventoryUnavailableError, status.HTTP_409_CONFLICT),
    (CheckoutStateError, status.HTTP_409_CONFLICT),
    (InvalidStatusTransitionError, status.HTTP_409_CONFLICT),
    (PaymentDeclinedError, status.HTTP_402_PAYMENT_REQUIRED),
]


def format_validation_errors(errors) -> list[dict]:
    return [
        {
            "loc": [str(part) for part in error.get("loc", ())],
            "msg": error.get("msg", ""),
            "type": error.get("type", ""),
        }
        for error in errors
    ]


def validation_message(path: str) -> str:
    if path.endswith("/search"):
        return "Invalid search parameters"
    if path.startswith("/api/bookings") or path.startswith("/api/checkout"):
        return "Invalid booking data"
    return "Invalid request"


def validation_error_response(path: str, errors) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": validation_message(path), "errors": format_validation_errors(errors)},
    )


def http_error_for(error: BookingError) -> HTTPException:
    for error_type, status_code in BOOKING_ERROR_STATUS:
        if isinstance(error, error_type):
            return HTTPException(status_code=status_code, detail=str(error))
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))
