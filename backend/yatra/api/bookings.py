from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from typing import List
import logging

from yatra.api.errors import http_error_for
from yatra.auth import get_current_user
from yatra.database import get_db
from yatra.exceptions import BookingError
from yatra.models import User
from yatra.schemas import BookingConfirmation, BookingCreate, BookingResponse, CheckoutRequest
from yatra.services.bookings import BookingService
from yatra.services.payment import PaymentProvider, get_payment_provider

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/create", response_model=BookingConfirmation)
async def checkout_booking(
    request: CheckoutRequest,
    current_user: User = Depends(get_current_user),
    provider: PaymentProvider = Depends(get_payment_provider),
    db: Session = Depends(get_db),
):
    """Price, pay for and confirm a booking in a single call."""
    try:
        return await BookingService(db).checkout(current_user.id, request, provider)
    except BookingError as e:
        raise http_error_for(e)
    except Exception:
        logger.exception("Booking creation error")
        raise HTTPException(status_code=500, detail="Failed to create booking")


@router.post("", response_model=BookingResponse)
async def create_booking(
    booking: BookingCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    try:
        return BookingService(db).create_booking(current_user.id, booking)
    except BookingError as e:
        raise http_error_for(e)
    except Exception:
        logger.exception("Error creating booking")
        raise HTTPException(status_code=500, detail="Failed to create booking")


@router.get("", response_model=List[BookingResponse])
async def list_bookings(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    try:
        return BookingService(db).get_user_bookings(current_user.id)
    except Exception:
        logger.exception("Error fetching user bookings")
        raise HTTPException(status_code=500, detail="Failed to fetch bookings")


@router.get("/{booking_id}", response_model=BookingResponse)
async def get_booking(
    booking_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    try:
        return BookingService(db).get_booking_for_user(booking_id, current_user.id)
    except BookingError as e:
        raise http_error_for(e)
    except Exception:
        logger.exception(f"Error fetching booking {booking_id}")
        raise HTTPException(status_code=500, detail="Failed to fetch booking")
