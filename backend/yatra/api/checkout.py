from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import ValidationError
from sqlalchemy.orm import Session
import logging

from yatra.api.errors import http_error_for, validation_error_response
from yatra.auth import get_current_user
from yatra.database import get_db
from yatra.exceptions import BookingError
from yatra.models import User
from yatra.schemas import (
    BookingConfirmation, CheckoutDraftResponse, CheckoutPassengersUpdate,
    CheckoutPaymentRequest, CheckoutStart,
)
from yatra.services.checkout import CheckoutWizard
from yatra.services.payment import PaymentProvider, get_payment_provider

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=CheckoutDraftResponse)
async def start_checkout(
    request: CheckoutStart,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    try:
        return CheckoutWizard(db).start(current_user.id, request)
    except BookingError as e:
        raise http_error_for(e)
    except Exception:
        logger.exception("Error starting checkout")
        raise HTTPException(status_code=500, detail="Failed to start checkout")


@router.get("/{draft_id}", response_model=CheckoutDraftResponse)
async def get_checkout(
    draft_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    try:
        return CheckoutWizard(db).get(draft_id, current_user.id)
    except BookingError as e:
        raise http_error_for(e)
    except Exception:
        logger.exception(f"Error fetching checkout {draft_id}")
        raise HTTPException(status_code=500, detail="Failed to fetch checkout")


@router.put("/{draft_id}/passengers", response_model=CheckoutDraftResponse)
async def set_checkout_passengers(
    draft_id: str,
    body: CheckoutPassengersUpdate,
    request: Request,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    try:
        return CheckoutWizard(db).set_passengers(draft_id, current_user.id, body.passenger_details)
    except ValidationError as e:
        return validation_error_response(request.url.path, e.errors())
    except BookingError as e:
        raise http_error_for(e)
    except Exception:
        logger.exception(f"Error saving passengers for checkout {draft_id}")
        raise HTTPException(status_code=500, detail="Failed to save passenger details")


@router.post("/{draft_id}/payment", response_model=BookingConfirmation)
async def pay_checkout(
    draft_id: str,
    body: CheckoutPaymentRequest,
    current_user: User = Depends(get_current_user),
    provider: PaymentProvider = Depends(get_payment_provider),
    db: Session = Depends(get_db),
):
    try:
        return await CheckoutWizard(db).pay(draft_id, current_user.id, body.payment, provider)
    except BookingError as e:
        raise http_error_for(e)
    except Exception:
        logger.exception(f"Payment failed for checkout {draft_id}")
        raise HTTPException(status_code=500, detail="Failed to complete payment")
