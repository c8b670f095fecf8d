"""
Checkout wizard backed by CheckoutDraft rows.

    open ──> passengers ──> payment ──> confirmed

Each call loads the draft, checks it belongs to the caller and has not
expired, checks the step, then advances it. Passenger details may be
resubmitted from the payment step (the "back" button); nothing else may
skip or repeat a step.
"""

import logging
from datetime import datetime, timedelta

from sqlalchemy import update
from sqlalchemy.orm import Session

from yatra.config import get_settings
from yatra.exceptions import CheckoutStateError, InvalidBookingError, InventoryUnavailableError, NotFoundError
from yatra.models import CheckoutDraft, CheckoutStep, TravelType
from yatra.schemas.booking import CheckoutRequest, CheckoutStart, parse_passenger_details
from yatra.services import inventory
from yatra.services.bookings import BookingService, default_travel_date
from yatra.services.payment import PaymentProvider
from yatra.services.pricing import Quote

logger = logging.getLogger(__name__)


class CheckoutWizard:

    def __init__(self, db: Session):
        self.db = db
        self.settings = get_settings()

    def start(self, user_id: str, request: CheckoutStart) -> CheckoutDraft:
        bookings = BookingService(self.db)
        item, quote = bookings.quote(
            request.travel_type, request.item_id, request.quantity,
            request.check_in_date, request.check_out_date,
        )
        if inventory.available_units(item) < request.quantity:
            raise InventoryUnavailableError(request.travel_type.value, request.item_id, request.quantity)

        now = datetime.utcnow()
        draft = CheckoutDraft(
            user_id=user_id,
            travel_type=request.travel_type,
            item_id=request.item_id,
            quantity=request.quantity,
            travel_date=request.travel_date or default_travel_date(item, request.travel_type, request.check_in_date),
            check_in_date=request.check_in_date,
            check_out_date=request.check_out_date,
            step=CheckoutStep.PASSENGERS,
            base_amount=quote.base_amount,
            tax_amount=quote.tax_amount,
            total_amount=quote.total_amount,
            expires_at=now + timedelta(minutes=self.settings.checkout_draft_ttl_minutes),
        )
        self.db.add(draft)
        self.db.commit()
        self.db.refresh(draft)

        logger.info(f"Checkout draft {draft.id} opened by {user_id} for {request.travel_type.value} {request.item_id}")
        return draft

    def get(self, draft_id: str, user_id: str) -> CheckoutDraft:
        draft = self.db.query(CheckoutDraft).filter(CheckoutDraft.id == draft_id).first()
        # Someone else's draft looks exactly like a missing one
        if not draft or draft.user_id != user_id:
            raise NotFoundError("Checkout not found")
        if draft.step != CheckoutStep.CONFIRMED and draft.is_expired():
            raise NotFoundError("Checkout expired")
        return draft

    def set_passengers(self, draft_id: str, user_id: str, raw_details: dict) -> CheckoutDraft:
        draft = self.get(draft_id, user_id)
        if draft.step not in (CheckoutStep.PASSENGERS, CheckoutStep.PAYMENT):
            raise CheckoutStateError(f"Checkout is at step {draft.step.value}")

        details = parse_passenger_details(draft.travel_type, raw_details)
        if details.quantity != draft.quantity:
            noun = "rooms" if draft.travel_type == TravelType.HOTEL else "passengers"
            raise InvalidBookingError(f"Expected {draft.quantity} {noun}, got {details.quantity}")

        draft.passenger_details = details.model_dump(mode="json", by_alias=True)
        draft.step = CheckoutStep.PAYMENT
        self.db.commit()
        self.db.refresh(draft)
        return draft

    def _move_step(self, draft_id: str, current: CheckoutStep, new: CheckoutStep) -> bool:
        result = self.db.execute(
            update(CheckoutDraft)
            .where(CheckoutDraft.id == draft_id, CheckoutDraft.step == current)
            .values(step=new)
            .execution_options(synchronize_session="fetch")
        )
        self.db.commit()
        return result.rowcount == 1

    async def pay(self, draft_id: str, user_id: str, payment, provider: PaymentProvider) -> dict:
        draft = self.get(draft_id, user_id)
        if draft.step != CheckoutStep.PAYMENT:
            raise CheckoutStateError(f"Checkout is at step {draft.step.value}")

        # Claim the step before charging so a second submission cannot pay twice
        if not self._move_step(draft_id, CheckoutStep.PAYMENT, CheckoutStep.CONFIRMED):
            raise CheckoutStateError("Checkout payment is already being processed")

        try:
            self.db.refresh(draft)
            request = CheckoutRequest(
                travel_type=draft.travel_type,
                item_id=draft.item_id,
                passenger_details=draft.passenger_details,
                travel_date=draft.travel_date,
                check_in_date=draft.check_in_date,
                check_out_date=draft.check_out_date,
                payment=payment,
            )
            quote = Quote(
                base_amount=draft.base_amount,
                tax_amount=draft.tax_amount,
                total_amount=draft.total_amount,
            )
            confirmation = await BookingService(self.db).checkout(user_id, request, provider, quote=quote)
        except Exception:
            self.db.rollback()
            self._move_step(draft_id, CheckoutStep.CONFIRMED, CheckoutStep.PAYMENT)
            raise

        draft.booking_id = confirmation["booking_id"]
        self.db.commit()

        logger.info(f"Checkout draft {draft_id} confirmed as booking {confirmation['booking_id']}")
        return confirmation
