"""
Booking lifecycle.

There is one way a booking comes into existence: `_place`, which reserves
inventory and inserts the row in the same transaction. `create_booking`
persists a client-priced booking as pending; `checkout` prices the item
server-side, charges the payment provider, then places and confirms the
booking without awaiting anything while the inventory row is locked.
"""

import logging
from datetime import datetime
from typing import Optional

from sqlalchemy.orm import Session

from yatra.config import get_settings
from yatra.exceptions import (
    AccessDeniedError,
    InvalidBookingError,
    InvalidStatusTransitionError,
    InventoryUnavailableError,
    NotFoundError,
    PaymentDeclinedError,
)
from yatra.models import Booking, BookingStatus, TravelType
from yatra.models.booking import ITEM_ID_FIELDS
from yatra.schemas.booking import BookingCreate, CheckoutRequest
from yatra.services import inventory
from yatra.services.payment import PaymentProvider, PaymentResult
from yatra.services.pricing import Quote, quote_for

logger = logging.getLogger(__name__)


def default_travel_date(item, travel_type: TravelType, check_in: Optional[datetime]) -> datetime:
    if travel_type == TravelType.HOTEL:
        return check_in
    return item.departure_time


class BookingService:

    def __init__(self, db: Session):
        self.db = db

    def _place(
        self,
        user_id: str,
        travel_type: TravelType,
        item_id: Optional[str],
        passenger_details,
        total_amount,
        travel_date: datetime,
        check_in_date: Optional[datetime] = None,
        check_out_date: Optional[datetime] = None,
        payment_id: Optional[str] = None,
    ) -> Booking:
        quantity = passenger_details.quantity

        if item_id:
            if inventory.get_item(self.db, travel_type, item_id) is None:
                raise InvalidBookingError(f"Unknown {travel_type.value} {item_id}")
            inventory.reserve(self.db, travel_type, item_id, quantity)

        booking = Booking(
            user_id=user_id,
            travel_type=travel_type,
            passenger_details=passenger_details.model_dump(mode="json", by_alias=True),
            quantity=quantity,
            total_amount=total_amount,
            status=BookingStatus.PENDING,
            travel_date=travel_date,
            check_in_date=check_in_date,
            check_out_date=check_out_date,
            payment_id=payment_id,
        )
        if item_id:
            setattr(booking, ITEM_ID_FIELDS[travel_type], item_id)

        self.db.add(booking)
        self.db.flush()
        return booking

    def create_booking(self, user_id: str, data: BookingCreate) -> Booking:
        try:
            booking = self._place(
                user_id=user_id,
                travel_type=data.travel_type,
                item_id=data.item_id,
                passenger_details=data.passenger_details,
                total_amount=data.total_amount,
                travel_date=data.travel_date,
                check_in_date=data.check_in_date,
                check_out_date=data.check_out_date,
                payment_id=data.payment_id,
            )
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        self.db.refresh(booking)
        logger.info(f"Booking {booking.id} created for user {user_id} ({booking.travel_type.value})")
        return booking

    def get_booking(self, booking_id: str) -> Optional[Booking]:
        return self.db.query(Booking).filter(Booking.id == booking_id).first()

    def get_booking_for_user(self, booking_id: str, user_id: str) -> Booking:
        booking = self.get_booking(booking_id)
        if not booking:
            raise NotFoundError("Booking not found")
        if booking.user_id != user_id:
            logger.warning(f"User {user_id} tried to read booking {booking_id} owned by {booking.user_id}")
            raise AccessDeniedError("Access denied")
        return booking

    def get_user_bookings(self, user_id: str) -> list[Booking]:
        return (
            self.db.query(Booking)
            .filter(Booking.user_id == user_id)
            .order_by(Booking.created_at.desc())
            .all()
        )

    def _apply_status(self, booking: Booking, status: BookingStatus) -> None:
        if booking.status == status:
            return
        if not booking.can_transition_to(status):
            raise InvalidStatusTransitionError(booking.status.value, status.value)

        if status == BookingStatus.CANCELLED and booking.item_id:
            inventory.release(self.db, booking.travel_type, booking.item_id, booking.quantity)

        logger.info(f"Booking {booking.id}: {booking.status.value} -> {status.value}")
        booking.status = status

    def update_booking_status(self, booking_id: str, status: BookingStatus) -> Booking:
        booking = self.get_booking(booking_id)
        if not booking:
            raise NotFoundError("Booking not found")

        try:
            self._apply_status(booking, status)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        self.db.refresh(booking)
        return booking

    def quote(self, travel_type: TravelType, item_id: str, quantity: int,
              check_in: Optional[datetime] = None, check_out: Optional[datetime] = None):
        item = inventory.get_item(self.db, travel_type, item_id)
        if item is None:
            raise NotFoundError(f"{travel_type.value.capitalize()} not found")
        quote = quote_for(
            item, travel_type, quantity,
            tax_rate=get_settings().tax_rate,
            check_in=check_in,
            check_out=check_out,
        )
        return item, quote

    async def checkout(
        self,
        user_id: str,
        request: CheckoutRequest,
        provider: PaymentProvider,
        quote: Optional[Quote] = None,
    ) -> dict:
        """
        Price, charge, then reserve and confirm.

        No transaction is open while the provider is awaited: the charge runs
        first, and the reservation, insert and confirmation happen afterwards
        in one short transaction with no awaits in it. If the seats or rooms
        are gone by then, the charge is refunded and the conflict re-raised.
        Pass `quote` to charge a previously shown price instead of re-pricing.
        """
        travel_type = request.travel_type
        details = request.passenger_details

        item = inventory.get_item(self.db, travel_type, request.item_id)
        if item is None:
            raise InvalidBookingError(f"Unknown {travel_type.value} {request.item_id}")
        if inventory.available_units(item) < details.quantity:
            raise InventoryUnavailableError(travel_type.value, request.item_id, details.quantity)
        if quote is None:
            quote = quote_for(
                item, travel_type, details.quantity,
                tax_rate=get_settings().tax_rate,
                check_in=request.check_in_date,
                check_out=request.check_out_date,
            )

        travel_date = request.travel_date or default_travel_date(item, travel_type, request.check_in_date)
        item_summary = item.summary
        # End the read transaction before handing control back to the event loop
        self.db.commit()

        reference = f"{travel_type.value}:{request.item_id}:{user_id}"
        try:
            result: PaymentResult = await provider.charge(quote.total_amount, request.payment, reference=reference)
        except PaymentDeclinedError:
            logger.info(f"Checkout for user {user_id} on {travel_type.value} {request.item_id} declined")
            raise

        try:
            booking = self._place(
                user_id=user_id,
                travel_type=travel_type,
                item_id=request.item_id,
                passenger_details=details,
                total_amount=quote.total_amount,
                travel_date=travel_date,
                check_in_date=request.check_in_date,
                check_out_date=request.check_out_date,
                payment_id=result.payment_id,
            )
            self._apply_status(booking, BookingStatus.CONFIRMED)
            self.db.commit()
        except Exception:
            self.db.rollback()
            logger.warning(f"Booking failed after payment {result.payment_id}, refunding")
            await provider.refund(result)
            raise

        self.db.refresh(booking)
        logger.info(f"Booking {booking.id} confirmed with payment {result.payment_id}")

        return {
            "booking_id": booking.id,
            "status": booking.status,
            "travel_type": booking.travel_type,
            "item_id": request.item_id,
            "item_summary": item_summary,
            "quantity": booking.quantity,
            "passenger_details": booking.passenger_details,
            "base_fare": quote.base_amount,
            "taxes": quote.tax_amount,
            "total_amount": quote.total_amount,
            "payment_id": result.payment_id,
            "payment_method": result.description,
            "booking_date": booking.booking_date,
            "travel_date": booking.travel_date,
        }
