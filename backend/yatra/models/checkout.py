from sqlalchemy import Column, Integer, String, DateTime, Numeric, ForeignKey, JSON, Enum as SQLEnum
from sqlalchemy.sql import func
from yatra.database import Base, generate_uuid
from yatra.models.booking import TravelType
from yatra.models.transport import _enum_values
from datetime import datetime
import enum


class CheckoutStep(str, enum.Enum):
    PASSENGERS = "passengers"
    PAYMENT = "payment"
    CONFIRMED = "confirmed"


class CheckoutDraft(Base):
    """
    Server-side state of one in-progress checkout.

    The draft records which step comes next; each wizard call checks the
    step before acting and advances it afterwards. The quote is fixed when
    the draft is opened so the payment step charges what the user saw.
    """
    __tablename__ = "checkout_drafts"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    user_id = Column(String(255), ForeignKey("users.id"), nullable=False, index=True)

    travel_type = Column(
        SQLEnum(TravelType, name="travel_type", values_callable=_enum_values),
        nullable=False,
    )
    item_id = Column(String(36), nullable=False)
    quantity = Column(Integer, nullable=False, default=1)

    travel_date = Column(DateTime, nullable=False)
    check_in_date = Column(DateTime, nullable=True)
    check_out_date = Column(DateTime, nullable=True)

    step = Column(
        SQLEnum(CheckoutStep, name="checkout_step", values_callable=_enum_values),
        nullable=False,
        default=CheckoutStep.PASSENGERS,
    )
    passenger_details = Column(JSON, nullable=True)

    base_amount = Column(Numeric(10, 2), nullable=False)
    tax_amount = Column(Numeric(10, 2), nullable=False)
    total_amount = Column(Numeric(10, 2), nullable=False)

    booking_id = Column(String(36), ForeignKey("bookings.id"), nullable=True)

    expires_at = Column(DateTime, nullable=False)
    created_at = Column(DateTime, server_default=func.now())

    def is_expired(self, now: datetime = None) -> bool:
        return (now or datetime.utcnow()) >= self.expires_at
