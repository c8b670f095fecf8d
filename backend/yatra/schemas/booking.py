from datetime import date, datetime
from decimal import Decimal
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import Field, TypeAdapter, field_validator, model_validator

from yatra.exceptions import InvalidBookingError
from yatra.models.booking import ITEM_ID_FIELDS, BookingStatus, TravelType
from yatra.models.checkout import CheckoutStep
from yatra.schemas.base import CamelModel


Title = Literal["Mr", "Ms", "Mrs", "Dr"]
Gender = Literal["male", "female", "other"]


# ----------------------------------------------------------------------------
# Passenger details: one variant per travel type, tagged by "type"
# ----------------------------------------------------------------------------

class ContactDetails(CamelModel):
    email: str = Field(pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
    phone: str = Field(min_length=10)
    emergency_contact: Optional[str] = Field(None, min_length=10)


class FlightPassenger(CamelModel):
    title: Title
    first_name: str = Field(min_length=2)
    last_name: str = Field(min_length=2)
    date_of_birth: date
    gender: Gender
    nationality: str = Field(min_length=1)
    passport_number: Optional[str] = None


class HotelGuest(CamelModel):
    title: Title
    first_name: str = Field(min_length=2)
    last_name: str = Field(min_length=2)


class GroundPassenger(CamelModel):
    title: Title
    first_name: str = Field(min_length=2)
    last_name: str = Field(min_length=2)
    age: Optional[int] = Field(None, ge=0, le=120)
    gender: Gender


class FlightPassengerDetails(CamelModel):
    type: Literal["flight"]
    passengers: list[FlightPassenger] = Field(min_length=1)
    contact: ContactDetails

    @property
    def quantity(self) -> int:
        return len(self.passengers)


class HotelGuestDetails(CamelModel):
    type: Literal["hotel"]
    guests: list[HotelGuest] = Field(min_length=1)
    rooms: int = Field(1, ge=1)
    contact: ContactDetails

    @property
    def quantity(self) -> int:
        return self.rooms


class GroundPassengerDetails(CamelModel):
    type: Literal["train", "bus"]
    passengers: list[GroundPassenger] = Field(min_length=1)
    contact: ContactDetails

    @property
    def quantity(self) -> int:
        return len(self.passengers)


PassengerDetails = Annotated[
    Union[FlightPassengerDetails, HotelGuestDetails, GroundPassengerDetails],
    Field(discriminator="type"),
]

_passenger_details_adapter = TypeAdapter(PassengerDetails)


def with_details_type(details: Any, travel_type: Any) -> Any:
    """Fill in the variant tag from the booking's travel type when the client left it out."""
    if isinstance(details, dict) and "type" not in details and travel_type is not None:
        tag = travel_type.value if isinstance(travel_type, TravelType) else travel_type
        return {**details, "type": tag}
    return details


def parse_passenger_details(travel_type: TravelType, raw: Any):
    """Validate raw passenger details against the variant for travel_type.

    Raises pydantic.ValidationError for malformed input and InvalidBookingError when
    the payload's tag names a different travel type.
    """
    details = _passenger_details_adapter.validate_python(with_details_type(raw, travel_type))
    _check_details_match(details, travel_type)
    return details


def _check_details_match(details, travel_type: TravelType):
    if details.type != travel_type.value:
        raise InvalidBookingError(
            f"passengerDetails are for a {details.type} booking, not {travel_type.value}"
        )


def _first_present(data: dict, *keys):
    for key in keys:
        if key in data:
            return key
    return None


def _default_details_type(data: Any) -> Any:
    if not isinstance(data, dict):
        return data
    details_key = _first_present(data, "passengerDetails", "passenger_details")
    type_key = _first_present(data, "travelType", "travel_type")
    if details_key and type_key:
        data = {**data, details_key: with_details_type(data[details_key], data[type_key])}
    return data


def _check_stay(check_in: Optional[datetime], check_out: Optional[datetime]):
    if check_in and check_out and check_out <= check_in:
        raise ValueError("checkOutDate must be after checkInDate")


# ----------------------------------------------------------------------------
# Payment methods, tagged by "method"
# ----------------------------------------------------------------------------

class CardPayment(CamelModel):
    method: Literal["card"]
    card_number: str
    expiry_month: str = Field(min_length=1)
    expiry_year: str = Field(min_length=1)
    cvv: str = Field(pattern=r"^\d{3,4}$")
    card_holder: str = Field(min_length=2)

    @field_validator("card_number")
    @classmethod
    def normalise_card_number(cls, value: str) -> str:
        digits = value.replace(" ", "").replace("-", "")
        if not digits.isdigit() or not 16 <= len(digits) <= 19:
            raise ValueError("Card number must be 16 to 19 digits")
        return digits


class UpiPayment(CamelModel):
    method: Literal["upi"]
    upi_id: str = Field(pattern=r"^[\w.\-]+@[\w.\-]+$")


class WalletPayment(CamelModel):
    method: Literal["wallet"]
    wallet_type: str = Field(min_length=1)


PaymentDetails = Annotated[
    Union[CardPayment, UpiPayment, WalletPayment],
    Field(discriminator="method"),
]


# ----------------------------------------------------------------------------
# Bookings
# ----------------------------------------------------------------------------

class BookingCreate(CamelModel):
    travel_type: TravelType
    flight_id: Optional[str] = None
    hotel_id: Optional[str] = None
    train_id: Optional[str] = None
    bus_id: Optional[str] = None
    passenger_details: PassengerDetails
    total_amount: Decimal = Field(ge=0)
    travel_date: datetime
    check_in_date: Optional[datetime] = None
    check_out_date: Optional[datetime] = None
    payment_id: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def default_details_type(cls, data: Any) -> Any:
        return _default_details_type(data)

    @model_validator(mode="after")
    def check_consistency(self):
        _check_details_match(self.passenger_details, self.travel_type)

        expected = ITEM_ID_FIELDS[self.travel_type]
        for field in ITEM_ID_FIELDS.values():
            if field != expected and getattr(self, field):
                raise ValueError(f"{field} cannot be set on a {self.travel_type.value} booking")

        _check_stay(self.check_in_date, self.check_out_date)
        return self

    @property
    def item_id(self) -> Optional[str]:
        return getattr(self, ITEM_ID_FIELDS[self.travel_type])


class BookingResponse(CamelModel):
    id: str
    user_id: str
    travel_type: TravelType
    flight_id: Optional[str] = None
    hotel_id: Optional[str] = None
    train_id: Optional[str] = None
    bus_id: Optional[str] = None
    passenger_details: dict
    quantity: int
    total_amount: Decimal
    status: BookingStatus
    booking_date: Optional[datetime] = None
    travel_date: datetime
    check_in_date: Optional[datetime] = None
    check_out_date: Optional[datetime] = None
    payment_id: Optional[str] = None
    created_at: Optional[datetime] = None


class CheckoutRequest(CamelModel):
    """One-shot checkout: everything the wizard collects, submitted at once."""
    travel_type: TravelType
    item_id: str = Field(min_length=1)
    passenger_details: PassengerDetails
    travel_date: Optional[datetime] = None
    check_in_date: Optional[datetime] = None
    check_out_date: Optional[datetime] = None
    payment: PaymentDetails

    @model_validator(mode="before")
    @classmethod
    def normalise(cls, data: Any) -> Any:
        data = _default_details_type(data)
        # Older clients send {"paymentMethod": "card", "paymentData": {...}}
        if isinstance(data, dict) and "payment" not in data and "paymentMethod" in data:
            payment = dict(data.get("paymentData") or {})
            payment["method"] = data["paymentMethod"]
            data = {**data, "payment": payment}
        return data

    @model_validator(mode="after")
    def check_consistency(self):
        _check_details_match(self.passenger_details, self.travel_type)
        if self.travel_type == TravelType.HOTEL and not (self.check_in_date and self.check_out_date):
            raise ValueError("Hotel bookings need checkInDate and checkOutDate")
        _check_stay(self.check_in_date, self.check_out_date)
        return self


class BookingConfirmation(CamelModel):
    booking_id: str
    status: BookingStatus
    travel_type: TravelType
    item_id: str
    item_summary: str
    quantity: int
    passenger_details: dict
    base_fare: Decimal
    taxes: Decimal
    total_amount: Decimal
    payment_id: str
    payment_method: str
    booking_date: Optional[datetime] = None
    travel_date: datetime


# ----------------------------------------------------------------------------
# Checkout wizard drafts
# ----------------------------------------------------------------------------

class CheckoutStart(CamelModel):
    travel_type: TravelType
    item_id: str = Field(min_length=1)
    quantity: int = Field(1, ge=1)
    travel_date: Optional[datetime] = None
    check_in_date: Optional[datetime] = None
    check_out_date: Optional[datetime] = None

    @model_validator(mode="after")
    def check_stay(self):
        if self.travel_type == TravelType.HOTEL and not (self.check_in_date and self.check_out_date):
            raise ValueError("Hotel bookings need checkInDate and checkOutDate")
        _check_stay(self.check_in_date, self.check_out_date)
        return self


class CheckoutPassengersUpdate(CamelModel):
    # Validated against the draft's travel type once the draft is loaded
    passenger_details: dict


class CheckoutPaymentRequest(CamelModel):
    payment: PaymentDetails


class CheckoutDraftResponse(CamelModel):
    id: str
    travel_type: TravelType
    item_id: str
    quantity: int
    travel_date: datetime
    check_in_date: Optional[datetime] = None
    check_out_date: Optional[datetime] = None
    step: CheckoutStep
    passenger_details: Optional[dict] = None
    base_amount: Decimal
    tax_amount: Decimal
    total_amount: Decimal
    booking_id: Optional[str] = None
    expires_at: datetime
    created_at: Optional[datetime] = None
