"""Domain errors raised by the service layer and translated to HTTP status codes by the routers."""


class BookingError(ValueError):
    """Base class for booking and checkout failures."""


class NotFoundError(BookingError):
    pass


class AccessDeniedError(BookingError):
    pass


class InvalidBookingError(BookingError):
    """Payload passed schema validation but does not make sense (unknown item, wrong type)."""


class InventoryUnavailableError(BookingError):
    def __init__(self, travel_type: str, item_id: str, requested: int):
        self.travel_type = travel_type
        self.item_id = item_id
        self.requested = requested
        super().__init__(
            f"Not enough availability on {travel_type} {item_id} for {requested}"
        )


class InvalidStatusTransitionError(BookingError):
    def __init__(self, current: str, requested: str):
        self.current = current
        self.requested = requested
        super().__init__(f"Cannot move booking from {current} to {requested}")


class CheckoutStateError(BookingError):
    """A wizard step was called while the draft is at a different step."""


class PaymentDeclinedError(BookingError):
    pass
