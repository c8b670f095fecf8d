"""
Payment providers.

Checkout talks to a PaymentProvider and never to a gateway directly. The only
provider shipped is the simulated one: it waits a moment, declines a fixed
set of test card numbers, and approves everything else.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
import asyncio
import logging
import uuid

from yatra.config import get_settings
from yatra.exceptions import PaymentDeclinedError
from yatra.schemas.booking import CardPayment, UpiPayment, WalletPayment

logger = logging.getLogger(__name__)

DECLINED_TEST_CARDS = {"4000000000000002"}


@dataclass
class PaymentResult:
    payment_id: str
    amount: Decimal
    description: str


def describe_payment_method(payment) -> str:
    if isinstance(payment, CardPayment):
        last4 = payment.card_number[-4:] if payment.card_number else "****"
        return f"Credit Card ending in {last4}"
    if isinstance(payment, UpiPayment):
        return f"UPI: {payment.upi_id}"
    if isinstance(payment, WalletPayment):
        return f"{payment.wallet_type} Wallet"
    return "Online Payment"


class PaymentProvider(ABC):

    @abstractmethod
    async def charge(self, amount: Decimal, payment, reference: str) -> PaymentResult:
        """Charge amount, returning a result or raising PaymentDeclinedError."""

    @abstractmethod
    async def refund(self, result: PaymentResult) -> None:
        """Give back a charge whose booking could not be placed."""


class SimulatedPaymentProvider(PaymentProvider):

    def __init__(self, delay_seconds: float = 1.0, declined_cards: set[str] = None):
        self.delay_seconds = delay_seconds
        self.declined_cards = DECLINED_TEST_CARDS if declined_cards is None else declined_cards

    async def charge(self, amount: Decimal, payment, reference: str) -> PaymentResult:
        if self.delay_seconds:
            await asyncio.sleep(self.delay_seconds)

        description = describe_payment_method(payment)
        if isinstance(payment, CardPayment) and payment.card_number in self.declined_cards:
            logger.info(f"Simulated payment declined for {reference} ({description})")
            raise PaymentDeclinedError(f"Payment declined for {description}")

        payment_id = f"PAY{uuid.uuid4().hex[:12].upper()}"
        logger.info(f"Simulated payment {payment_id} of {amount} for {reference} via {description}")
        return PaymentResult(payment_id=payment_id, amount=amount, description=description)

    async def refund(self, result: PaymentResult) -> None:
        logger.info(f"Simulated refund of {result.amount} for payment {result.payment_id}")


def get_payment_provider() -> PaymentProvider:
    settings = get_settings()
    return SimulatedPaymentProvider(delay_seconds=settings.payment_simulation_delay_seconds)
