# reliefhub/services/payments.py
import logging
import random
import time

import stripe
from starlette.concurrency import run_in_threadpool

from reliefhub.core.config import Settings
from reliefhub.errors import ApiError

logger = logging.getLogger(__name__)


def to_minor_units(price: float) -> int:
    return int(round(price * 100))


class PaymentService:
    """Stripe payment intents, with a demo mode that never calls Stripe."""

    def __init__(self, settings: Settings):
        self.secret_key = settings.stripe_secret_key
        self.currency = settings.payment_currency
        self.demo = settings.payments_demo_mode or not settings.stripe_secret_key

    async def create_intent(self, price: float) -> dict:
        amount = to_minor_units(price)

        if self.demo:
            return {
                "id": f"pi_demo_{int(time.time())}",
                "client_secret": f"pi_demo_secret_{random.randint(1000, 9999)}",
                "amount": amount,
                "currency": self.currency,
                "demo": True,
            }

        try:
            intent = await run_in_threadpool(
                stripe.PaymentIntent.create,
                api_key=self.secret_key,
                amount=amount,
                currency=self.currency,
                payment_method_types=["card"],
            )
        except stripe.StripeError:
            logger.exception("Stripe rejected payment intent for %s minor units", amount)
            raise ApiError(500, {"error": "Internal server error"})
        return {"id": intent.id, "client_secret": intent.client_secret, "amount": amount,
                "currency": self.currency}
