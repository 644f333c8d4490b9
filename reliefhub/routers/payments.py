# reliefhub/routers/payments.py
from fastapi import Depends

from reliefhub.deps import AppContext, get_context
from reliefhub.errors import ApiError
from reliefhub.routing import Route
from reliefhub.schemas import PaymentIntentIn
from reliefhub.services.amounts import positive_number

TAG = "payments"


async def create_payment_intent(body: PaymentIntentIn, ctx: AppContext = Depends(get_context)):
    price = positive_number(body.price)
    if price is None:
        raise ApiError(400, {"error": "Invalid price"})
    intent = await ctx.payments.create_intent(price)
    return {"clientSecret": intent["client_secret"]}


ROUTES = [
    Route("/create-payment-intent", "POST", create_payment_intent),
]
