"""Thin wrapper over the Stripe SDK for checkout sessions."""
import stripe
from app.config import settings


class StripeGateway:
    def __init__(self, api_key: str):
        self.api_key = api_key

    def create_checkout_session(self, **params):
        return stripe.checkout.Session.create(api_key=self.api_key, **params)

    def retrieve_checkout_session(self, session_id: str):
        return stripe.checkout.Session.retrieve(session_id, api_key=self.api_key)


def get_payment_gateway() -> StripeGateway:
    return StripeGateway(settings.STRIPE_SECRET)
