from types import SimpleNamespace

import pytest
import stripe
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from app.main import app
from app.database import Base, get_db
from app.services.payment_gateway import get_payment_gateway

TEST_DB_URL = "sqlite:///:memory:"


class FakeGateway:
    """Stands in for Stripe; records created sessions and answers retrieves."""

    def __init__(self):
        self.created = []
        self.payment_status = "paid"
        self.fail = False
        self.malformed = False

    def create_checkout_session(self, **params):
        if self.fail:
            raise stripe.StripeError("gateway unavailable")
        self.created.append(params)
        session_id = f"cs_test_{len(self.created)}"
        return SimpleNamespace(id=session_id, url=f"https://checkout.stripe.test/{session_id}")

    def retrieve_checkout_session(self, session_id):
        if self.fail:
            raise stripe.StripeError("gateway unavailable")
        if self.malformed:
            return SimpleNamespace(id=session_id)
        return SimpleNamespace(id=session_id, payment_status=self.payment_status)


@pytest.fixture(scope="function")
def gateway():
    return FakeGateway()


@pytest.fixture(scope="function")
def client(gateway):
    engine = create_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,  # Ensure all connections share same in-memory DB
    )
    Base.metadata.create_all(engine)
    TestSession = sessionmaker(bind=engine)

    def override_get_db():
        db = TestSession()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_payment_gateway] = lambda: gateway

    with TestClient(app) as c:
        yield c

    app.dependency_overrides.clear()
    Base.metadata.drop_all(engine)
