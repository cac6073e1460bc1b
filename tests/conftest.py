import itertools
import httpx
import pytest

from payment_api.config import Settings
from payment_api.gateway import PaystackClient
from payment_api.main import create_app
from payment_api.store import PaymentStore


def paystack_stub(request: httpx.Request) -> httpx.Response:
    return httpx.Response(200, json={"status": True, "data": {}})


@pytest.fixture
def store():
    return PaymentStore()


@pytest.fixture
def gateway():
    client = PaystackClient("sk_test_key", transport=httpx.MockTransport(paystack_stub))
    yield client
    client.close()


@pytest.fixture
def sequential_ids():
    """Deterministic identifiers: PAY-TEST-1, PAY-TEST-2, ..."""
    counter = itertools.count(1)
    return lambda: f"PAY-TEST-{next(counter)}"


@pytest.fixture
def app(store, gateway):
    return create_app(settings=Settings(), store=store, gateway=gateway)


@pytest.fixture
async def client(app):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client
