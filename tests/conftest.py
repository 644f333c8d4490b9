# tests/conftest.py
import pytest
from asgi_lifespan import LifespanManager
from httpx import ASGITransport, AsyncClient

from reliefhub.core.config import Settings
from reliefhub.main import create_app
from reliefhub.repos.inmemory import InMemoryStore

API = "/api/v1"


@pytest.fixture(scope="session")
def anyio_backend():
    # keep AnyIO on asyncio for the whole test session
    return "asyncio"


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        use_mongo=False,
        jwt_secret="test-secret",
        stripe_secret_key=None,
        payments_demo_mode=False,
    )


@pytest.fixture
def app(settings):
    return create_app(settings, store=InMemoryStore())


@pytest.fixture
def store(app):
    return app.state.context.store


@pytest.fixture
async def test_client(app):
    async with LifespanManager(app):
        transport = ASGITransport(app=app, raise_app_exceptions=True)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac
