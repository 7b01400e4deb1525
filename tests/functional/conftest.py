import httpx
import pytest
import pytest_asyncio

from db.elastic import get_elastic
from main import app
from tests.functional.settings import test_settings


# приложение поднимается в процессе, вместо ES - fake_es из общего conftest
@pytest_asyncio.fixture(name='client')
async def client(fake_es):
    app.dependency_overrides[get_elastic] = lambda: fake_es
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url=test_settings.service_url) as c:
        yield c
    app.dependency_overrides.clear()


# фикстура запроса
@pytest.fixture
def make_get_request(client):
    async def inner(path: str, params: dict = None):
        response = await client.get(test_settings.api_prefix + path, params=params)
        return {
            "status": response.status_code,
            "body": response.json(),
        }
    return inner
