import pytest
import requests
from django.core.cache import cache

from portal.services import auth_store
from portal.services.auth_store import Usuario

from .helpers import FakeBackend, logged_client


@pytest.fixture(autouse=True)
def _clear_cache():
    # sessions, throttles and the query cache all live in the cache
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def backend(monkeypatch):
    fake = FakeBackend()

    def _request(session, method, url, **kwargs):
        return fake.handle(method, url, **kwargs)

    monkeypatch.setattr(requests.Session, 'request', _request)
    return fake


@pytest.fixture
def profissional():
    return Usuario(id=1, nome='Dra. Ana Souza', email='ana@hospital.com', tipo=auth_store.PROFISSIONAL)


@pytest.fixture
def familiar():
    return Usuario(id=7, nome='Carlos Lima', email='carlos@email.com', tipo=auth_store.FAMILIAR)


@pytest.fixture
def prof_client(profissional):
    return logged_client(profissional)


@pytest.fixture
def fam_client(familiar):
    return logged_client(familiar, token='tok-fam')
