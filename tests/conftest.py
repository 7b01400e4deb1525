import pytest

from db.storage import ElasticDataStorage
from tests.testdata import catalog
from tests.utils.fake_elastic import FakeElasticsearch


# свежий "индекс" на каждый тест: fail_when и счётчики вызовов не протекают
@pytest.fixture
def fake_es():
    return FakeElasticsearch(catalog.documents())


@pytest.fixture
def storage(fake_es):
    return ElasticDataStorage(fake_es)
