import pytest

from catalog.domain.repository.product_repository import ProductRepository
from tests.fakes import FakeProductStore, make_product


@pytest.fixture
def store() -> FakeProductStore:
    return FakeProductStore([
        make_product(id=1, name="Oil - Margarine", code_value="S82254D",
                     quantity=439, price=71.42, expiration="15/12/2023"),
        make_product(id=2, name="Pineapple - Canned", code_value="M4637",
                     quantity=345, price=352.79, expiration="09/08/2023",
                     is_published=False),
        make_product(id=3, name="Wine - Red", code_value="T65812",
                     quantity=2, price=10.0, expiration="01/01/2024"),
    ])


@pytest.fixture
def repo(store: FakeProductStore) -> ProductRepository:
    return ProductRepository(store)
