"""Tests for the UpdateProduct use case (full replace)."""

import pytest

from catalog.application.update_product import UpdateProductHandler
from catalog.domain.exceptions import (
    AlreadyExistsError,
    DateOutOfRangeError,
    EntityNotFoundError,
    KeyMismatchError,
)
from tests.fakes import make_product


def _candidate(**overrides):
    fields = dict(id=0, name="Beer", quantity=5, code_value="S82254D",
                  expiration="20/05/2024", price=3.5, is_published=False)
    fields.update(overrides)
    return make_product(**fields)


class TestUpdateProduct:

    def test_replaces_every_field_by_id(self, repo):
        updated = UpdateProductHandler(repo).handle(1, _candidate())
        assert updated == make_product(
            id=1, name="Beer", quantity=5, code_value="S82254D",
            expiration="20/05/2024", price=3.5, is_published=False,
        )
        assert repo.get_by_id(1) == updated

    def test_replaces_by_code_value(self, repo):
        updated = UpdateProductHandler(repo).handle("S82254D", _candidate(code_value="NEW"))
        assert updated.id == 1
        assert repo.get_by_code_value("NEW").id == 1
        assert repo.get_by_code_value("S82254D") is None

    def test_keeps_stored_order(self, repo):
        UpdateProductHandler(repo).handle(1, _candidate())
        assert [p.id for p in repo.list_all()] == [1, 2, 3]

    def test_unknown_id_is_not_inserted(self, repo):
        with pytest.raises(EntityNotFoundError):
            UpdateProductHandler(repo).handle(42, _candidate(code_value="NEW"))
        assert len(repo.list_all()) == 3

    def test_unknown_code_key_with_other_code_value(self, repo):
        with pytest.raises(KeyMismatchError):
            UpdateProductHandler(repo).handle("NOPE", _candidate(code_value="NEW"))

    def test_code_value_taken_by_other_record(self, repo):
        with pytest.raises(AlreadyExistsError):
            UpdateProductHandler(repo).handle(1, _candidate(code_value="M4637"))
        assert repo.get_by_id(1).name == "Oil - Margarine"

    def test_expiration_revalidated(self, repo):
        with pytest.raises(DateOutOfRangeError):
            UpdateProductHandler(repo).handle(1, _candidate(expiration="10/10/2010"))
        assert repo.get_by_id(1).expiration == "15/12/2023"
