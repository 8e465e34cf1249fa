"""End-to-end tests for the click commands against a temporary JSON file."""

import json

import pytest
from click.testing import CliRunner

from catalog.infrastructure.cli.main import cli


@pytest.fixture
def products_file(tmp_path):
    file_path = tmp_path / "products.json"
    file_path.write_text(json.dumps([
        {"id": 1, "name": "Oil", "quantity": 2, "code_value": "S82254D",
         "is_published": True, "expiration": "15/12/2023", "price": 10.0},
        {"id": 2, "name": "Pineapple", "quantity": 5, "code_value": "M4637",
         "is_published": False, "expiration": "09/08/2023", "price": 30.0},
    ]), encoding="utf-8")
    return file_path


@pytest.fixture
def run(products_file):
    runner = CliRunner()

    def _run(*args):
        return runner.invoke(
            cli, list(args), env={"CATALOG_PRODUCTS_FILE": str(products_file)}
        )

    return _run


def _records(products_file):
    return json.loads(products_file.read_text(encoding="utf-8"))


class TestProductCommands:

    def test_list(self, run):
        result = run("product", "list")
        assert result.exit_code == 0
        assert "S82254D" in result.output
        assert "M4637" in result.output

    def test_list_price_gt(self, run):
        result = run("product", "list", "--price-gt", "20")
        assert result.exit_code == 0
        assert "M4637" in result.output
        assert "S82254D" not in result.output

    def test_list_price_gt_without_match(self, run):
        result = run("product", "list", "--price-gt", "500")
        assert result.exit_code == 1
        assert "not found products" in result.output

    def test_show(self, run):
        result = run("product", "show", "--id", "2")
        assert result.exit_code == 0
        assert "is_published: false" in result.output

    def test_add(self, run, products_file):
        result = run(
            "product", "add", "--name", "Wine", "--quantity", "3",
            "--code-value", "W1", "--expiration", "01/01/2023", "--price", "12.5",
        )
        assert result.exit_code == 0, result.output
        assert "Product #3 'Wine'" in result.output
        assert _records(products_file)[-1]["is_published"] is False

    def test_add_duplicate(self, run, products_file):
        result = run(
            "product", "add", "--name", "Wine", "--quantity", "3",
            "--code-value", "M4637", "--expiration", "01/01/2024", "--price", "12.5",
        )
        assert result.exit_code == 1
        assert "code_value already exists" in result.output
        assert len(_records(products_file)) == 2

    def test_add_nan_price_rejected(self, run, products_file):
        result = run(
            "product", "add", "--name", "Wine", "--quantity", "3",
            "--code-value", "W1", "--expiration", "01/01/2024", "--price", "nan",
        )
        assert result.exit_code == 1
        assert "price must be greater than 0" in result.output
        assert "NaN" not in products_file.read_text(encoding="utf-8")

    def test_patch_by_key_unpublishes(self, run, products_file):
        result = run("product", "patch", "--key", "S82254D", "--published", "false")
        assert result.exit_code == 0, result.output
        record = _records(products_file)[0]
        assert record["is_published"] is False
        assert record["price"] == 10.0

    def test_patch_without_flag_keeps_published(self, run, products_file):
        result = run("product", "patch", "--id", "1", "--price", "11")
        assert result.exit_code == 0, result.output
        record = _records(products_file)[0]
        assert record["is_published"] is True
        assert record["price"] == 11.0

    def test_update_requires_one_key(self, run):
        result = run(
            "product", "update", "--name", "X", "--quantity", "1",
            "--code-value", "X1", "--expiration", "01/01/2024", "--price", "1",
        )
        assert result.exit_code == 2
        assert "exactly one of --id or --key" in result.output

    def test_update(self, run, products_file):
        result = run(
            "product", "update", "--id", "2", "--name", "Mango", "--quantity", "9",
            "--code-value", "MG1", "--expiration", "05/05/2025", "--price", "4",
            "--published",
        )
        assert result.exit_code == 0, result.output
        assert _records(products_file)[1] == {
            "id": 2, "name": "Mango", "quantity": 9, "code_value": "MG1",
            "is_published": True, "expiration": "05/05/2025", "price": 4.0,
        }

    def test_delete_missing(self, run):
        result = run("product", "delete", "--key", "NOPE")
        assert result.exit_code == 1
        assert "product not found" in result.output

    def test_delete(self, run, products_file):
        result = run("product", "delete", "--id", "2")
        assert result.exit_code == 0
        assert [r["id"] for r in _records(products_file)] == [1]


class TestPriceCommands:

    @pytest.mark.parametrize("ids", ["1,1", "[1,1]", " [1, 1] "])
    def test_total(self, run, ids):
        result = run("price", "total", "--ids", ids)
        assert result.exit_code == 0, result.output
        assert "24.20" in result.output

    def test_total_bad_id(self, run):
        result = run("price", "total", "--ids", "1,x")
        assert result.exit_code == 2
        assert "Invalid product id 'x'" in result.output

    def test_total_unavailable(self, run):
        result = run("price", "total", "--ids", "1,1,1")
        assert result.exit_code == 1
        assert "unavailable quantity for product id: 1" in result.output

    def test_total_unpublished(self, run):
        result = run("price", "total", "--ids", "2")
        assert result.exit_code == 1
        assert "product not published id: 2" in result.output
