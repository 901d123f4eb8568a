"""End-to-end tests for the click CLI against a temporary data directory."""

import json

import pytest
from click.testing import CliRunner

from shop.infrastructure.cli.main import cli
from shop.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from tests.fakes import make_product


@pytest.fixture
def runner(tmp_path, monkeypatch):
    monkeypatch.setenv("SHOP_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("SHOP_LOG_LEVEL", "ERROR")
    repo = JsonProductRepository(tmp_path / "products.json")
    repo.save(make_product("P1", "Widget", "9.99", stock=10))
    repo.save(make_product("P2", "Gadget", "25.00", stock=1))
    return CliRunner()


def _ok(runner, *args):
    result = runner.invoke(cli, list(args))
    assert result.exit_code == 0, result.output
    return result


class TestCartCommands:

    def test_add_merges(self, runner):
        _ok(runner, "cart", "add", "--user", "alice", "--product", "P1", "--qty", "2")
        _ok(runner, "cart", "add", "--user", "alice", "--product", "P1", "--qty", "3")
        result = _ok(runner, "cart", "show", "--user", "alice", "--json")
        dto = json.loads(result.output)
        assert dto["item_count"] == 1
        assert dto["items"][0]["quantity"] == 5

    def test_update_replaces(self, runner):
        _ok(runner, "cart", "add", "--user", "alice", "--product", "P1", "--qty", "3")
        _ok(runner, "cart", "update", "--user", "alice", "--product", "P1", "--qty", "1")
        dto = json.loads(_ok(runner, "cart", "show", "--user", "alice", "--json").output)
        assert dto["total_quantity"] == 1

    def test_domain_error_exits_non_zero(self, runner):
        result = runner.invoke(cli, ["cart", "add", "--user", "alice", "--product", "P2", "--qty", "5"])
        assert result.exit_code == 1
        assert "Insufficient stock" in result.output

    def test_remove_missing(self, runner):
        _ok(runner, "cart", "add", "--user", "alice", "--product", "P1", "--qty", "1")
        result = runner.invoke(cli, ["cart", "remove", "--user", "alice", "--product", "P2"])
        assert result.exit_code == 1
        assert "not found in cart" in result.output


class TestOrderCommands:

    def _checkout(self, runner):
        _ok(runner, "cart", "add", "--user", "alice", "--product", "P1", "--qty", "2")
        _ok(
            runner, "order", "checkout", "--user", "alice",
            "--ship-to", "1 Main St", "--bill-to", "1 Main St", "--payment", "card",
        )
        listed = _ok(runner, "order", "list", "--user", "alice")
        return listed.output.splitlines()[2].split()[0]

    def test_checkout_and_show(self, runner):
        order_id = self._checkout(runner)
        dto = json.loads(_ok(runner, "order", "show", "--id", order_id, "--json").output)
        assert dto["status"] == "pending"
        assert dto["total_amount"] == "19.98"

    def test_status(self, runner):
        order_id = self._checkout(runner)
        result = _ok(runner, "order", "status", "--id", order_id, "paid")
        assert "now paid" in result.output

    def test_unknown_status(self, runner):
        order_id = self._checkout(runner)
        result = runner.invoke(cli, ["order", "status", "--id", order_id, "shipped_wrong"])
        assert result.exit_code == 1
        assert "Invalid order status" in result.output

    def test_remove_item_after_payment_refused(self, runner):
        order_id = self._checkout(runner)
        dto = json.loads(_ok(runner, "order", "show", "--id", order_id, "--json").output)
        _ok(runner, "order", "status", "--id", order_id, "paid")
        result = runner.invoke(
            cli, ["order", "remove-item", "--id", order_id, "--line", dto["items"][0]["id"]]
        )
        assert result.exit_code == 1
        assert "Cannot modify order" in result.output

    def test_delete(self, runner):
        order_id = self._checkout(runner)
        _ok(runner, "order", "delete", "--id", order_id, "--yes")
        assert "No orders found" in _ok(runner, "order", "list").output


class TestProductCommands:

    def test_add_and_list(self, runner):
        _ok(runner, "product", "add", "--name", "Doohickey", "--description", "Shiny", "--price", "3.50")
        result = _ok(runner, "product", "list")
        assert "Doohickey" in result.output
        assert "$3.50" in result.output

    def test_update_name(self, runner):
        result = _ok(runner, "product", "update", "--id", "P1", "--name", "Super Widget")
        assert "'Super Widget'" in result.output

    def test_search(self, runner):
        result = _ok(runner, "product", "search", "widg")
        assert "P1" in result.output
        assert "P2" not in result.output

    def test_search_without_match(self, runner):
        result = _ok(runner, "product", "search", "zzz")
        assert "No products match" in result.output

    def test_delete(self, runner):
        _ok(runner, "product", "delete", "--id", "P2", "--yes")
        assert "Gadget" not in _ok(runner, "product", "list").output

    def test_delete_unknown(self, runner):
        result = runner.invoke(cli, ["product", "delete", "--id", "nope", "--yes"])
        assert result.exit_code != 0
        assert "not found" in result.output
