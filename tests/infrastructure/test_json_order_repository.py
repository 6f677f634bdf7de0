"""Tests for the JSON-file-backed order store."""

import json

from orders.domain.model.order import Order
from orders.infrastructure.persistence.json_order_repository import JsonOrderRepository


def _write(path, orders):
    path.write_text(json.dumps(orders), encoding="utf-8")


class TestJsonOrderRepository:

    def test_missing_file_is_created_empty(self, tmp_path):
        path = tmp_path / "nested" / "orders.json"

        repo = JsonOrderRepository(path)

        assert path.read_text(encoding="utf-8") == "[]"
        assert repo.find_all() == []

    def test_find_all_returns_stored_orders(self, tmp_path):
        path = tmp_path / "orders.json"
        _write(path, [
            {"id": 1, "status": "PAID"},
            {"id": 2, "status": "SHIPPED"},
        ])

        orders = JsonOrderRepository(path).find_all()

        assert orders == [
            Order(id=1, attributes={"status": "PAID"}),
            Order(id=2, attributes={"status": "SHIPPED"}),
        ]

    def test_find_by_id_hit(self, tmp_path):
        path = tmp_path / "orders.json"
        _write(path, [{"id": 7, "moment": "2019-06-20T19:53:07Z"}])

        order = JsonOrderRepository(path).find_by_id(7)

        assert order == Order(id=7, attributes={"moment": "2019-06-20T19:53:07Z"})

    def test_find_by_id_miss_returns_none(self, tmp_path):
        path = tmp_path / "orders.json"
        _write(path, [{"id": 1}])

        assert JsonOrderRepository(path).find_by_id(99) is None

    def test_existing_file_is_not_overwritten(self, tmp_path):
        path = tmp_path / "orders.json"
        _write(path, [{"id": 3}])

        JsonOrderRepository(path)

        assert json.loads(path.read_text(encoding="utf-8")) == [{"id": 3}]
