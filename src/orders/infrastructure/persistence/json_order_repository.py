"""JSON-file-backed implementation of OrderRepository."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from orders.domain.model.order import Order
from orders.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- OrderRepository interface --------------------------------------------

    def find_all(self) -> list[Order]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    def find_by_id(self, order_id: int) -> Order | None:
        for raw in self._load_raw():
            if raw["id"] == order_id:
                return self._to_domain(raw)
        return None

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        attributes = {key: value for key, value in raw.items() if key != "id"}
        return Order(id=raw["id"], attributes=attributes)

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        orders = json.loads(self._file_path.read_text(encoding="utf-8"))
        logger.debug("Loaded %d orders from %s", len(orders), self._file_path)
        return orders

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
            logger.debug("Created empty order store at %s", self._file_path)
