"""Application service: Order queries."""

from __future__ import annotations

from orders.domain.exceptions import EntityNotFoundError
from orders.domain.model.order import Order
from orders.domain.repository.order_repository import OrderRepository


class OrderService:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def find_all(self) -> list[Order]:
        return self._order_repo.find_all()

    def find_by_id(self, order_id: int) -> Order:
        """Return the order with *order_id*.

        Raises ``EntityNotFoundError`` instead of returning None, so
        callers never see an absent order.
        """
        order = self._order_repo.find_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")
        return order
