"""Abstract repository for the Order entity.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, SQL, in-memory)
live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from orders.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def find_all(self) -> list[Order]:
        """Return every stored order."""

    @abstractmethod
    def find_by_id(self, order_id: int) -> Order | None:
        """Return an order by its ID, or None if not found."""
