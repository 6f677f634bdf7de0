"""SQLAlchemy-backed implementation of OrderRepository.

The ``orders`` table keeps the identifier as a real column and the rest
of the record as a JSON document, matching the opaque ``Order`` entity.
"""

from __future__ import annotations

import logging

from sqlalchemy import JSON, BigInteger, Engine, select
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, sessionmaker

from orders.domain.model.order import Order
from orders.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)

BIGINT_MIN = -(2**63)
BIGINT_MAX = 2**63 - 1


class Base(DeclarativeBase):
    pass


class OrderRecord(Base):
    __tablename__ = "orders"

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True)
    attributes: Mapped[dict] = mapped_column(JSON, default=dict, nullable=False)


def create_schema(engine: Engine) -> None:
    """Create the ``orders`` table if it does not exist yet."""
    Base.metadata.create_all(engine)


class SqlOrderRepository(OrderRepository):

    def __init__(self, session_factory: sessionmaker) -> None:
        self._session_factory = session_factory

    # --- OrderRepository interface --------------------------------------------

    def find_all(self) -> list[Order]:
        with self._session_factory() as session:
            records = session.scalars(select(OrderRecord).order_by(OrderRecord.id)).all()
            logger.debug("Loaded %d orders", len(records))
            return [self._to_domain(record) for record in records]

    def find_by_id(self, order_id: int) -> Order | None:
        # ids outside the column range cannot be stored
        if not BIGINT_MIN <= order_id <= BIGINT_MAX:
            return None
        with self._session_factory() as session:
            record = session.get(OrderRecord, order_id)
            if record is None:
                return None
            return self._to_domain(record)

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_domain(record: OrderRecord) -> Order:
        return Order(id=record.id, attributes=dict(record.attributes or {}))
