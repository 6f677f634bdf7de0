"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import sessionmaker

from orders.application.order_service import OrderService
from orders.domain.repository.order_repository import OrderRepository
from orders.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from orders.infrastructure.persistence.sql_order_repository import (
    SqlOrderRepository,
    create_schema,
)

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def data_dir() -> Path:
    return Path(os.getenv("ORDERS_DATA_DIR", str(_DEFAULT_DATA_DIR)))


@lru_cache
def engine_for(database_url: str) -> Engine:
    """Return the shared engine for *database_url*, creating its schema once."""
    engine = create_engine(database_url)
    create_schema(engine)
    return engine


def order_repository() -> OrderRepository:
    database_url = os.getenv("ORDERS_DATABASE_URL")
    if database_url:
        engine = engine_for(database_url)
        return SqlOrderRepository(sessionmaker(bind=engine, expire_on_commit=False))
    return JsonOrderRepository(data_dir() / "orders.json")


def order_service() -> OrderService:
    return OrderService(order_repo=order_repository())
