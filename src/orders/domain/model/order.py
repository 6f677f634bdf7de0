"""Order entity.

Only the identifier carries meaning for this layer. Every other field
of a persisted order travels untouched in ``attributes``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class Order:
    """A persisted order, read-only from this layer's point of view."""

    id: int
    attributes: dict[str, Any] = field(default_factory=dict)
