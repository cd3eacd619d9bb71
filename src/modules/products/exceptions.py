"""Product domain exceptions.

Raised by the Service Layer when business rules are violated.
The RPC layer (tasks) catches these and translates them into
``RpcException`` faults.
"""

from __future__ import annotations


class ProductNotFound(Exception):
    """The requested product does not exist or has been soft-deleted."""

    def __init__(self, id: int) -> None:
        super().__init__(f"Product with id {id} not found")
        self.id = id


class ProductsNotFound(Exception):
    """At least one product of a batch is missing or unavailable."""

    def __init__(self, message: str = "Some products were not found") -> None:
        super().__init__(message)
