"""Product repository interface.

Extends ``IRepository[Product]`` with the availability-scoped look-ups
the catalog service needs.  Every ``*_available`` method ignores
soft-deleted rows.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product record."""

    @abstractmethod
    def create(self, name: str, price: Any) -> Product:
        """Insert a new available product."""

    @abstractmethod
    def get_available(self, id: int) -> Optional[Product]:
        """Retrieve an available product, ``None`` if missing or deleted."""

    @abstractmethod
    def count_available(self) -> int:
        """Count available products."""

    @abstractmethod
    def list_available(self, offset: int, limit: int) -> List[Product]:
        """Return a window of available products in ``id`` order."""

    @abstractmethod
    def list_available_by_ids(self, ids: Iterable[int]) -> List[Product]:
        """Return the available products whose id is in ``ids``."""

    @abstractmethod
    def update_available(self, id: int, fields: Dict[str, Any]) -> Optional[Product]:
        """Apply ``fields`` to an available product in a single statement.

        Returns the refreshed product, or ``None`` when no available row
        matched ``id`` (nothing is written in that case).
        """
