"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.
Error handling follows the Null Object pattern: methods return ``None``
instead of raising; the Service Layer decides how to translate a
missing entity into an RPC fault.  Database errors propagate untouched.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from django.db import transaction

from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def get_available(self, id: int) -> Optional[Product]:
        return Product.objects.alive().filter(id=id).first()

    def count_available(self) -> int:
        return Product.objects.alive().count()

    def list_available(self, offset: int, limit: int) -> List[Product]:
        queryset = Product.objects.alive().order_by("id")
        return list(queryset[offset : offset + limit])

    def list_available_by_ids(self, ids: Iterable[int]) -> List[Product]:
        return list(Product.objects.alive().filter(id__in=list(ids)))

    @transaction.atomic
    def save(self, entity: Product) -> Product:
        """Persist (create or update) a product."""
        entity.save()
        return entity

    def create(self, name: str, price: Any) -> Product:
        return self.save(Product(name=name, price=price, available=True))

    @transaction.atomic
    def update_available(self, id: int, fields: Dict[str, Any]) -> Optional[Product]:
        """Conditional ``UPDATE ... WHERE id = %s AND available``.

        The availability check and the write are one statement, so a
        concurrent soft-delete cannot slip in between them.
        """
        updated = Product.objects.alive().filter(id=id).update(**fields)
        if not updated:
            return None
        return Product.objects.get(id=id)
