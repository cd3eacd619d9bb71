"""Product model.

Business rules implemented:
- ``id`` is system-assigned and never reused (rows are never removed
  through the service surface).
- ``available=False`` is the soft-delete marker (inherited from
  SoftDeleteModel).
- Price sign is not enforced here; callers own that rule.
"""

from __future__ import annotations

from django.db import models

from modules.core.models import SoftDeleteModel


class Product(SoftDeleteModel):
    """Product catalog record.

    Listing order is ascending ``id``, the table's natural insertion order.
    """

    name = models.CharField(max_length=255)
    price = models.DecimalField(max_digits=10, decimal_places=2)

    class Meta:
        db_table = "products"
        ordering = ["id"]

    def __str__(self) -> str:
        return f"#{self.id} - {self.name}"
