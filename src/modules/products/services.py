"""Product service layer (Use Cases).

Orchestrates business logic for the Product catalog, delegating
persistence to the injected ``IProductRepository``.

Business rules enforced here:
- Soft-deleted products (``available=False``) are invisible to every
  operation: find-one, update and remove report them as not found.
- Update never writes ``id``; the lookup id is authoritative.
- Remove flips ``available`` instead of deleting the row.
- Batch validation is a set-membership check over distinct ids.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

import structlog
from django.db import transaction

from modules.products.dtos import PageMetaDTO, ProductPage
from modules.products.exceptions import ProductNotFound, ProductsNotFound

if TYPE_CHECKING:
    from modules.products.dtos import (
        CreateProductDTO,
        PaginationDTO,
        UpdateProductDTO,
    )
    from modules.products.models import Product
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    Holds no per-request state, so one instance serves every task run.
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create_product(self, dto: CreateProductDTO) -> Product:
        """Insert a new available product."""
        product = self._repo.create(name=dto.name, price=dto.price)
        logger.info("product.created", product_id=product.id)
        return product

    @transaction.atomic
    def update_product(self, id: int, dto: UpdateProductDTO) -> Product:
        """Apply the supplied fields to an available product.

        Raises:
            ProductNotFound: if the product does not exist or is unavailable.
        """
        changes = dto.changes()
        if not changes:
            return self.get_product(id)

        product = self._repo.update_available(id, changes)
        if product is None:
            raise ProductNotFound(id)

        logger.info("product.updated", product_id=id, fields=sorted(changes))
        return product

    @transaction.atomic
    def remove_product(self, id: int) -> Product:
        """Soft-delete a product and return it with ``available=False``.

        Raises:
            ProductNotFound: if the product does not exist or is unavailable.
        """
        product = self._repo.update_available(id, {"available": False})
        if product is None:
            raise ProductNotFound(id)
        logger.info("product.soft_deleted", product_id=id)
        return product

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_products(self, pagination: PaginationDTO) -> ProductPage:
        """Return one page of available products with listing metadata.

        Pages past the last one yield no data but still carry the true
        ``total`` and ``last_page``.
        """
        total = self._repo.count_available()
        products = self._repo.list_available(
            offset=pagination.offset, limit=pagination.limit
        )
        meta = PageMetaDTO.build(page=pagination.page, limit=pagination.limit, total=total)
        logger.info(
            "products.listed",
            page=pagination.page,
            limit=pagination.limit,
            total=total,
            returned=len(products),
        )
        return ProductPage(data=products, meta=meta)

    def get_product(self, id: int) -> Product:
        """Retrieve a single available product by ID.

        Raises:
            ProductNotFound: if the product does not exist or is unavailable.
        """
        product = self._repo.get_available(id)
        if product is None:
            raise ProductNotFound(id)
        logger.info("product.retrieved", product_id=id)
        return product

    def validate_products(self, ids: List[int]) -> List[Product]:
        """Return the available products for ``ids``, all or nothing.

        Raises:
            ProductsNotFound: if any distinct id has no available product.
        """
        unique_ids = set(ids)
        products = self._repo.list_available_by_ids(unique_ids)
        if len(products) != len(unique_ids):
            logger.warning(
                "products.validation_failed",
                requested=len(unique_ids),
                found=len(products),
            )
            raise ProductsNotFound()
        return products
