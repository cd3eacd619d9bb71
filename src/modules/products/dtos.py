"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the RPC layer (Celery tasks)
and the Service layer.  DTOs are immutable (``frozen=True``) and
whitelist-only: unknown payload fields are rejected
(``extra="forbid"``).

- ``PaginationDTO``: page/limit window for listings.
- ``ProductIdDTO``: single-id payload for find-one / remove.
- ``CreateProductDTO``: input for product creation.
- ``UpdateProductDTO``: input for partial product updates.
- ``ValidateProductsDTO``: batch existence check.
- ``PageMetaDTO`` / ``ProductPage``: listing output.
"""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Annotated, Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, PositiveInt, field_validator

from modules.products.models import Product

# Column limits of ``Product.name`` and ``Product.price``.
ProductName = Annotated[str, Field(max_length=255)]
ProductPrice = Annotated[Decimal, Field(max_digits=10, decimal_places=2)]

# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class PaginationDTO(BaseModel):
    """Page window; both values are 1-based positive integers."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    page: PositiveInt = 1
    limit: PositiveInt = 10

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


class ProductIdDTO(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    id: PositiveInt


class CreateProductDTO(BaseModel):
    """Immutable DTO for product creation requests.

    Validates:
    - ``name`` is a non-empty string (trimmed).
    - ``name`` fits the 255-character column.
    - ``price`` is numeric with at most 10 digits, 2 of them decimal.
      Its sign is not checked.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: ProductName
    price: ProductPrice

    @field_validator("name")
    @classmethod
    def name_must_not_be_empty(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Name must not be empty.")
        return v.strip()


class UpdateProductDTO(BaseModel):
    """Immutable DTO for product update requests.

    ``id`` identifies the target row in the RPC message; the service
    takes the lookup id separately and never writes this one.  All other
    fields are optional and only supplied fields are applied, so use
    ``changes()`` rather than ``model_dump()`` to build the patch.
    Optional fields may be omitted but never sent as ``null``: every
    column is NOT NULL.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: PositiveInt
    name: Optional[ProductName] = None
    price: Optional[ProductPrice] = None
    available: Optional[bool] = None

    @field_validator("name", "price", "available", mode="before")
    @classmethod
    def must_not_be_null(cls, v: Any) -> Any:
        if v is None:
            raise ValueError("Field must not be null.")
        return v

    @field_validator("name")
    @classmethod
    def name_must_not_be_empty(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.strip():
            raise ValueError("Name must not be empty.")
        return v.strip() if v is not None else v

    def changes(self) -> dict:
        """Fields explicitly supplied by the caller, minus ``id``."""
        return self.model_dump(exclude_unset=True, exclude={"id"})


class ValidateProductsDTO(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    ids: List[PositiveInt] = Field(min_length=1)


# ---------------------------------------------------------------------------
# Output DTOs
# ---------------------------------------------------------------------------


class PageMetaDTO(BaseModel):
    """Listing metadata.  ``lastPage`` is serialized in camelCase."""

    model_config = ConfigDict(frozen=True)

    page: int
    total: int
    last_page: int = Field(serialization_alias="lastPage")

    @classmethod
    def build(cls, page: int, limit: int, total: int) -> PageMetaDTO:
        return cls(page=page, total=total, last_page=math.ceil(total / limit))


class ProductPage(BaseModel):
    """One page of available products plus its metadata."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    data: List[Product]
    meta: PageMetaDTO
