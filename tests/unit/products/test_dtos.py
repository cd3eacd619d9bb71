"""Unit tests for Product DTOs.

Covers:
- PaginationDTO: defaults, offset arithmetic, positive bounds.
- CreateProductDTO: validation, column limits, whitelist, frozen immutability.
- UpdateProductDTO: optional non-null fields, ``changes()`` excludes ``id``.
- ValidateProductsDTO: non-empty list of positive ids.
- PageMetaDTO: ``lastPage`` arithmetic and alias.
"""

from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

from modules.products.dtos import (
    CreateProductDTO,
    PageMetaDTO,
    PaginationDTO,
    ProductIdDTO,
    UpdateProductDTO,
    ValidateProductsDTO,
)

pytestmark = pytest.mark.unit


# ===========================================================================
# PaginationDTO
# ===========================================================================


class TestPaginationDTO:
    def test_defaults(self):
        dto = PaginationDTO()
        assert dto.page == 1
        assert dto.limit == 10
        assert dto.offset == 0

    def test_offset(self):
        assert PaginationDTO(page=3, limit=20).offset == 40

    @pytest.mark.parametrize("field", ["page", "limit"])
    def test_zero_rejected(self, field):
        with pytest.raises(ValidationError):
            PaginationDTO(**{field: 0})

    def test_unknown_field_rejected(self):
        with pytest.raises(ValidationError):
            PaginationDTO(page=1, size=5)


class TestProductIdDTO:
    def test_accepts_numeric_string(self):
        assert ProductIdDTO(id="7").id == 7

    def test_negative_rejected(self):
        with pytest.raises(ValidationError):
            ProductIdDTO(id=-1)


# ===========================================================================
# CreateProductDTO
# ===========================================================================


class TestCreateProductDTO:
    def test_create_with_valid_data(self):
        dto = CreateProductDTO(name="Lamp", price=25)
        assert dto.name == "Lamp"
        assert dto.price == Decimal("25")

    def test_name_is_trimmed(self):
        assert CreateProductDTO(name="  Lamp ", price=1).name == "Lamp"

    def test_empty_name_raises(self):
        with pytest.raises(ValidationError, match="Name must not be empty"):
            CreateProductDTO(name="   ", price=1)

    def test_missing_price_raises(self):
        with pytest.raises(ValidationError):
            CreateProductDTO(name="Lamp")

    def test_non_numeric_price_raises(self):
        with pytest.raises(ValidationError):
            CreateProductDTO(name="Lamp", price="cheap")

    def test_negative_price_is_accepted(self):
        assert CreateProductDTO(name="Lamp", price=-1).price == Decimal("-1")

    def test_available_is_not_whitelisted(self):
        with pytest.raises(ValidationError):
            CreateProductDTO(name="Lamp", price=1, available=False)

    def test_is_immutable(self):
        dto = CreateProductDTO(name="Lamp", price=1)
        with pytest.raises(ValidationError):
            dto.name = "Changed"

    def test_name_longer_than_column_raises(self):
        with pytest.raises(ValidationError):
            CreateProductDTO(name="x" * 256, price=1)

    def test_name_at_column_limit_is_accepted(self):
        assert len(CreateProductDTO(name="x" * 255, price=1).name) == 255

    @pytest.mark.parametrize("price", ["123456789012.5", "1000000000", "1.999"])
    def test_price_outside_column_raises(self, price):
        with pytest.raises(ValidationError):
            CreateProductDTO(name="Lamp", price=price)

    def test_price_at_column_limit_is_accepted(self):
        dto = CreateProductDTO(name="Lamp", price="99999999.99")
        assert dto.price == Decimal("99999999.99")


# ===========================================================================
# UpdateProductDTO
# ===========================================================================


class TestUpdateProductDTO:
    def test_only_id_required(self):
        dto = UpdateProductDTO(id=1)
        assert dto.name is None
        assert dto.price is None
        assert dto.available is None
        assert dto.changes() == {}

    def test_id_required(self):
        with pytest.raises(ValidationError):
            UpdateProductDTO(name="Lamp")

    def test_changes_exclude_id_and_unset_fields(self):
        dto = UpdateProductDTO(id=4, price=Decimal("30.00"))
        assert dto.changes() == {"price": Decimal("30.00")}

    def test_empty_name_raises(self):
        with pytest.raises(ValidationError, match="Name must not be empty"):
            UpdateProductDTO(id=1, name="")

    def test_unknown_field_rejected(self):
        with pytest.raises(ValidationError):
            UpdateProductDTO(id=1, stock=3)

    @pytest.mark.parametrize("field", ["name", "price", "available"])
    def test_explicit_null_raises(self, field):
        with pytest.raises(ValidationError, match="must not be null"):
            UpdateProductDTO(**{"id": 1, field: None})

    def test_price_outside_column_raises(self):
        with pytest.raises(ValidationError):
            UpdateProductDTO(id=1, price="123456789012.5")

    def test_name_longer_than_column_raises(self):
        with pytest.raises(ValidationError):
            UpdateProductDTO(id=1, name="x" * 256)


# ===========================================================================
# ValidateProductsDTO
# ===========================================================================


class TestValidateProductsDTO:
    def test_keeps_duplicates(self):
        assert ValidateProductsDTO(ids=[1, 1, 2]).ids == [1, 1, 2]

    def test_empty_list_rejected(self):
        with pytest.raises(ValidationError):
            ValidateProductsDTO(ids=[])

    def test_missing_ids_rejected(self):
        with pytest.raises(ValidationError):
            ValidateProductsDTO()


# ===========================================================================
# PageMetaDTO
# ===========================================================================


class TestPageMetaDTO:
    @pytest.mark.parametrize(
        "total,limit,expected",
        [(0, 10, 0), (1, 10, 1), (10, 10, 1), (11, 10, 2), (25, 4, 7)],
    )
    def test_last_page_is_ceiling(self, total, limit, expected):
        meta = PageMetaDTO.build(page=1, limit=limit, total=total)
        assert meta.last_page == expected

    def test_dump_uses_camel_case_alias(self):
        meta = PageMetaDTO.build(page=2, limit=10, total=15)
        assert meta.model_dump(by_alias=True) == {"page": 2, "total": 15, "lastPage": 2}
