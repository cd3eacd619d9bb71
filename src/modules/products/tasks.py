"""Product RPC handlers.

Exposes the ``ProductService`` over Celery, one task per message kind.
Each handler validates its payload into a DTO, calls the service and
serializes the result.  Domain exceptions are translated into
``RpcException`` faults; storage errors propagate unmodified.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional

from celery import shared_task
from rest_framework import status

from modules.core.rpc import RpcException, parse_payload
from modules.products import runtime
from modules.products.dtos import (
    CreateProductDTO,
    PaginationDTO,
    ProductIdDTO,
    UpdateProductDTO,
    ValidateProductsDTO,
)
from modules.products.exceptions import ProductNotFound, ProductsNotFound
from modules.products.serializers import ProductSerializer


Payload = Optional[Dict[str, Any]]


@contextmanager
def _rpc_faults() -> Iterator[None]:
    """Translate domain exceptions into RPC faults."""
    try:
        yield
    except ProductNotFound as exc:
        raise RpcException(status.HTTP_404_NOT_FOUND, str(exc)) from exc
    except ProductsNotFound as exc:
        raise RpcException(status.HTTP_400_BAD_REQUEST, str(exc)) from exc


def _serialize(product) -> Dict[str, Any]:
    return dict(ProductSerializer(product).data)


# ------------------------------------------------------------------
# Commands
# ------------------------------------------------------------------


@shared_task(name="create_product")
def create_product(payload: Payload = None) -> Dict[str, Any]:
    dto = parse_payload(CreateProductDTO, payload)
    product = runtime.get_service().create_product(dto)
    return _serialize(product)


@shared_task(name="update_product")
def update_product(payload: Payload = None) -> Dict[str, Any]:
    """Partial update; ``payload["id"]`` selects the row and is never written."""
    dto = parse_payload(UpdateProductDTO, payload)
    with _rpc_faults():
        product = runtime.get_service().update_product(dto.id, dto)
    return _serialize(product)


@shared_task(name="delete_product")
def delete_product(payload: Payload = None) -> Dict[str, Any]:
    dto = parse_payload(ProductIdDTO, payload)
    with _rpc_faults():
        product = runtime.get_service().remove_product(dto.id)
    return _serialize(product)


# ------------------------------------------------------------------
# Queries
# ------------------------------------------------------------------


@shared_task(name="find_all_products")
def find_all_products(payload: Payload = None) -> Dict[str, Any]:
    pagination = parse_payload(PaginationDTO, payload)
    page = runtime.get_service().list_products(pagination)
    return {
        "data": [_serialize(product) for product in page.data],
        "meta": page.meta.model_dump(by_alias=True),
    }


@shared_task(name="find_one_product")
def find_one_product(payload: Payload = None) -> Dict[str, Any]:
    dto = parse_payload(ProductIdDTO, payload)
    with _rpc_faults():
        product = runtime.get_service().get_product(dto.id)
    return _serialize(product)


@shared_task(name="validate_products")
def validate_products(payload: Payload = None) -> List[Dict[str, Any]]:
    dto = parse_payload(ValidateProductsDTO, payload)
    with _rpc_faults():
        products = runtime.get_service().validate_products(dto.ids)
    return [_serialize(product) for product in products]
