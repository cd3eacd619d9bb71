from decimal import Decimal

import pytest


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture(autouse=True)
def product_service(monkeypatch):
    """Install a started service in the runtime, as a worker boot would.

    Bypasses ``runtime.start()`` so the test database connection is
    never closed under pytest-django's transaction.
    """
    from modules.products import runtime
    from modules.products.repositories.django_repository import (
        ProductDjangoRepository,
    )
    from modules.products.services import ProductService

    service = ProductService(repository=ProductDjangoRepository())
    monkeypatch.setattr(runtime, "_service", service)
    return service


@pytest.fixture()
def make_product():
    """Factory persisting a Product with sensible defaults."""
    from modules.products.models import Product

    def _make(**overrides):
        defaults = {"name": "Widget", "price": Decimal("19.99")}
        defaults.update(overrides)
        return Product.objects.create(**defaults)

    return _make
