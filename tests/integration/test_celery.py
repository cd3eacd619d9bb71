"""Integration tests for the Celery transport configuration."""

import pytest

pytestmark = pytest.mark.integration

RPC_TASKS = {
    "create_product",
    "find_all_products",
    "find_one_product",
    "update_product",
    "delete_product",
    "validate_products",
    "health_check",
}


class TestCeleryConfig:
    """Checks that Celery loads through Django."""

    def test_celery_app_is_importable(self):
        from config.celery import app

        assert app.main == "products_ms"

    def test_celery_app_exported_from_init(self):
        from config import celery_app

        assert celery_app.main == "products_ms"

    def test_broker_url_uses_configured_port(self, settings):
        assert settings.CELERY_BROKER_URL is not None
        assert str(settings.PORT) in settings.CELERY_BROKER_URL

    def test_celery_serializer_is_json(self, settings):
        assert settings.CELERY_TASK_SERIALIZER == "json"
        assert settings.CELERY_RESULT_SERIALIZER == "json"
        assert settings.CELERY_ACCEPT_CONTENT == ["json"]

    def test_default_queue_is_products(self, settings):
        assert settings.CELERY_TASK_DEFAULT_QUEUE == settings.PRODUCTS_QUEUE

    def test_rpc_tasks_are_registered(self):
        import modules.core.tasks  # noqa: F401
        import modules.products.tasks  # noqa: F401
        from config.celery import app

        assert RPC_TASKS <= set(app.tasks.keys())
