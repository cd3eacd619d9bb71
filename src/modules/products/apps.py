from django.apps import AppConfig


class ProductsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "modules.products"
    label = "products"

    def ready(self) -> None:
        # Registers the worker lifecycle receivers.
        from modules.products import runtime  # noqa: F401
