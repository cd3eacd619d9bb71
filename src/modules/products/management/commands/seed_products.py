from __future__ import annotations

from decimal import Decimal

from django.core.management.base import BaseCommand

from modules.products.models import Product

SEED_PRODUCTS = [
    ("Keyboard", Decimal("45.00")),
    ("Mouse", Decimal("19.90")),
    ("Monitor 24in", Decimal("189.00")),
    ("USB-C Hub", Decimal("34.50")),
    ("Desk Lamp", Decimal("25.00")),
    ("Webcam", Decimal("59.99")),
    ("Headset", Decimal("79.00")),
    ("Laptop Stand", Decimal("29.00")),
    ("Mouse Pad", Decimal("9.99")),
    ("External SSD 1TB", Decimal("99.00")),
    ("HDMI Cable", Decimal("7.50")),
    ("Power Strip", Decimal("18.00")),
]


class Command(BaseCommand):
    help = "Seed the products table with development data."

    def handle(self, *args, **options):
        self.stdout.write("Seeding products...")
        created = 0
        for name, price in SEED_PRODUCTS:
            _, was_created = Product.objects.get_or_create(
                name=name,
                defaults={"price": price, "available": True},
            )
            created += int(was_created)

        self.stdout.write(
            self.style.SUCCESS(
                f"Seed completed: created={created}, "
                f"available={Product.objects.alive().count()}"
            )
        )
