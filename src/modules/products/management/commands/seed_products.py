from __future__ import annotations

from decimal import Decimal

from django.core.management.base import BaseCommand

from modules.products.models import Product

SAMPLE_PRODUCTS = [
    (
        "MacBook Pro",
        Decimal("198000"),
        10,
        "M2 laptop with a 13-inch Retina display, 8GB unified memory "
        "and 256GB SSD storage.",
    ),
    (
        "iPhone 15 Pro",
        Decimal("159800"),
        25,
        "A17 Pro chip, titanium design, ProRAW camera and USB-C.",
    ),
    (
        "AirPods Pro",
        Decimal("39800"),
        50,
        "Wireless earbuds with active noise cancellation and spatial audio.",
    ),
    (
        "iPad Air",
        Decimal("92800"),
        15,
        "M1 chip, 10.9-inch Liquid Retina display, 64GB storage.",
    ),
    (
        "Apple Watch Series 9",
        Decimal("59800"),
        30,
        "S9 chip, 45mm case, GPS + Cellular, health tracking.",
    ),
]


class Command(BaseCommand):
    help = "Seed the catalog with sample products (idempotent, keyed by name)."

    def handle(self, *args, **options):
        self.stdout.write("Seeding products...")

        created = 0
        for name, price, stock, description in SAMPLE_PRODUCTS:
            _, was_created = Product.objects.get_or_create(
                name=name,
                defaults={
                    "price": price,
                    "stock": stock,
                    "description": description,
                },
            )
            created += int(was_created)

        self.stdout.write(
            self.style.SUCCESS(
                f"Seed completed: created={created}, total={Product.objects.count()}"
            )
        )
