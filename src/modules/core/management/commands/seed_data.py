from __future__ import annotations

import random
from decimal import Decimal

from django.core.management.base import BaseCommand

from modules.products.models import Product

CATALOG = [
    ("Desk Lamp", "Adjustable LED desk lamp", "Black", Decimal("34.90")),
    ("Desk Lamp", "Adjustable LED desk lamp", "White", Decimal("34.90")),
    ("Office Chair", "Ergonomic mesh chair", "Black", Decimal("249.00")),
    ("Notebook A5", "Dotted, 120 pages", "Red", Decimal("6.50")),
    ("Notebook A5", "Dotted, 120 pages", "Blue", Decimal("6.50")),
    ("Mechanical Keyboard", "Tenkeyless, brown switches", "Grey", Decimal("89.99")),
    ("Wireless Mouse", "2.4 GHz, silent click", "Grey", Decimal("24.99")),
    ("Monitor Stand", "Bamboo riser", None, Decimal("39.00")),
    ("Sticky Notes", "76x76 mm, 12 pads", "Yellow", Decimal("4.20")),
    ("Ballpoint Pen", None, "Blue", Decimal("0.99")),
]


class Command(BaseCommand):
    help = "Seed the catalog with sample products (idempotent)."

    def add_arguments(self, parser):
        parser.add_argument(
            "--seed",
            type=int,
            default=42,
            help="Random seed used for stock quantities.",
        )

    def handle(self, *args, **options):
        random.seed(options["seed"])
        self.stdout.write("Creating products...")

        created = 0
        for name, description, color, price in CATALOG:
            _, was_created = Product.objects.get_or_create(
                name=name,
                color=color,
                defaults={
                    "description": description,
                    "price": price,
                    "stock_quantity": random.randint(0, 200),
                },
            )
            created += int(was_created)

        self.stdout.write(
            self.style.SUCCESS(
                f"Seed completed: products={len(CATALOG)}, created={created}"
            )
        )
