"""
Заполнение базы демонстрационными товарами.

Использование:
  python -m inventory_api.db.seed [--keep]
"""

import argparse
import asyncio
import logging

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from inventory_api.core.config import settings
from inventory_api.core.logging import configure_logging
from inventory_api.db.models import Product
from inventory_api.db.session import build_engine, build_session_factory, init_schema

SAMPLE_PRODUCTS: list[tuple[str, str, float, int, str]] = [
    ('Laptop Pro 15"', "Electronics", 1299.99, 15, "High-performance laptop with 16GB RAM"),
    ("Wireless Mouse", "Electronics", 29.99, 50, "Ergonomic wireless mouse with USB receiver"),
    ("Office Chair", "Furniture", 249.99, 20, "Comfortable ergonomic office chair"),
    ("Standing Desk", "Furniture", 399.99, 12, "Adjustable height standing desk"),
    ("Coffee Maker", "Appliances", 89.99, 25, "Programmable coffee maker with thermal carafe"),
    ("Notebook Set", "Stationery", 12.99, 100, "Pack of 3 premium notebooks"),
    ("Pen Pack", "Stationery", 8.99, 150, "Box of 12 ballpoint pens"),
    ("USB-C Hub", "Electronics", 49.99, 30, "7-in-1 USB-C hub with HDMI and USB ports"),
    ("Desk Lamp", "Furniture", 34.99, 40, "LED desk lamp with adjustable brightness"),
    ("Water Bottle", "Accessories", 19.99, 60, "Insulated stainless steel water bottle"),
    ("Backpack", "Accessories", 59.99, 35, "Laptop backpack with multiple compartments"),
    ("Bluetooth Speaker", "Electronics", 79.99, 28, "Portable Bluetooth speaker with 12-hour battery"),
    ("Desk Organizer", "Stationery", 24.99, 45, "Multi-compartment desk organizer"),
    ("Monitor Stand", "Furniture", 44.99, 22, "Adjustable monitor stand with storage"),
    ("Keyboard", "Electronics", 69.99, 32, "Mechanical keyboard with RGB lighting"),
    ("Mouse Pad", "Accessories", 14.99, 80, "Large extended mouse pad"),
    ("Webcam HD", "Electronics", 89.99, 18, "1080p HD webcam with built-in microphone"),
    ("Phone Holder", "Accessories", 16.99, 55, "Adjustable phone holder for desk"),
    ("Whiteboard", "Stationery", 39.99, 15, "Magnetic dry-erase whiteboard 24x36"),
    ("Cable Organizer", "Accessories", 11.99, 70, "Cable management clips and ties set"),
]


async def seed_products(session: AsyncSession, keep_existing: bool = False) -> int:
    """
    Записывает демонстрационные товары.

    Args:
        session: Сессия базы данных.
        keep_existing: Не очищать таблицу перед вставкой.

    Returns:
        Количество добавленных товаров.
    """
    if not keep_existing:
        await session.execute(delete(Product))
    session.add_all(
        Product(
            name=name,
            category=category,
            price=price,
            quantity=quantity,
            description=description,
        )
        for name, category, price, quantity, description in SAMPLE_PRODUCTS
    )
    await session.commit()
    return len(SAMPLE_PRODUCTS)


async def main(keep_existing: bool) -> None:
    engine = build_engine(settings.database_url)
    try:
        await init_schema(engine)
        async with build_session_factory(engine)() as session:
            count = await seed_products(session, keep_existing=keep_existing)
        logging.info("Database initialized with %d products!", count)
    finally:
        await engine.dispose()


if __name__ == "__main__":
    ap = argparse.ArgumentParser(description="Заполнить базу демонстрационными товарами")
    ap.add_argument(
        "--keep", action="store_true", help="не удалять уже существующие товары"
    )
    args = ap.parse_args()
    configure_logging(settings.LOG_LEVEL)
    asyncio.run(main(keep_existing=args.keep))
