"""Сервисный слой для управления товарами.

Каждая функция выполняет ровно один SQL-запрос к таблице products.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass

from sqlalchemy import case, delete, func, insert, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from inventory_api.core.errors import StorageError
from inventory_api.db.models import Product
from inventory_api.schemas.product import ProductIn


@dataclass(frozen=True)
class InventoryStats:
    """Сводка по складу."""

    total_products: int
    total_value: float
    low_stock: int


@asynccontextmanager
async def storage_errors(session: AsyncSession) -> AsyncIterator[None]:
    """
    Переводит ошибки базы данных в StorageError.

    Raises:
        StorageError: При любой ошибке SQLAlchemy; транзакция откатывается.
    """
    try:
        yield
    except SQLAlchemyError as exc:
        await session.rollback()
        orig = getattr(exc, "orig", None)
        raise StorageError(str(orig) if orig is not None else str(exc)) from exc


async def list_all(session: AsyncSession) -> list[Product]:
    """
    Возвращает список всех товаров по возрастанию id.

    Args:
        session: Сессия базы данных.

    Returns:
        Список объектов Product (пустой, если таблица пуста).
    """
    statement = select(Product).order_by(Product.id)
    async with storage_errors(session):
        result = await session.execute(statement)
        return list(result.scalars().all())


async def get_by_id(session: AsyncSession, product_id: int) -> Product | None:
    """
    Находит товар по id.

    Args:
        session: Сессия базы данных.
        product_id: ID товара.

    Returns:
        Объект Product или None, если товар не найден.
    """
    statement = select(Product).where(Product.id == product_id)
    async with storage_errors(session):
        result = await session.execute(statement)
        return result.scalar_one_or_none()


async def insert_product(session: AsyncSession, fields: ProductIn) -> int:
    """
    Создает новый товар в базе данных.

    Args:
        session: Сессия базы данных.
        fields: Проверенные поля товара.

    Returns:
        ID, присвоенный базой.
    """
    statement = insert(Product).values(**fields.model_dump()).returning(Product.id)
    async with storage_errors(session):
        result = await session.execute(statement)
        new_id = result.scalar_one()
        await session.commit()
    return new_id


async def replace_product(
    session: AsyncSession, product_id: int, fields: ProductIn
) -> int:
    """
    Полностью перезаписывает изменяемые поля товара.

    Значения из существующей строки не сохраняются: если description
    не передан, он сбрасывается в пустую строку.

    Args:
        session: Сессия базы данных.
        product_id: ID товара для обновления.
        fields: Новые значения всех полей.

    Returns:
        Количество затронутых строк (0 или 1).
    """
    statement = (
        update(Product)
        .where(Product.id == product_id)
        .values(**fields.model_dump())
        .execution_options(synchronize_session=False)
    )
    async with storage_errors(session):
        result = await session.execute(statement)
        await session.commit()
    return result.rowcount


async def remove_product(session: AsyncSession, product_id: int) -> int:
    """
    Удаляет товар по id.

    Returns:
        Количество затронутых строк (0 или 1).
    """
    statement = (
        delete(Product)
        .where(Product.id == product_id)
        .execution_options(synchronize_session=False)
    )
    async with storage_errors(session):
        result = await session.execute(statement)
        await session.commit()
    return result.rowcount


async def get_stats(session: AsyncSession, low_stock_threshold: int) -> InventoryStats:
    """Считает число товаров, общую стоимость и позиции с остатком ниже порога."""
    statement = select(
        func.count(Product.id),
        func.coalesce(func.sum(Product.price * Product.quantity), 0.0),
        func.coalesce(
            func.sum(case((Product.quantity < low_stock_threshold, 1), else_=0)), 0
        ),
    )
    async with storage_errors(session):
        total, value, low = (await session.execute(statement)).one()
    return InventoryStats(
        total_products=int(total), total_value=float(value), low_stock=int(low)
    )
