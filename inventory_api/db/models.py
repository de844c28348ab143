"""Модели базы данных проекта."""

from sqlmodel import Field, SQLModel

# Границы 64-битного столбца INTEGER
MIN_INTEGER = -(2**63)
MAX_INTEGER = 2**63 - 1


class Product(SQLModel, table=True):
    """Модель товара на складе."""

    __tablename__ = "products"  # type: ignore[assignment]

    id: int | None = Field(default=None, primary_key=True)
    name: str
    category: str
    price: float
    quantity: int
    description: str | None = Field(default="")
