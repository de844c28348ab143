"""Схемы входных данных и JSON-ответов для товаров."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from inventory_api.core.errors import ValidationError
from inventory_api.db.models import MAX_INTEGER

MISSING_FIELDS_MESSAGE = "Missing required fields"
INVALID_FIELDS_MESSAGE = "Invalid product fields"


class ProductIn(BaseModel):
    """Тело запроса на создание или полную замену товара."""

    model_config = ConfigDict(extra="ignore")

    name: str
    category: str
    price: float = Field(ge=0, allow_inf_nan=False)
    quantity: int = Field(ge=0, le=MAX_INTEGER)
    description: str = ""

    @field_validator("description", mode="before")
    @classmethod
    def empty_description(cls, value: Any) -> Any:
        """Отсутствующее или пустое описание хранится как пустая строка."""
        return value or ""


def parse_product_payload(payload: Any) -> ProductIn:
    """
    Проверяет тело запроса перед обращением к базе.

    `name` и `category` отклоняются, если они "ложные" (пустая строка,
    0, null или отсутствуют). `price` и `quantity` отклоняются только
    при отсутствии ключа: нулевые значения допустимы.

    Args:
        payload: Разобранное JSON-тело запроса.

    Returns:
        Проверенные поля товара.

    Raises:
        ValidationError: Если поля отсутствуют или имеют неверный формат.
    """
    data = payload if isinstance(payload, dict) else {}
    if (
        not data.get("name")
        or not data.get("category")
        or "price" not in data
        or "quantity" not in data
    ):
        raise ValidationError(MISSING_FIELDS_MESSAGE)

    try:
        return ProductIn.model_validate(data)
    except PydanticValidationError as exc:
        raise ValidationError(INVALID_FIELDS_MESSAGE) from exc


class ProductRead(BaseModel):
    """Товар в JSON-ответе."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    category: str
    price: float
    quantity: int
    description: str = ""

    @field_validator("description", mode="before")
    @classmethod
    def null_description(cls, value: Any) -> Any:
        """NULL в столбце description отдается клиенту как пустая строка."""
        return value or ""


class ProductListResponse(BaseModel):
    products: list[ProductRead]


class ProductResponse(BaseModel):
    product: ProductRead


class ProductCreatedResponse(BaseModel):
    id: int
    message: str


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str


class StatsResponse(BaseModel):
    """Сводные показатели склада."""

    total_products: int
    total_value: float
    low_stock: int
    low_stock_threshold: int
