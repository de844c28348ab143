"""HTTP-обработчики CRUD-операций над товарами."""

import logging
import re
from typing import Any

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from inventory_api.core.errors import NotFoundError
from inventory_api.db.models import MAX_INTEGER, MIN_INTEGER
from inventory_api.db.session import get_db_session
from inventory_api.schemas.product import (
    ErrorResponse,
    MessageResponse,
    ProductCreatedResponse,
    ProductListResponse,
    ProductRead,
    ProductResponse,
    parse_product_payload,
)
from inventory_api.services import product_service

# Целое из ASCII-цифр с необязательным минусом
PRODUCT_ID_PATTERN = re.compile(r"-?[0-9]+")

router = APIRouter(prefix="/api/products", tags=["products"])


def parse_product_id(raw_id: str) -> int:
    """
    Переводит id из пути в число.

    Строка, не являющаяся числом, не совпадает ни с одной строкой таблицы,
    поэтому такой товар считается ненайденным.

    Raises:
        NotFoundError: Если id не является допустимым целым числом.
    """
    if not PRODUCT_ID_PATTERN.fullmatch(raw_id):
        raise NotFoundError()
    product_id = int(raw_id)
    if not MIN_INTEGER <= product_id <= MAX_INTEGER:
        raise NotFoundError()
    return product_id


async def read_json_body(request: Request) -> Any:
    """Тело запроса как JSON; пустое или битое тело считается пустым объектом."""
    try:
        return await request.json()
    except ValueError:
        return {}


@router.get("", response_model=ProductListResponse)
async def list_products(
    session: AsyncSession = Depends(get_db_session),
) -> dict[str, Any]:
    """Список всех товаров."""
    products = await product_service.list_all(session)
    return {"products": [ProductRead.model_validate(p) for p in products]}


@router.get(
    "/{product_id}",
    response_model=ProductResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_product(
    product_id: str, session: AsyncSession = Depends(get_db_session)
) -> dict[str, Any]:
    """Один товар по id."""
    product = await product_service.get_by_id(session, parse_product_id(product_id))
    if product is None:
        raise NotFoundError()
    return {"product": ProductRead.model_validate(product)}


@router.post(
    "",
    response_model=ProductCreatedResponse,
    responses={400: {"model": ErrorResponse}},
)
async def create_product(
    request: Request, session: AsyncSession = Depends(get_db_session)
) -> dict[str, Any]:
    """
    Создает товар.

    Args:
        request: Запрос с JSON-телом {name, category, price, quantity, description?}.
        session: Сессия базы данных (передается через зависимость).
    """
    fields = parse_product_payload(await read_json_body(request))
    new_id = await product_service.insert_product(session, fields)
    logging.info("Product %s created", new_id)
    return {"id": new_id, "message": "Product added successfully"}


@router.put(
    "/{product_id}",
    response_model=MessageResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def update_product(
    product_id: str,
    request: Request,
    session: AsyncSession = Depends(get_db_session),
) -> dict[str, str]:
    """
    Полностью заменяет товар.

    Тело проверяется до поиска товара, поэтому неполный запрос
    к несуществующему id дает 400, а не 404.
    """
    fields = parse_product_payload(await read_json_body(request))
    changed = await product_service.replace_product(
        session, parse_product_id(product_id), fields
    )
    if changed == 0:
        raise NotFoundError()
    logging.info("Product %s updated", product_id)
    return {"message": "Product updated successfully"}


@router.delete(
    "/{product_id}",
    response_model=MessageResponse,
    responses={404: {"model": ErrorResponse}},
)
async def delete_product(
    product_id: str, session: AsyncSession = Depends(get_db_session)
) -> dict[str, str]:
    """Удаляет товар."""
    removed = await product_service.remove_product(
        session, parse_product_id(product_id)
    )
    if removed == 0:
        raise NotFoundError()
    logging.info("Product %s deleted", product_id)
    return {"message": "Product deleted successfully"}
