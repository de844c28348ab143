"""Обработчик сводной статистики склада."""

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from inventory_api.db.session import get_db_session
from inventory_api.schemas.product import StatsResponse
from inventory_api.services import product_service

router = APIRouter(prefix="/api", tags=["stats"])


@router.get("/stats", response_model=StatsResponse)
async def get_stats(
    request: Request, session: AsyncSession = Depends(get_db_session)
) -> StatsResponse:
    """
    Общее число товаров, их суммарная стоимость и число позиций
    с остатком ниже порога LOW_STOCK_THRESHOLD.
    """
    threshold: int = request.app.state.settings.LOW_STOCK_THRESHOLD
    stats = await product_service.get_stats(session, threshold)
    return StatsResponse(
        total_products=stats.total_products,
        total_value=round(stats.total_value, 2),
        low_stock=stats.low_stock,
        low_stock_threshold=threshold,
    )
