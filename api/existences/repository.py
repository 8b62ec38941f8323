"""
Existence persistence descriptor.

Receiving a batch restocks its stock item in the same transaction: units are
added to `current_stock` and `unit_cost` becomes the weighted average of the
stock on hand and the new batch.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any
from uuid import UUID

from core.db import Database
from core.repository import EntitySpec

from .schemas import Existence

logger = logging.getLogger(__name__)

LOCK_STOCK_ITEM = "lock_stock_item"
RESTOCK_STOCK_ITEM = "restock_stock_item"


def derive_batch_values(values: dict[str, Any]) -> dict[str, Any]:
    """
    A new batch starts full: current stock equals the units purchased, and its
    total cost is units * cost per unit.
    """
    units = float(values["units_purchased"])
    cost = float(values["cost_per_unit"])
    return {
        **values,
        "total_cost": round(units * cost, 4),
        "current_stock": values.get("current_stock", units),
    }


def weighted_restock(
    current_stock: float,
    unit_cost: float | None,
    units: float,
    cost: float,
) -> tuple[float, float, float]:
    """
    Returns (current_stock, unit_cost, total_value) after receiving `units` at
    `cost`. Without a previous cost the batch cost is taken as is.
    """
    stock = current_stock + units
    if unit_cost is None or stock <= 0:
        average = cost
    else:
        average = (current_stock * unit_cost + units * cost) / stock
    average = round(average, 4)
    return stock, average, round(stock * average, 4)


async def restock_item(db: Database, sql: Callable[[str], str], existence: Existence) -> None:
    item = await db.fetch_one(sql(LOCK_STOCK_ITEM), existence.stock_item_id)
    if item is None:
        # The existence insert already enforced the foreign key.
        return
    stock, unit_cost, total_value = weighted_restock(
        float(item["current_stock"]),
        None if item["unit_cost"] is None else float(item["unit_cost"]),
        existence.units_purchased,
        existence.cost_per_unit,
    )
    await db.execute(sql(RESTOCK_STOCK_ITEM), existence.stock_item_id, stock, unit_cost, total_value)
    logger.info(
        "stock_item_restocked id=%s existence=%s current_stock=%s unit_cost=%s",
        existence.stock_item_id,
        existence.id,
        stock,
        unit_cost,
    )


ENTITY = EntitySpec(
    name="existence",
    plural="existences",
    label="existence",
    list_key="existences",
    sql_dir=Path(__file__).parent / "sql",
    model=Existence,
    create_fields=(
        "invoice_detail_id",
        "stock_item_id",
        "units_purchased",
        "cost_per_unit",
        "total_cost",
        "expiry_date",
        "batch_number",
        "current_stock",
    ),
    update_fields=("current_stock", "expiry_date", "batch_number"),
    parent_param="stock_item_id",
    parent_type=UUID,
    prepare_create=derive_batch_values,
    after_create=restock_item,
    extra_queries=(LOCK_STOCK_ITEM, RESTOCK_STOCK_ITEM),
)
