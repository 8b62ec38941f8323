"""
Invoice detail persistence descriptor.

`total_price` is always quantity * unit price: derived here on create and
recomputed by the update statement. Lists are usually narrowed with
`?invoice_id=`.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any
from uuid import UUID

from core.repository import EntitySpec

from .schemas import InvoiceDetail


def derive_total_price(values: dict[str, Any]) -> dict[str, Any]:
    return {**values, "total_price": round(float(values["quantity"]) * float(values["unit_price"]), 4)}


ENTITY = EntitySpec(
    name="invoice_detail",
    plural="invoice_details",
    label="invoice detail",
    list_key="invoice_details",
    sql_dir=Path(__file__).parent / "sql",
    model=InvoiceDetail,
    create_fields=(
        "invoice_id",
        "stock_item_id",
        "description",
        "quantity",
        "unit_of_measure",
        "items_per_unit",
        "unit_price",
        "total_price",
        "expiry_date",
        "batch_number",
    ),
    update_fields=(
        "stock_item_id",
        "description",
        "quantity",
        "unit_of_measure",
        "items_per_unit",
        "unit_price",
        "expiry_date",
        "batch_number",
    ),
    parent_param="invoice_id",
    parent_type=UUID,
    dependents="existences",
    prepare_create=derive_total_price,
)
