"""
Purchase invoice persistence descriptor.

Lists can be narrowed with `?supplier_id=`. Rows carry the supplier name.
"""

from __future__ import annotations

from pathlib import Path
from uuid import UUID

from core.repository import EntitySpec

from .schemas import PurchaseInvoice

ENTITY = EntitySpec(
    name="purchase_invoice",
    plural="purchase_invoices",
    label="purchase invoice",
    list_key="invoices",
    sql_dir=Path(__file__).parent / "sql",
    model=PurchaseInvoice,
    create_fields=("invoice_number", "supplier_id", "invoice_date", "due_date", "total_amount", "status", "notes"),
    update_fields=("invoice_date", "due_date", "total_amount", "status", "notes"),
    defaults={"status": "pending"},
    parent_param="supplier_id",
    parent_type=UUID,
    dependents="invoice details or stock variants",
)
