"""
Supplier persistence descriptor. Suppliers with purchase invoices are kept.
"""

from __future__ import annotations

from pathlib import Path

from core.repository import EntitySpec

from .schemas import Supplier

ENTITY = EntitySpec(
    name="supplier",
    plural="suppliers",
    label="supplier",
    list_key="suppliers",
    sql_dir=Path(__file__).parent / "sql",
    model=Supplier,
    create_fields=("name", "contact_name", "phone", "email", "address"),
    update_fields=("name", "contact_name", "phone", "email", "address"),
    dependents="purchase invoices",
)
