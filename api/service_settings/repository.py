"""
Setting persistence descriptor. `(service, key)` is unique; a duplicate create
is reported as a conflict.
"""

from __future__ import annotations

from pathlib import Path

from core.repository import EntitySpec

from .schemas import Setting

ENTITY = EntitySpec(
    name="setting",
    plural="settings",
    label="setting",
    list_key="settings",
    sql_dir=Path(__file__).parent / "sql",
    model=Setting,
    create_fields=("service", "key", "value", "description"),
    update_fields=("value", "description"),
    parent_param="service",
)
