"""
Setting endpoints.
"""

from __future__ import annotations

from core.router import build_crud_router

from .repository import ENTITY
from .schemas import SettingCreate, SettingUpdate

router = build_crud_router(ENTITY, create_model=SettingCreate, update_model=SettingUpdate)
