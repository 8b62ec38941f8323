"""
Stock variant endpoints.
"""

from __future__ import annotations

from core.router import build_crud_router

from .repository import ENTITY
from .schemas import StockVariantCreate, StockVariantUpdate

router = build_crud_router(ENTITY, create_model=StockVariantCreate, update_model=StockVariantUpdate)
