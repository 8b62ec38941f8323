"""
Existence endpoints.
"""

from __future__ import annotations

from core.router import build_crud_router

from .repository import ENTITY
from .schemas import ExistenceCreate, ExistenceUpdate

router = build_crud_router(ENTITY, create_model=ExistenceCreate, update_model=ExistenceUpdate)
