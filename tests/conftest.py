"""Shared fixtures: the FastAPI app wired to in-memory repositories."""

from collections.abc import AsyncIterator, Callable
from typing import Any

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from fakes import InMemoryDatabase, link_stock_items, make_repository
from main import ENTITIES, app

PARENT_COLUMNS = {
    "stock_sub_category": "stock_category_id",
    "stock_variant": "stock_sub_category_id",
    "stock_item": "category_id",
    "purchase_invoice": "supplier_id",
    "invoice_detail": "invoice_id",
    "existence": "stock_item_id",
    "menu_sub_category": "category_id",
    "menu_variant": "sub_category_id",
    "menu_ingredient": "menu_variant_id",
    "setting": "service",
}

UNIQUE_COLUMNS = {
    "stock_category": ("name",),
    "stock_item": ("name",),
    "supplier": ("name",),
    "purchase_invoice": ("invoice_number",),
    "menu_category": ("name",),
    "setting": ("service", "key"),
}

ROW_EXTRAS: dict[str, dict[str, Any]] = {
    "stock_item": {"current_stock": 0.0, "total_value": 0.0, "category_name": None},
    "purchase_invoice": {"supplier_name": None},
    "invoice_detail": {"stock_item_name": None},
    "existence": {"stock_item_name": None},
    "menu_sub_category": {"category_name": None},
    "menu_variant": {"sub_category_name": None, "item_type": None},
    "menu_ingredient": {"stock_variant_name": None},
}

# entity -> (dependent entity, referencing column), mirroring the dependency SQL.
DEPENDENTS = {
    "stock_category": [("stock_sub_category", "stock_category_id"), ("stock_item", "category_id")],
    "stock_sub_category": [("stock_variant", "stock_sub_category_id")],
    "stock_variant": [("menu_ingredient", "stock_variant_id")],
    "stock_item": [("existence", "stock_item_id"), ("invoice_detail", "stock_item_id")],
    "supplier": [("purchase_invoice", "supplier_id")],
    "purchase_invoice": [("invoice_detail", "invoice_id"), ("stock_variant", "invoice_id")],
    "invoice_detail": [("existence", "invoice_detail_id")],
    "menu_category": [("menu_sub_category", "category_id")],
    "menu_sub_category": [("menu_variant", "sub_category_id"), ("menu_ingredient", "menu_sub_category_id")],
    "menu_variant": [("menu_ingredient", "menu_variant_id")],
}


def _counter(fakes: dict[str, InMemoryDatabase], links: list[tuple[str, str]]) -> Callable[[Any], int]:
    def count(entity_id: Any) -> int:
        return sum(
            1 for name, column in links for row in fakes[name].rows.values() if row.get(column) == entity_id
        )

    return count


@pytest.fixture
def databases() -> dict[str, InMemoryDatabase]:
    repositories = {}
    fakes = {}
    for entity in ENTITIES:
        repository, database = make_repository(
            entity,
            parent_column=PARENT_COLUMNS.get(entity.name),
            unique=UNIQUE_COLUMNS.get(entity.name, ()),
            row_extras=ROW_EXTRAS.get(entity.name),
        )
        repositories[entity.name] = repository
        fakes[entity.name] = database

    for name, links in DEPENDENTS.items():
        fakes[name].dependency_counter = _counter(fakes, links)
    link_stock_items(fakes["existence"], fakes["stock_item"])

    app.state.repositories = repositories
    return fakes


@pytest_asyncio.fixture
async def client(databases: dict[str, InMemoryDatabase]) -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as http:
        yield http
