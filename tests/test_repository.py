"""Unit tests for the generic EntityRepository against an in-memory database."""

from uuid import uuid4

import pytest

from core.errors import DataAccessError, DependencyError, ValidationError
from core.repository import EntityRepository
from existences.repository import ENTITY as EXISTENCE
from existences.repository import weighted_restock
from fakes import InMemoryDatabase, broken_database, link_stock_items, make_repository, named_queries
from stock_categories.repository import ENTITY as STOCK_CATEGORY
from stock_items.repository import ENTITY as STOCK_ITEM
from stock_sub_categories.repository import ENTITY as SUB_CATEGORY


@pytest.fixture
def repo_and_db():
    return make_repository(SUB_CATEGORY, parent_column="stock_category_id")


async def _create(repository, category_id, name="Dairy", **extra):
    return await repository.create(
        {"name": name, "stock_category_id": category_id, "description": None, **extra}
    )


@pytest.mark.asyncio
async def test_create_applies_defaults(repo_and_db):
    repository, _ = repo_and_db
    category_id = uuid4()

    created = await _create(repository, category_id)

    assert created.id is not None
    assert created.name == "Dairy"
    assert created.stock_category_id == category_id
    assert created.display_order == 0
    assert created.is_active is True
    assert created.created_at == created.updated_at


@pytest.mark.asyncio
async def test_create_keeps_explicit_values(repo_and_db):
    repository, _ = repo_and_db
    created = await _create(repository, uuid4(), display_order=4, is_active=False)
    assert created.display_order == 4
    assert created.is_active is False


@pytest.mark.asyncio
async def test_create_then_get_round_trip(repo_and_db):
    repository, _ = repo_and_db
    created = await _create(repository, uuid4())
    fetched = await repository.get(created.id)
    assert fetched == created


@pytest.mark.asyncio
async def test_get_missing_returns_none(repo_and_db):
    repository, _ = repo_and_db
    assert await repository.get(uuid4()) is None


@pytest.mark.asyncio
async def test_create_rejects_unknown_fields(repo_and_db):
    repository, db = repo_and_db
    with pytest.raises(ValidationError):
        await repository.create({"name": "x", "stock_category_id": uuid4(), "colour": "red"})
    assert db.calls == []


@pytest.mark.asyncio
async def test_list_paginates_newest_first(repo_and_db):
    repository, db = repo_and_db
    category_id = uuid4()
    names = [f"sub-{i}" for i in range(5)]
    for name in names:
        await _create(repository, category_id, name=name)

    first = await repository.list(page=1, limit=2)
    second = await repository.list(page=2, limit=2)
    third = await repository.list(page=3, limit=2)

    assert [item.name for item in first.items] == ["sub-4", "sub-3"]
    assert [item.name for item in second.items] == ["sub-2", "sub-1"]
    assert [item.name for item in third.items] == ["sub-0"]
    assert first.total == second.total == third.total == 5
    assert (second.page, second.limit) == (2, 2)

    list_call = db.calls[-1]
    assert list_call == (SUB_CATEGORY.list_query, (None, 2, 4))


@pytest.mark.asyncio
async def test_list_filter_applies_to_count_and_page(repo_and_db):
    repository, db = repo_and_db
    dairy, bakery = uuid4(), uuid4()
    await _create(repository, dairy, name="Milk")
    await _create(repository, dairy, name="Cheese")
    await _create(repository, bakery, name="Bread")

    result = await repository.list(page=1, limit=10, parent=dairy)

    assert result.total == 2
    assert {item.name for item in result.items} == {"Milk", "Cheese"}
    count_call, list_call = db.calls[-2:]
    assert count_call == (SUB_CATEGORY.count_query, (dairy,))
    assert list_call[1][0] == dairy


@pytest.mark.asyncio
async def test_list_is_repeatable_without_writes(repo_and_db):
    repository, _ = repo_and_db
    for name in ("a", "b", "c"):
        await _create(repository, uuid4(), name=name)
    assert await repository.list(page=1, limit=2) == await repository.list(page=1, limit=2)


@pytest.mark.asyncio
async def test_list_without_parent_filter_passes_only_limit_and_offset():
    repository, db = make_repository(STOCK_CATEGORY)
    await repository.create({"name": "Drinks"})
    result = await repository.list(page=1, limit=10)
    assert result.total == 1
    assert db.calls[-2] == (STOCK_CATEGORY.count_query, ())
    assert db.calls[-1] == (STOCK_CATEGORY.list_query, (10, 0))


@pytest.mark.asyncio
async def test_update_changes_only_supplied_fields(repo_and_db):
    repository, _ = repo_and_db
    created = await _create(repository, uuid4(), description="fresh", display_order=2)

    updated = await repository.update(created.id, {"name": "Cold dairy"})

    assert updated.name == "Cold dairy"
    assert updated.description == "fresh"
    assert updated.display_order == 2
    assert updated.is_active is True
    assert updated.stock_category_id == created.stock_category_id
    assert updated.created_at == created.created_at
    assert updated.updated_at > created.updated_at


@pytest.mark.asyncio
async def test_update_sends_null_for_absent_fields(repo_and_db):
    repository, db = repo_and_db
    created = await _create(repository, uuid4())
    await repository.update(created.id, {"is_active": False})
    sql, args = db.calls[-1]
    assert sql == SUB_CATEGORY.update_query
    assert args == (created.id, None, None, None, False)


@pytest.mark.asyncio
async def test_update_missing_returns_none(repo_and_db):
    repository, _ = repo_and_db
    assert await repository.update(uuid4(), {"name": "x"}) is None


@pytest.mark.asyncio
async def test_update_rejects_fields_fixed_at_creation(repo_and_db):
    repository, _ = repo_and_db
    created = await _create(repository, uuid4())
    with pytest.raises(ValidationError):
        await repository.update(created.id, {"stock_category_id": uuid4()})


@pytest.mark.asyncio
async def test_delete_removes_row(repo_and_db):
    repository, db = repo_and_db
    created = await _create(repository, uuid4())

    assert await repository.delete(created.id) is True
    assert await repository.get(created.id) is None
    assert db.transactions == 1
    assert [sql for sql, _ in db.calls[-3:-1]] == [SUB_CATEGORY.dependency_query, SUB_CATEGORY.delete_query]


@pytest.mark.asyncio
async def test_delete_missing_returns_false(repo_and_db):
    repository, _ = repo_and_db
    assert await repository.delete(uuid4()) is False


@pytest.mark.asyncio
async def test_delete_refused_while_dependents_exist(repo_and_db):
    repository, db = repo_and_db
    created = await _create(repository, uuid4())
    db.dependents[created.id] = 3

    with pytest.raises(DependencyError) as excinfo:
        await repository.delete(created.id)

    assert excinfo.value.count == 3
    assert str(excinfo.value) == "cannot delete stock sub-category: 3 stock variants depend on it"
    assert all(sql != SUB_CATEGORY.delete_query for sql, _ in db.calls)
    assert await repository.get(created.id) is not None


@pytest.mark.asyncio
async def test_delete_foreign_key_race_is_a_dependency_error(repo_and_db):
    repository, db = repo_and_db
    created = await _create(repository, uuid4())
    db.fk_violation_on_delete = True

    with pytest.raises(DependencyError):
        await repository.delete(created.id)


@pytest.fixture
def existence_repo():
    repository, db = make_repository(EXISTENCE, parent_column="stock_item_id", row_extras={"stock_item_name": None})
    stock_items = InMemoryDatabase(STOCK_ITEM)
    link_stock_items(db, stock_items)
    return repository, db, stock_items


def _stock_item(stock_items, *, current_stock=0.0, unit_cost=None):
    item_id = uuid4()
    stock_items.rows[item_id] = {
        "id": item_id,
        "name": f"item-{item_id}",
        "unit": "kg",
        "current_stock": current_stock,
        "unit_cost": unit_cost,
        "total_value": current_stock * (unit_cost or 0),
    }
    return item_id


@pytest.mark.asyncio
async def test_entity_without_dependents_skips_the_check(existence_repo):
    repository, db, _ = existence_repo
    created = await repository.create(
        {"invoice_detail_id": uuid4(), "stock_item_id": uuid4(), "units_purchased": 4, "cost_per_unit": 2.5}
    )
    assert await repository.delete(created.id) is True
    assert EXISTENCE.dependency_query not in [sql for sql, _ in db.calls]


@pytest.mark.asyncio
async def test_existence_create_derives_totals(existence_repo):
    repository, _, _ = existence_repo
    created = await repository.create(
        {"invoice_detail_id": uuid4(), "stock_item_id": uuid4(), "units_purchased": 4, "cost_per_unit": 2.5}
    )
    assert created.total_cost == 10.0
    assert created.current_stock == 4.0


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("operation", "args"),
    [
        ("get", (uuid4(),)),
        ("update", (uuid4(), {"name": "x"})),
        ("delete", (uuid4(),)),
    ],
)
async def test_store_failures_carry_context(operation, args):
    repository = EntityRepository(SUB_CATEGORY, named_queries(SUB_CATEGORY), broken_database(SUB_CATEGORY))

    with pytest.raises(DataAccessError) as excinfo:
        await getattr(repository, operation)(*args)

    assert excinfo.value.operation == operation
    assert excinfo.value.entity == "stock_sub_category"
    assert excinfo.value.entity_id == str(args[0])


@pytest.mark.asyncio
async def test_list_failure_is_a_data_access_error():
    repository = EntityRepository(SUB_CATEGORY, named_queries(SUB_CATEGORY), broken_database(SUB_CATEGORY))
    with pytest.raises(DataAccessError) as excinfo:
        await repository.list(page=1, limit=10)
    assert excinfo.value.operation == "list"


@pytest.mark.parametrize(
    ("on_hand", "unit_cost", "units", "cost", "expected"),
    [
        (0.0, None, 10.0, 1.25, (10.0, 1.25, 12.5)),
        (10.0, 2.0, 10.0, 3.0, (20.0, 2.5, 50.0)),
        (4.0, None, 6.0, 2.0, (10.0, 2.0, 20.0)),
        (0.0, 5.0, 2.0, 1.0, (2.0, 1.0, 2.0)),
    ],
)
def test_weighted_restock(on_hand, unit_cost, units, cost, expected):
    assert weighted_restock(on_hand, unit_cost, units, cost) == expected


@pytest.mark.asyncio
async def test_existence_create_restocks_the_item(existence_repo):
    repository, db, stock_items = existence_repo
    item_id = _stock_item(stock_items)

    await repository.create(
        {"invoice_detail_id": uuid4(), "stock_item_id": item_id, "units_purchased": 10, "cost_per_unit": 1.25}
    )

    item = stock_items.rows[item_id]
    assert (item["current_stock"], item["unit_cost"], item["total_value"]) == (10.0, 1.25, 12.5)
    assert db.transactions == 1
    assert [sql for sql, _ in db.calls] == [EXISTENCE.create_query, "lock_stock_item", "restock_stock_item"]


@pytest.mark.asyncio
async def test_existence_create_averages_the_unit_cost(existence_repo):
    repository, _, stock_items = existence_repo
    item_id = _stock_item(stock_items, current_stock=10.0, unit_cost=2.0)

    await repository.create(
        {"invoice_detail_id": uuid4(), "stock_item_id": item_id, "units_purchased": 10, "cost_per_unit": 3.0}
    )

    item = stock_items.rows[item_id]
    assert (item["current_stock"], item["unit_cost"], item["total_value"]) == (20.0, 2.5, 50.0)


@pytest.mark.asyncio
async def test_existence_restock_failure_fails_the_create(existence_repo):
    repository, db, stock_items = existence_repo
    item_id = _stock_item(stock_items)

    def broken_restock(*args):
        raise DataAccessError("ConnectionResetError: reset by peer")

    db.statements["restock_stock_item"] = broken_restock

    with pytest.raises(DataAccessError) as excinfo:
        await repository.create(
            {"invoice_detail_id": uuid4(), "stock_item_id": item_id, "units_purchased": 1, "cost_per_unit": 1.0}
        )
    assert excinfo.value.operation == "create"
    assert stock_items.rows[item_id]["current_stock"] == 0.0
