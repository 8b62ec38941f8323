"""
Generic CRUD persistence over named SQL.

Every entity is described by an `EntitySpec` (its query names, field order and
defaults). `EntityRepository` runs the same List/Get/Create/Update/Delete flow
for all of them:

- list: COUNT + SELECT ... LIMIT/OFFSET with the same optional parent filter
- get / update: a missing row is `None`, not an error
- create: defaults applied before INSERT ... RETURNING; an after-create hook
  shares the INSERT transaction
- update: absent fields are sent as NULL and coalesced in SQL
- delete: dependency COUNT and DELETE share one transaction
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Iterator, Mapping
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Generic, TypeVar

from fastapi import Request
from pydantic import BaseModel

from .db import Database
from .errors import ConstraintError, DataAccessError, DependencyError, QueryNotFoundError, ValidationError
from .pagination import offset_for
from .queries import QueryStore

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


@dataclass(frozen=True)
class EntitySpec(Generic[ModelT]):
    name: str
    plural: str
    label: str
    list_key: str
    sql_dir: Path
    model: type[ModelT]
    create_fields: tuple[str, ...]
    update_fields: tuple[str, ...]
    defaults: Mapping[str, Any] = field(default_factory=dict)
    # Query parameter used to filter lists by parent, and how to parse it.
    parent_param: str | None = None
    parent_type: Callable[[str], Any] = str
    # Human label of the rows that block a delete ("stock variants").
    dependents: str | None = None
    prepare_create: Callable[[dict[str, Any]], dict[str, Any]] | None = None
    # Runs in the INSERT transaction with (tx, sql lookup, created row).
    after_create: Callable[[Database, Callable[[str], str], Any], Awaitable[None]] | None = None
    # Statements beyond the CRUD set that hooks use; loaded and required at startup.
    extra_queries: tuple[str, ...] = ()

    @property
    def title(self) -> str:
        return self.label[:1].upper() + self.label[1:]

    @property
    def list_query(self) -> str:
        return f"list_{self.plural}"

    @property
    def count_query(self) -> str:
        return f"count_{self.plural}"

    @property
    def get_query(self) -> str:
        return f"get_{self.name}_by_id"

    @property
    def create_query(self) -> str:
        return f"create_{self.name}"

    @property
    def update_query(self) -> str:
        return f"update_{self.name}"

    @property
    def delete_query(self) -> str:
        return f"delete_{self.name}"

    @property
    def dependency_query(self) -> str:
        return f"check_{self.name}_dependencies"

    def query_names(self) -> list[str]:
        names = [
            self.list_query,
            self.count_query,
            self.get_query,
            self.create_query,
            self.update_query,
            self.delete_query,
        ]
        if self.dependents:
            names.append(self.dependency_query)
        names.extend(self.extra_queries)
        return names

    def load_queries(self) -> QueryStore:
        return QueryStore.load(self.sql_dir, required=self.query_names())


@dataclass(frozen=True)
class ListResult(Generic[ModelT]):
    items: list[ModelT]
    total: int
    page: int
    limit: int

    def as_data(self, list_key: str) -> dict[str, Any]:
        return {
            list_key: self.items,
            "total": self.total,
            "page": self.page,
            "limit": self.limit,
        }


class EntityRepository(Generic[ModelT]):
    def __init__(self, entity: EntitySpec[ModelT], queries: QueryStore, database: Database) -> None:
        self.entity = entity
        self._queries = queries
        self._db = database

    def _sql(self, name: str) -> str:
        try:
            return self._queries.get(name)
        except QueryNotFoundError as exc:
            raise DataAccessError(str(exc)) from exc

    def _to_model(self, row: Mapping[str, Any]) -> ModelT:
        return self.entity.model.model_validate(dict(row))

    @contextmanager
    def _logged(self, operation: str, entity_id: Any = None) -> Iterator[None]:
        try:
            yield
        except DataAccessError as exc:
            exc.operation = operation
            exc.entity = self.entity.name
            exc.entity_id = None if entity_id is None else str(entity_id)
            logger.error(
                "%s_failed entity=%s id=%s error=%s",
                operation,
                self.entity.name,
                entity_id,
                exc.message,
            )
            raise
        except ConstraintError as exc:
            logger.warning(
                "%s_rejected entity=%s id=%s kind=%s constraint=%s",
                operation,
                self.entity.name,
                entity_id,
                exc.kind,
                exc.constraint,
            )
            raise

    async def list(self, *, page: int, limit: int, parent: Any = None) -> ListResult[ModelT]:
        offset = offset_for(page, limit)
        filter_args: tuple[Any, ...] = (parent,) if self.entity.parent_param else ()

        with self._logged("list"):
            total = await self._db.fetch_val(self._sql(self.entity.count_query), *filter_args)
            rows = await self._db.fetch_all(
                self._sql(self.entity.list_query),
                *filter_args,
                limit,
                offset,
            )

        return ListResult(
            items=[self._to_model(row) for row in rows],
            total=int(total or 0),
            page=page,
            limit=limit,
        )

    async def get(self, entity_id: Any) -> ModelT | None:
        with self._logged("get", entity_id):
            row = await self._db.fetch_one(self._sql(self.entity.get_query), entity_id)
        return self._to_model(row) if row is not None else None

    async def create(self, fields: Mapping[str, Any]) -> ModelT:
        unknown = set(fields) - set(self.entity.create_fields)
        if unknown:
            raise ValidationError(f"unknown fields for {self.entity.label}: {', '.join(sorted(unknown))}")

        values: dict[str, Any] = dict(self.entity.defaults)
        values.update({k: v for k, v in fields.items() if v is not None})
        if self.entity.prepare_create is not None:
            values = self.entity.prepare_create(values)

        args = [values.get(name) for name in self.entity.create_fields]
        with self._logged("create"):
            if self.entity.after_create is None:
                row = await self._insert(self._db, args)
                created = self._to_model(row)
            else:
                async with self._db.transaction() as tx:
                    row = await self._insert(tx, args)
                    created = self._to_model(row)
                    await self.entity.after_create(tx, self._sql, created)

        logger.info("%s_created id=%s", self.entity.name, row.get("id"))
        return created

    async def _insert(self, db: Database, args: list[Any]) -> dict[str, Any]:
        row = await db.fetch_one(self._sql(self.entity.create_query), *args)
        if row is None:
            raise DataAccessError(f"create {self.entity.label} returned no row")
        return row

    async def update(self, entity_id: Any, fields: Mapping[str, Any]) -> ModelT | None:
        unknown = set(fields) - set(self.entity.update_fields)
        if unknown:
            raise ValidationError(f"unknown fields for {self.entity.label}: {', '.join(sorted(unknown))}")

        args = [fields.get(name) for name in self.entity.update_fields]
        with self._logged("update", entity_id):
            row = await self._db.fetch_one(self._sql(self.entity.update_query), entity_id, *args)
        if row is None:
            return None

        logger.info("%s_updated id=%s fields=%s", self.entity.name, entity_id, ",".join(sorted(fields)))
        return self._to_model(row)

    async def delete(self, entity_id: Any) -> bool:
        """
        Returns False when no row was deleted. Raises DependencyError when
        other rows still reference the entity; the row is left untouched.
        """
        entity = self.entity
        with self._logged("delete", entity_id):
            async with self._db.transaction() as tx:
                if entity.dependents:
                    count = int(await tx.fetch_val(self._sql(entity.dependency_query), entity_id) or 0)
                    if count > 0:
                        logger.info("%s_delete_refused id=%s dependents=%s", entity.name, entity_id, count)
                        raise DependencyError(label=entity.label, dependents=entity.dependents, count=count)
                try:
                    deleted = await tx.execute(self._sql(entity.delete_query), entity_id)
                except ConstraintError as exc:
                    if exc.kind != "foreign_key":
                        raise
                    # A dependent row appeared after the count.
                    raise DependencyError(
                        label=entity.label,
                        dependents=entity.dependents or "other rows",
                    ) from exc

        if deleted == 0:
            return False
        logger.info("%s_deleted id=%s", entity.name, entity_id)
        return True


def repository_dependency(entity: EntitySpec[Any]) -> Callable[[Request], EntityRepository[Any]]:
    """
    FastAPI dependency resolving the repository built at startup for `entity`.
    """

    def _get_repository(request: Request) -> EntityRepository[Any]:
        repositories: dict[str, EntityRepository[Any]] = request.app.state.repositories
        return repositories[entity.name]

    _get_repository.__name__ = f"get_{entity.name}_repository"
    return _get_repository


def build_repositories(entities: list[EntitySpec[Any]], database: Database) -> dict[str, EntityRepository[Any]]:
    return {entity.name: EntityRepository(entity, entity.load_queries(), database) for entity in entities}
