"""
CRUD router factory.

One `APIRouter` per entity:

    GET    /        paginated list (optional parent filter)
    GET    /{id}
    POST   /
    PUT    /{id}    partial update
    DELETE /{id}    refused with 400 while dependents exist

Request bodies are validated by the entity's pydantic models before the
repository is called. Typed repository errors are rendered by the handlers in
`core/responses.py`.
"""

# Annotations stay evaluated here: the body models are closure variables.

from typing import Any, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from . import responses
from .errors import ValidationError
from .pagination import MAX_LIMIT, normalize_limit, normalize_page
from .repository import EntityRepository, EntitySpec, repository_dependency


def parse_parent(entity: EntitySpec[Any], raw: Optional[str]) -> Any:
    if entity.parent_param is None:
        return None
    raw = (raw or "").strip()
    if not raw:
        return None
    try:
        return entity.parent_type(raw)
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"invalid {entity.parent_param}: {raw!r}") from exc


def build_crud_router(
    entity: EntitySpec[Any],
    *,
    create_model: type[BaseModel],
    update_model: type[BaseModel],
) -> APIRouter:
    router = APIRouter()
    get_repository = repository_dependency(entity)
    not_found = f"{entity.title} not found"

    @router.get("")
    async def list_entities(
        page: Optional[str] = Query(default=None, description="1-based page number"),
        limit: Optional[str] = Query(default=None, description=f"page size, at most {MAX_LIMIT}"),
        parent_filter: Optional[str] = Query(
            default=None,
            alias=entity.parent_param or "parent",
            include_in_schema=entity.parent_param is not None,
            description=entity.parent_param and f"only rows matching this {entity.parent_param}",
        ),
        repository: EntityRepository[Any] = Depends(get_repository),
    ) -> JSONResponse:
        parent = parse_parent(entity, parent_filter)
        result = await repository.list(
            page=normalize_page(page),
            limit=normalize_limit(limit),
            parent=parent,
        )
        return responses.success(
            status.HTTP_200_OK,
            f"{entity.title} list retrieved",
            result.as_data(entity.list_key),
        )

    @router.get("/{entity_id}")
    async def get_entity(
        entity_id: UUID,
        repository: EntityRepository[Any] = Depends(get_repository),
    ) -> JSONResponse:
        item = await repository.get(entity_id)
        if item is None:
            return responses.error(status.HTTP_404_NOT_FOUND, not_found)
        return responses.success(status.HTTP_200_OK, f"{entity.title} retrieved", item)

    @router.post("", status_code=status.HTTP_201_CREATED)
    async def create_entity(
        payload: create_model,  # type: ignore[valid-type]
        repository: EntityRepository[Any] = Depends(get_repository),
    ) -> JSONResponse:
        item = await repository.create(payload.model_dump())
        return responses.success(status.HTTP_201_CREATED, f"{entity.title} created", item)

    @router.put("/{entity_id}")
    async def update_entity(
        entity_id: UUID,
        payload: update_model,  # type: ignore[valid-type]
        repository: EntityRepository[Any] = Depends(get_repository),
    ) -> JSONResponse:
        item = await repository.update(entity_id, payload.model_dump(exclude_unset=True))
        if item is None:
            return responses.error(status.HTTP_404_NOT_FOUND, not_found)
        return responses.success(status.HTTP_200_OK, f"{entity.title} updated", item)

    @router.delete("/{entity_id}")
    async def delete_entity(
        entity_id: UUID,
        repository: EntityRepository[Any] = Depends(get_repository),
    ) -> JSONResponse:
        deleted = await repository.delete(entity_id)
        if not deleted:
            return responses.error(status.HTTP_404_NOT_FOUND, not_found)
        return responses.success(status.HTTP_200_OK, f"{entity.title} deleted")

    return router
