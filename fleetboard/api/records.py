"""
Router factory for the dashboard record endpoints.

Every entity exposes the same five operations:
    GET    /<entity>          paginated list (page envelope)
    POST   /<entity>          create
    PATCH  /<entity>/bulk     bulk status update
    DELETE /<entity>/bulk     bulk delete
    PATCH  /<entity>/{id}     update by business key
    DELETE /<entity>/{id}     delete by business key
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from fleetboard.database import get_db
from fleetboard.schemas.common import (
    PageEnvelope,
    CreatedResponse,
    BulkUpdateRequest,
    BulkDeleteRequest,
    BatchResult,
    ErrorResponse,
)
from fleetboard.services.listing import ListQuery, parse_list_query, resolve_page
from fleetboard.services.records import (
    create_record,
    update_record,
    delete_record,
    bulk_update_status,
    bulk_delete,
)
from fleetboard.services.registry import EntityConfig


ERROR_RESPONSES = {500: {"model": ErrorResponse, "description": "Operation failed"}}


def build_record_router(entity: EntityConfig, path: Optional[str] = None) -> APIRouter:
    """
    Build the CRUD router for ``entity``, mounted at ``/<path>``.
    ``path`` defaults to the entity name; payouts are also served as top-ups.
    """
    path = path or entity.name
    Response = entity.response_schema
    Create = entity.create_schema
    Update = entity.update_schema
    
    router = APIRouter(
        prefix=f"/{path}",
        tags=[path.title()],
        responses=ERROR_RESPONSES,
    )
    
    async def list_query(
        page: Optional[str] = Query(default=None, description="Page number (1-based)"),
        page_size: Optional[str] = Query(default=None, alias="pageSize", description="Items per page"),
        search: Optional[str] = Query(default=None, description="Free-text filter"),
        sort: Optional[str] = Query(default=None, description="Field to order by; 'id' is the business key"),
        direction: Optional[str] = Query(default=None, description="asc or desc"),
    ) -> ListQuery:
        return parse_list_query(entity, page, page_size, search, sort, direction)
    
    @router.get(
        "",
        response_model=PageEnvelope[Response],
        summary=f"List {entity.name}",
        description=f"Paginated, searchable, sortable list of {entity.name}.",
    )
    async def list_records(
        query: ListQuery = Depends(list_query),
        db: AsyncSession = Depends(get_db),
    ):
        return await resolve_page(db, entity, query)
    
    @router.post(
        "",
        response_model=CreatedResponse[Response],
        summary=f"Create {entity.label}",
    )
    async def create(
        payload: Create,
        db: AsyncSession = Depends(get_db),
    ):
        record = await create_record(db, entity, payload)
        return CreatedResponse[Response](data=Response.model_validate(record))
    
    # Declared before /{record_id} so "bulk" is never taken for a key
    @router.patch(
        "/bulk",
        response_model=BatchResult,
        summary=f"Bulk update {entity.name}",
        description="Applies only the status field of the payload.",
    )
    async def bulk_update(
        request: BulkUpdateRequest,
        db: AsyncSession = Depends(get_db),
    ) -> BatchResult:
        count = await bulk_update_status(db, entity, request.ids, request.data)
        return BatchResult(count=count)
    
    @router.delete(
        "/bulk",
        response_model=BatchResult,
        summary=f"Bulk delete {entity.name}",
    )
    async def bulk_remove(
        request: BulkDeleteRequest,
        db: AsyncSession = Depends(get_db),
    ) -> BatchResult:
        count = await bulk_delete(db, entity, request.ids)
        return BatchResult(count=count)
    
    @router.patch(
        "/{record_id}",
        response_model=Response,
        summary=f"Update {entity.label}",
    )
    async def update(
        record_id: str,
        payload: Update,
        db: AsyncSession = Depends(get_db),
    ):
        record = await update_record(db, entity, record_id, payload)
        return Response.model_validate(record)
    
    @router.delete(
        "/{record_id}",
        response_model=Response,
        summary=f"Delete {entity.label}",
    )
    async def remove(
        record_id: str,
        db: AsyncSession = Depends(get_db),
    ):
        return await delete_record(db, entity, record_id)
    
    return router
