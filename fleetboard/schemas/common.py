"""
Shared Pydantic schemas: page envelope, bulk request bodies, batch results.
Field names are snake_case in Python and camelCase on the wire.
"""

from typing import Any, Dict, Generic, List, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


T = TypeVar("T")


class CamelModel(BaseModel):
    """Base schema that reads and writes camelCase JSON keys."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PageEnvelope(CamelModel, Generic[T]):
    """Response shape shared by every list endpoint."""
    data: List[T]
    total: int
    page: int
    page_size: int
    total_pages: int


class RecordList(CamelModel, Generic[T]):
    """Unpaginated list of records, e.g. the fleet map feed."""
    data: List[T]


class CreatedResponse(CamelModel, Generic[T]):
    """Response for POST endpoints."""
    success: bool = True
    data: T


class BulkUpdateRequest(CamelModel):
    """Body for PATCH /<entity>/bulk. Only ``data.status`` is applied."""
    ids: List[str]
    data: Dict[str, Any] = Field(default_factory=dict)


class BulkDeleteRequest(CamelModel):
    """Body for DELETE /<entity>/bulk."""
    ids: List[str]


class BatchResult(BaseModel):
    """Number of records touched by a bulk operation."""
    count: int


class ErrorResponse(BaseModel):
    """Error body returned by every failing request."""
    error: str = "Internal Server Error"
