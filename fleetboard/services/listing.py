"""
List Query Resolver.

Turns the raw query string of a list endpoint (page, pageSize, search, sort,
direction) into a typed ``ListQuery`` and resolves it against the store as a
page envelope. Shared by every dashboard table.
"""

import math
from dataclasses import dataclass
from typing import List, Optional

from sqlalchemy import select, func, or_
from sqlalchemy.ext.asyncio import AsyncSession

from fleetboard.schemas.common import PageEnvelope
from fleetboard.services.registry import EntityConfig, DESC, DIRECTIONS


DEFAULT_PAGE = 1

# Largest value a signed 64-bit LIMIT/OFFSET accepts.
MAX_STORE_INT = 2 ** 63 - 1


@dataclass(frozen=True)
class ListQuery:
    """Validated list request. ``sort`` is a model attribute or None."""
    page: int = DEFAULT_PAGE
    page_size: int = 5
    search: str = ""
    sort: Optional[str] = None
    direction: str = "asc"
    
    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size


def parse_positive_int(raw: Optional[str], default: int) -> int:
    """
    Parse a query value as a positive int, falling back to ``default``.
    Values beyond what the store can bind are capped at ``MAX_STORE_INT``.
    """
    if raw is None:
        return default
    try:
        value = int(str(raw).strip())
    except ValueError:
        return default
    if value < 1:
        return default
    return min(value, MAX_STORE_INT)


def parse_direction(raw: Optional[str], default: str) -> str:
    if raw is None:
        return default
    value = raw.strip().lower()
    return value if value in DIRECTIONS else default


def parse_list_query(
    entity: EntityConfig,
    page: Optional[str] = None,
    page_size: Optional[str] = None,
    search: Optional[str] = None,
    sort: Optional[str] = None,
    direction: Optional[str] = None,
) -> ListQuery:
    """
    Build a ``ListQuery`` from raw query-string values.
    
    Malformed numbers fall back to defaults rather than failing, and sort
    names outside the entity's columns are dropped.
    """
    return ListQuery(
        page=parse_positive_int(page, DEFAULT_PAGE),
        page_size=parse_positive_int(page_size, entity.default_page_size),
        search=search or "",
        sort=entity.resolve_sort_field(sort),
        direction=parse_direction(direction, entity.default_direction),
    )


def build_search_filter(entity: EntityConfig, search: str):
    """OR of case-insensitive substring matches over the searchable fields."""
    if not search:
        return None
    return or_(*[
        getattr(entity.model, field).icontains(search, autoescape=True)
        for field in entity.searchable_fields
    ])


def build_order_by(entity: EntityConfig, query: ListQuery) -> List:
    """Requested ordering, or the entity default, with the surrogate id as tiebreaker."""
    if query.sort:
        column = getattr(entity.model, query.sort)
        direction = query.direction
    else:
        column = getattr(entity.model, entity.default_sort)
        if entity.direction_applies_to_default:
            direction = query.direction
        else:
            direction = entity.default_sort_direction
    
    primary = column.desc() if direction == DESC else column.asc()
    return [primary, entity.model.id.asc()]


def total_pages(total: int, page_size: int) -> int:
    return math.ceil(total / page_size)


async def resolve_page(
    db: AsyncSession,
    entity: EntityConfig,
    query: ListQuery,
) -> PageEnvelope:
    """
    Count and fetch one page of records under the same filter.
    
    A page past the end yields an empty ``data`` list with correct totals.
    """
    where = build_search_filter(entity, query.search)
    
    count_query = select(func.count()).select_from(entity.model)
    page_query = select(entity.model)
    if where is not None:
        count_query = count_query.where(where)
        page_query = page_query.where(where)
    
    total_result = await db.execute(count_query)
    total = total_result.scalar() or 0
    
    records = []
    if query.offset < total:
        page_query = (
            page_query
            .order_by(*build_order_by(entity, query))
            .offset(query.offset)
            .limit(query.page_size)
        )
        result = await db.execute(page_query)
        records = result.scalars().all()
    
    return PageEnvelope[entity.response_schema](
        data=[entity.response_schema.model_validate(record) for record in records],
        total=total,
        page=query.page,
        page_size=query.page_size,
        total_pages=total_pages(total, query.page_size),
    )
