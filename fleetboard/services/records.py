"""
Mutation services for dashboard records: create, update and delete by
business key, plus the bulk status update and bulk delete used by the
table selection toolbar.
"""

import logging
import uuid
from datetime import datetime
from typing import Any, Dict, List, Sequence

from pydantic import BaseModel
from sqlalchemy import select, func, update, delete
from sqlalchemy.ext.asyncio import AsyncSession

from fleetboard.core.errors import RecordNotFoundError, InvalidPayloadError
from fleetboard.services.registry import EntityConfig


logger = logging.getLogger(__name__)

# Bulk updates only ever touch this field; other keys in the payload are ignored.
BULK_UPDATABLE_FIELD = "status"


def _coerce_keys(entity: EntityConfig, keys: Sequence[str]) -> List[Any]:
    """
    Convert client keys to column values.
    UUID-keyed entities need UUIDs; malformed ones cannot match anything.
    """
    if not entity.key_is_uuid:
        return list(keys)
    
    coerced = []
    for key in keys:
        try:
            coerced.append(uuid.UUID(str(key)))
        except ValueError:
            continue
    return coerced


async def get_record(db: AsyncSession, entity: EntityConfig, key: str):
    """Fetch one record by business key or raise ``RecordNotFoundError``."""
    values = _coerce_keys(entity, [key])
    if not values:
        raise RecordNotFoundError(entity.label, key)
    
    result = await db.execute(
        select(entity.model).where(entity.key_column == values[0])
    )
    record = result.scalar_one_or_none()
    if record is None:
        raise RecordNotFoundError(entity.label, key)
    return record


async def create_record(db: AsyncSession, entity: EntityConfig, payload: BaseModel):
    """Insert a new record. A duplicate business key fails at flush."""
    record = entity.model(**payload.model_dump())
    db.add(record)
    await db.flush()
    await db.refresh(record)
    
    logger.info(f"Created {entity.label} {getattr(record, entity.key_field)}")
    return record


async def update_record(
    db: AsyncSession,
    entity: EntityConfig,
    key: str,
    payload: BaseModel,
):
    """Apply the fields present in ``payload`` to the record with ``key``."""
    record = await get_record(db, entity, key)
    
    changes = payload.model_dump(exclude_unset=True)
    for field, value in changes.items():
        setattr(record, field, value)
    
    await db.flush()
    await db.refresh(record)
    
    logger.info(f"Updated {entity.label} {key}: {sorted(changes)}")
    return record


async def delete_record(db: AsyncSession, entity: EntityConfig, key: str) -> BaseModel:
    """Delete the record with ``key`` and return its last state."""
    record = await get_record(db, entity, key)
    snapshot = entity.response_schema.model_validate(record)
    
    await db.delete(record)
    await db.flush()
    
    logger.info(f"Deleted {entity.label} {key}")
    return snapshot


async def bulk_update_status(
    db: AsyncSession,
    entity: EntityConfig,
    keys: Sequence[str],
    data: Dict[str, Any],
) -> int:
    """
    Set ``status`` on every record whose key is in ``keys``.
    
    Any other field in ``data`` is ignored. Without a status nothing is
    written and the number of matching records is returned.
    """
    values = _coerce_keys(entity, keys)
    condition = entity.key_column.in_(values)
    new_status = data.get(BULK_UPDATABLE_FIELD)
    
    if new_status is None or new_status == "":
        result = await db.execute(
            select(func.count()).select_from(entity.model).where(condition)
        )
        return result.scalar() or 0
    
    if not isinstance(new_status, str):
        raise InvalidPayloadError(f"{BULK_UPDATABLE_FIELD} must be a string")
    
    ignored = sorted(set(data) - {BULK_UPDATABLE_FIELD})
    if ignored:
        logger.debug(f"Bulk {entity.label} update ignoring fields {ignored}")
    
    result = await db.execute(
        update(entity.model)
        .where(condition)
        .values(status=new_status, updated_at=datetime.utcnow())
    )
    logger.info(f"Bulk updated {result.rowcount} {entity.name} to status {new_status!r}")
    return result.rowcount


async def bulk_delete(db: AsyncSession, entity: EntityConfig, keys: Sequence[str]) -> int:
    """Delete every record whose key is in ``keys``."""
    values = _coerce_keys(entity, keys)
    result = await db.execute(
        delete(entity.model).where(entity.key_column.in_(values))
    )
    logger.info(f"Bulk deleted {result.rowcount} {entity.name}")
    return result.rowcount


async def list_all(db: AsyncSession, entity: EntityConfig) -> list:
    """Every record in default order, for views that render the whole set."""
    default_column = getattr(entity.model, entity.default_sort)
    result = await db.execute(
        select(entity.model).order_by(default_column.desc(), entity.model.id.asc())
    )
    return result.scalars().all()
