"""Services package: list resolution, record mutations, analytics."""

from fleetboard.services.registry import EntityConfig, ENTITIES, get_entity
from fleetboard.services.listing import ListQuery, parse_list_query, resolve_page
from fleetboard.services.records import (
    get_record,
    create_record,
    update_record,
    delete_record,
    bulk_update_status,
    bulk_delete,
    list_all,
)
from fleetboard.services.analytics_service import get_analytics

__all__ = [
    "EntityConfig",
    "ENTITIES",
    "get_entity",
    "ListQuery",
    "parse_list_query",
    "resolve_page",
    "get_record",
    "create_record",
    "update_record",
    "delete_record",
    "bulk_update_status",
    "bulk_delete",
    "list_all",
    "get_analytics",
]
