"""
Fleet map feed.
Handles GET /api/fleet/all: every fleet position, unpaginated.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from fleetboard.database import get_db
from fleetboard.schemas.common import RecordList
from fleetboard.schemas.fleet import FleetItemResponse
from fleetboard.services.records import list_all
from fleetboard.services.registry import FLEET

router = APIRouter(prefix="/fleet", tags=["Fleet"])


@router.get(
    "/all",
    response_model=RecordList[FleetItemResponse],
    summary="All fleet positions",
    description="Returns every fleet item, newest first, for the live map.",
)
async def get_all_fleet(
    db: AsyncSession = Depends(get_db),
) -> RecordList[FleetItemResponse]:
    """List every fleet item."""
    items = await list_all(db, FLEET)
    return RecordList[FleetItemResponse](
        data=[FleetItemResponse.model_validate(item) for item in items],
    )
