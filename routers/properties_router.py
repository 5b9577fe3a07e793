# routers/properties_router.py
from fastapi import APIRouter, Depends, HTTPException, Query
from config import settings
from database.models import Property, PropertyCreate, SearchOptions
from database.repository import LightBnbRepository
from routers.dependencies import get_repository
from typing import List, Optional
import logging

logger = logging.getLogger(__name__)

router = APIRouter()

@router.get("/properties", response_model=List[Property])
async def get_properties(
    city: Optional[str] = Query(None, description="Partial, case-insensitive city name"),
    owner_id: Optional[int] = Query(None, description="Only properties owned by this user"),
    minimum_price_per_night: Optional[float] = Query(
        None, ge=0, le=settings.max_price_per_night, allow_inf_nan=False,
        description="Minimum nightly cost in dollars"
    ),
    maximum_price_per_night: Optional[float] = Query(
        None, ge=0, le=settings.max_price_per_night, allow_inf_nan=False,
        description="Maximum nightly cost in dollars"
    ),
    minimum_rating: Optional[float] = Query(
        None, ge=0, le=5, allow_inf_nan=False,
        description="Minimum average review rating"
    ),
    limit: int = Query(settings.default_result_limit, ge=1, le=settings.max_result_limit),
    repository: LightBnbRepository = Depends(get_repository)
):
    options = SearchOptions(
        city=city,
        owner_id=owner_id,
        minimum_price_per_night=minimum_price_per_night,
        maximum_price_per_night=maximum_price_per_night,
        minimum_rating=minimum_rating
    )
    outcome = await repository.get_all_properties(options, limit)
    if not outcome.ok:
        raise HTTPException(status_code=500, detail="Failed to fetch properties")

    return [Property(**row) for row in outcome.rows]

@router.post("/properties", response_model=Property, status_code=201)
async def create_property(
    new_property: PropertyCreate,
    repository: LightBnbRepository = Depends(get_repository)
):
    outcome = await repository.add_property(new_property)
    if not outcome.ok or outcome.first() is None:
        raise HTTPException(status_code=500, detail="Failed to create property")

    logger.info(f"Created property {outcome.first()['id']} for owner {new_property.owner_id}")
    return Property(**outcome.first())
