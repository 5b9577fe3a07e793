# routers/reservations_router.py
from fastapi import APIRouter, Depends, HTTPException, Query
from config import settings
from database.models import Reservation
from database.repository import LightBnbRepository
from routers.dependencies import get_repository
from typing import List

router = APIRouter()

@router.get("/users/{guest_id}/reservations", response_model=List[Reservation])
async def get_reservations(
    guest_id: int,
    limit: int = Query(settings.default_result_limit, ge=1, le=settings.max_result_limit),
    repository: LightBnbRepository = Depends(get_repository)
):
    outcome = await repository.get_all_reservations(guest_id, limit)
    if not outcome.ok:
        raise HTTPException(status_code=500, detail="Failed to fetch reservations")

    return [Reservation(**row) for row in outcome.rows]
