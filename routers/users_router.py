# routers/users_router.py
from fastapi import APIRouter, Depends, HTTPException, Query
from database.models import User, UserCreate
from database.repository import LightBnbRepository
from routers.dependencies import get_repository

router = APIRouter()

@router.get("/users", response_model=User)
async def get_user_by_email(
    email: str = Query(..., description="Email address of the user"),
    repository: LightBnbRepository = Depends(get_repository)
):
    outcome = await repository.get_user_with_email(email)
    if not outcome.ok:
        raise HTTPException(status_code=500, detail="Failed to fetch user")
    if outcome.first() is None:
        raise HTTPException(status_code=404, detail="User not found")

    return User(**outcome.first())

@router.get("/users/{user_id}", response_model=User)
async def get_user(
    user_id: int,
    repository: LightBnbRepository = Depends(get_repository)
):
    outcome = await repository.get_user_with_id(user_id)
    if not outcome.ok:
        raise HTTPException(status_code=500, detail="Failed to fetch user")
    if outcome.first() is None:
        raise HTTPException(status_code=404, detail="User not found")

    return User(**outcome.first())

@router.post("/users", response_model=User, status_code=201)
async def create_user(
    user: UserCreate,
    repository: LightBnbRepository = Depends(get_repository)
):
    existing = await repository.get_user_with_email(user.email)
    if not existing.ok:
        raise HTTPException(status_code=500, detail="Failed to create user")
    if existing.first() is not None:
        raise HTTPException(status_code=409, detail="Email already registered")

    outcome = await repository.add_user(user)
    # Another request may have registered the email since the lookup
    if outcome.conflict:
        raise HTTPException(status_code=409, detail="Email already registered")
    if not outcome.ok or outcome.first() is None:
        raise HTTPException(status_code=500, detail="Failed to create user")

    return User(**outcome.first())
