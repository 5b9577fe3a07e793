# database/models.py
from datetime import date
from typing import Optional
from pydantic import BaseModel, Field
from config import settings

PRICE_CONSTRAINTS = dict(ge=0, le=settings.max_price_per_night, allow_inf_nan=False)

class SearchOptions(BaseModel):
    """Filters for a property search. Unset fields impose no constraint."""
    city: Optional[str] = None
    owner_id: Optional[int] = None
    minimum_price_per_night: Optional[float] = Field(None, **PRICE_CONSTRAINTS)
    maximum_price_per_night: Optional[float] = Field(None, **PRICE_CONSTRAINTS)
    minimum_rating: Optional[float] = Field(None, allow_inf_nan=False)

class UserCreate(BaseModel):
    name: str
    email: str
    password: str

class User(BaseModel):
    id: int
    name: str
    email: str

class PropertyCreate(BaseModel):
    owner_id: int
    title: str
    description: Optional[str] = None
    thumbnail_photo_url: str
    cover_photo_url: str
    cost_per_night: float = Field(**PRICE_CONSTRAINTS)  # dollars; stored as cents
    street: str
    city: str
    province: str
    post_code: str
    country: str
    parking_spaces: int = 0
    number_of_bathrooms: int = 0
    number_of_bedrooms: int = 0

class Property(BaseModel):
    id: int
    owner_id: int
    title: str
    description: Optional[str] = None
    thumbnail_photo_url: str
    cover_photo_url: str
    cost_per_night: int  # cents
    parking_spaces: int
    number_of_bathrooms: int
    number_of_bedrooms: int
    country: str
    street: str
    city: str
    province: str
    post_code: str
    active: bool = True
    average_rating: Optional[float] = None

class Reservation(BaseModel):
    id: int
    title: str
    thumbnail_photo_url: str
    cover_photo_url: str
    number_of_bedrooms: int
    number_of_bathrooms: int
    parking_spaces: int
    cost_per_night: int  # cents
    start_date: date
    average_rating: Optional[float] = None
