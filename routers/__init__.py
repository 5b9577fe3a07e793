"""Routers package for LightBnB API endpoints."""

from . import (
    properties_router,
    users_router,
    reservations_router
)

__all__ = [
    "properties_router",
    "users_router",
    "reservations_router"
]
