# routers/dependencies.py
from fastapi import Request
from database.repository import LightBnbRepository

def get_repository(request: Request) -> LightBnbRepository:
    """Repository bound to the connection opened in the app lifespan."""
    return LightBnbRepository(request.app.state.db)
