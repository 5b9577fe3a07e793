# main.py
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from config import settings
from contextlib import asynccontextmanager
import logging

from routers import properties_router, users_router, reservations_router
from middleware.logging import LoggingMiddleware
from middleware.error_handling import ErrorHandlingMiddleware
from database.connection import DatabaseConnection

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup - open the database connection shared by request handlers
    logger.info("Starting up LightBnB API...")
    app.state.db = DatabaseConnection(settings.database_url)
    await app.state.db.connect()
    yield
    # Shutdown
    logger.info("Shutting down LightBnB API...")
    await app.state.db.close()

app = FastAPI(
    title=settings.api_title,
    description=settings.api_description,
    version=settings.api_version,
    lifespan=lifespan
)

app.add_middleware(ErrorHandlingMiddleware)
app.add_middleware(LoggingMiddleware)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
    expose_headers=settings.cors_expose_headers,
    max_age=settings.cors_max_age,
)

# Include routers
app.include_router(properties_router.router, prefix="/api", tags=["properties"])
app.include_router(users_router.router, prefix="/api", tags=["users"])
app.include_router(reservations_router.router, prefix="/api", tags=["reservations"])

@app.get("/")
async def root():
    return {"message": "LightBnB API is running", "status": "healthy"}

@app.get("/health")
async def health_check():
    return {"status": "API is working"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=True,
        log_level=settings.log_level
    )
