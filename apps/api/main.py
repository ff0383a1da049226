import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from apps.api.routes import health, locations
from apps.core.config import settings
from apps.locations.services.location_search import create_location_search_service

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="UK Location Search API",
    description="Category, landmark, terminal and free-text search over UK places",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health.router, prefix="/api")
app.include_router(locations.router, prefix="/api", tags=["locations"])


@app.on_event("startup")
async def build_location_service():
    app.state.location_service = create_location_search_service()
    if not app.state.location_service.provider.is_configured:
        logger.warning("MAPBOX_ACCESS_TOKEN is not set; searches will fail with config_error")
    logger.info(f"startup complete (env={settings.environment})")


@app.get("/")
async def root():
    return {"message": "UK Location Search API", "version": "1.0.0"}
