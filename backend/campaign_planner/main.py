import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from campaign_planner.config import settings
from campaign_planner.database import init_database
from campaign_planner.routers import campaigns_router, simulation_router, analytics_router

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifespan events."""
    # Startup: make sure the campaign store exists
    init_database()
    logger.info("Campaign store ready")
    yield


app = FastAPI(
    title="Marketing Campaign Planner API",
    description="API for planning marketing campaigns and simulating their performance",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(campaigns_router)
app.include_router(simulation_router)
app.include_router(analytics_router)


@app.get("/")
async def root():
    """Health check endpoint."""
    return {
        "status": "ok",
        "message": "Marketing Campaign Planner API",
        "version": "0.1.0"
    }


@app.get("/health")
async def health():
    """Health check endpoint for monitoring."""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "campaign_planner.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=True
    )
