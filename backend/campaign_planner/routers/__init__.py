from campaign_planner.routers.campaigns import router as campaigns_router
from campaign_planner.routers.simulation import router as simulation_router
from campaign_planner.routers.analytics import router as analytics_router

__all__ = ["campaigns_router", "simulation_router", "analytics_router"]
