import logging
from typing import Optional
from fastapi import APIRouter, HTTPException, Query
from campaign_planner.config import settings
from campaign_planner.models.analytics import AnalyticsResponse, ReferenceData
from campaign_planner.models.campaign import CampaignGoal
from campaign_planner.services.mock_data import (
    generate_analytics_data,
    generate_campaigns,
    get_channels,
    get_tags,
    get_team_members,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/analytics", tags=["analytics"])


@router.get("", response_model=AnalyticsResponse)
async def get_analytics(
    count: Optional[int] = Query(default=None, ge=0, le=100, description="Number of demo campaigns to generate")
):
    """
    Generate demo campaigns and the analytics rolled up from them.

    Args:
        count: Number of campaigns (defaults to the configured analytics count)

    Returns:
        Generated campaigns with time series, channel, device and top campaign data
    """
    count = settings.analytics_campaign_count if count is None else count

    try:
        campaigns = generate_campaigns(count)
        analytics = generate_analytics_data(
            campaigns,
            days=settings.analytics_window_days,
            top_limit=settings.top_campaigns_limit
        )
        logger.info(f"Generated analytics for {len(campaigns)} demo campaigns")

        return AnalyticsResponse(campaigns=campaigns, analytics=analytics)

    except Exception as e:
        logger.error(f"Failed to generate analytics: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Failed to generate analytics: {str(e)}")


@router.get("/reference", response_model=ReferenceData)
async def get_reference_data():
    """Team roster, tags, channels and goals used by the planner forms."""
    return ReferenceData(
        team_members=get_team_members(),
        tags=get_tags(),
        channels=get_channels(),
        goals=[goal.value for goal in CampaignGoal]
    )
