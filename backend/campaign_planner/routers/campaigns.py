import logging
from typing import List, Optional
from fastapi import APIRouter, HTTPException, Query
from campaign_planner.database import CampaignNotFoundError
from campaign_planner.models.campaign import (
    Campaign,
    CampaignInput,
    CampaignStatus,
    SimulationResponse,
    StatusUpdateRequest,
)
from campaign_planner.services.campaigns import CampaignService, DataMode, is_mock_id
from campaign_planner.services.simulation import campaign_duration, performance_insights, simulate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/campaigns", tags=["campaigns"])


@router.get("", response_model=List[Campaign])
async def get_campaigns(
    mode: DataMode = Query(default=DataMode.HYBRID, description="hybrid adds demo campaigns, user-only does not"),
    status: Optional[CampaignStatus] = Query(default=None, description="Only return campaigns in this status")
):
    """
    Get all campaigns.

    In hybrid mode stored campaigns are followed by generated demo campaigns
    until the configured minimum is reached.

    Returns:
        List of campaigns, user campaigns first
    """
    try:
        service = CampaignService(mode=mode)
        if status is not None:
            return service.campaigns_by_status(status.value)
        return service.list_campaigns()

    except Exception as e:
        logger.error(f"Failed to fetch campaigns: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Failed to fetch campaigns: {str(e)}")


@router.post("", response_model=Campaign, status_code=201)
async def create_campaign(campaign_input: CampaignInput):
    """
    Create a new campaign.

    Simulated results are computed when the payload does not carry them.
    """
    if campaign_input.id:
        raise HTTPException(status_code=400, detail="New campaigns must not carry an id")

    try:
        return CampaignService().upsert_campaign(campaign_input)

    except Exception as e:
        logger.error(f"Failed to create campaign: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Failed to create campaign: {str(e)}")


@router.post("/convert", response_model=Campaign, status_code=201)
async def convert_mock_campaign(mock_campaign: Campaign):
    """
    Save a demo campaign as a new draft user campaign.

    Args:
        mock_campaign: Demo campaign as returned by the hybrid listing
    """
    if not mock_campaign.is_mock_data:
        raise HTTPException(status_code=400, detail="Only demo campaigns can be converted")

    try:
        return CampaignService().convert_mock_to_user(mock_campaign)

    except Exception as e:
        logger.error(f"Failed to convert campaign: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Failed to convert campaign: {str(e)}")


@router.get("/{campaign_id}", response_model=Campaign)
async def get_campaign(campaign_id: str):
    """Get a single stored campaign."""
    try:
        campaign = CampaignService().get_campaign(campaign_id)

        if not campaign:
            raise HTTPException(status_code=404, detail=f"Campaign {campaign_id} not found")

        return campaign

    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Failed to fetch campaign: {str(e)}")


@router.get("/{campaign_id}/simulation", response_model=SimulationResponse)
async def get_campaign_simulation(campaign_id: str):
    """
    Run a fresh simulation for a stored campaign.

    Returns:
        Simulated results, performance insights and campaign duration
    """
    try:
        campaign = CampaignService().get_campaign(campaign_id)

        if not campaign:
            raise HTTPException(status_code=404, detail=f"Campaign {campaign_id} not found")

        results = simulate(
            campaign.overall_budget,
            campaign.channels,
            campaign.goal,
            campaign.start_date,
            campaign.end_date
        )

        return SimulationResponse(
            campaign_id=campaign.id,
            results=results,
            insights=performance_insights(results, campaign.overall_budget or 0),
            duration_days=campaign_duration(campaign.start_date, campaign.end_date)
        )

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Failed to simulate campaign {campaign_id}: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Failed to simulate campaign: {str(e)}")


@router.put("/{campaign_id}", response_model=Campaign)
async def update_campaign(campaign_id: str, campaign_input: CampaignInput):
    """Replace a stored campaign. created_at is preserved."""
    if is_mock_id(campaign_id):
        raise HTTPException(status_code=403, detail="Demo campaigns cannot be edited")

    try:
        payload = campaign_input.model_copy(update={"id": campaign_id})
        return CampaignService().upsert_campaign(payload)

    except CampaignNotFoundError:
        raise HTTPException(status_code=404, detail=f"Campaign {campaign_id} not found")
    except Exception as e:
        logger.error(f"Failed to update campaign {campaign_id}: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Failed to update campaign: {str(e)}")


@router.patch("/{campaign_id}/status", response_model=Campaign)
async def update_campaign_status(campaign_id: str, request: StatusUpdateRequest):
    """Move a campaign to another status column."""
    if is_mock_id(campaign_id):
        raise HTTPException(status_code=403, detail="Demo campaigns cannot change status")

    try:
        campaign = CampaignService().update_campaign_status(campaign_id, request.status)

        if not campaign:
            raise HTTPException(status_code=404, detail=f"Campaign {campaign_id} not found")

        return campaign

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Failed to update status of {campaign_id}: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Failed to update campaign status: {str(e)}")


@router.delete("/{campaign_id}")
async def delete_campaign(campaign_id: str):
    """Delete a stored campaign. Demo campaigns cannot be deleted."""
    if is_mock_id(campaign_id):
        raise HTTPException(status_code=403, detail="Demo campaigns cannot be deleted")

    try:
        deleted = CampaignService().remove_campaign(campaign_id)

        if not deleted:
            raise HTTPException(status_code=404, detail=f"Campaign {campaign_id} not found")

        return {"success": True, "message": f"Campaign {campaign_id} deleted"}

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Failed to delete campaign {campaign_id}: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Failed to delete campaign: {str(e)}")
