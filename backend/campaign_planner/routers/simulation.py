from fastapi import APIRouter, HTTPException
from campaign_planner.models.campaign import SimulationRequest, SimulationResponse
from campaign_planner.services.simulation import campaign_duration, performance_insights, simulate

router = APIRouter(prefix="/api/simulation", tags=["simulation"])


@router.post("", response_model=SimulationResponse)
async def run_simulation(request: SimulationRequest):
    """
    Simulate campaign performance for ad-hoc parameters.

    Args:
        request: Budget, channels, goal and date range

    Returns:
        SimulationResponse: Projected metrics, insights and duration in days
    """
    try:
        results = simulate(
            request.overall_budget,
            request.channels,
            request.goal,
            request.start_date,
            request.end_date
        )

        return SimulationResponse(
            results=results,
            insights=performance_insights(results, request.overall_budget or 0),
            duration_days=campaign_duration(request.start_date, request.end_date)
        )

    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Failed to run simulation: {str(e)}")
