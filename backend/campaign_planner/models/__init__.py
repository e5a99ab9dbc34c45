from campaign_planner.models.campaign import (
    Campaign,
    CampaignChannel,
    CampaignGoal,
    CampaignInput,
    CampaignStatus,
    Messaging,
    SimulatedResults,
    TargetAudience,
)
from campaign_planner.models.analytics import AnalyticsData, CampaignMetrics, SyntheticCampaign

__all__ = [
    "Campaign",
    "CampaignChannel",
    "CampaignGoal",
    "CampaignInput",
    "CampaignStatus",
    "Messaging",
    "SimulatedResults",
    "TargetAudience",
    "AnalyticsData",
    "CampaignMetrics",
    "SyntheticCampaign",
]
