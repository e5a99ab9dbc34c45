"""
Campaign listing and mutations on top of the campaign store.

In hybrid mode user campaigns are topped up with generated demo campaigns so
the dashboard is never empty. Demo campaigns are read-only until converted.
"""
import logging
from enum import Enum
from typing import List, Optional

from campaign_planner.config import settings
from campaign_planner.database import CampaignDatabase
from campaign_planner.models.analytics import SyntheticCampaign
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
from campaign_planner.services.mock_data import generate_campaigns
from campaign_planner.services.simulation import simulate

logger = logging.getLogger(__name__)

MOCK_ID_PREFIX = "mock_"
DEMO_SUFFIX = " (Demo)"

DEMO_PAIN_POINTS = "Looking for better productivity and collaboration tools"
DEMO_VALUE_PROPS = ["Increase productivity", "Better collaboration", "Streamlined workflows"]
DEMO_CONTENT_IDEAS = "Blog posts, social media content, video tutorials"


class DataMode(str, Enum):
    HYBRID = "hybrid"
    USER_ONLY = "user-only"


def is_mock_id(campaign_id: str) -> bool:
    return campaign_id.startswith(MOCK_ID_PREFIX)


def to_planner_campaign(synthetic: SyntheticCampaign, index: int) -> Campaign:
    """Convert a generated demo campaign into the planner campaign shape."""
    audience = synthetic.target_audience
    metrics = synthetic.metrics
    return Campaign(
        id=f"{MOCK_ID_PREFIX}{index + 1}",
        name=f"{synthetic.title}{DEMO_SUFFIX}",
        goal=CampaignGoal.BRAND_AWARENESS.value,
        start_date=synthetic.start_date,
        end_date=synthetic.end_date,
        overall_budget=synthetic.budget,
        status=CampaignStatus.ACTIVE,
        target_audience=TargetAudience(
            persona_name="",
            demographics=f"{audience.age_range}, {audience.gender}, {', '.join(audience.location)}",
            interests_and_behaviors=", ".join(audience.interests),
            pain_points=DEMO_PAIN_POINTS,
        ),
        channels=[
            CampaignChannel(
                id="".join(synthetic.channel.lower().split()),
                name=synthetic.channel,
                budget=synthetic.budget,
            )
        ],
        messaging=Messaging(
            core_message=synthetic.description,
            value_props=list(DEMO_VALUE_PROPS),
            content_ideas=DEMO_CONTENT_IDEAS,
        ),
        simulated_results=SimulatedResults(
            reach=metrics.impressions,
            impressions=metrics.impressions,
            clicks=metrics.clicks,
            leads=metrics.conversions,
            conversion_rate=metrics.conversion_rate,
            cpc=metrics.cost_per_click,
            cpl=metrics.cost_per_conversion,
        ),
        is_mock_data=True,
        created_at=synthetic.created_at,
        updated_at=synthetic.updated_at,
    )


class CampaignService:
    """Hybrid user/demo campaign access."""

    def __init__(self, mode: DataMode = DataMode.HYBRID, mock_count: Optional[int] = None, rng=None):
        self.mode = DataMode(mode)
        self.mock_count = settings.mock_campaign_count if mock_count is None else mock_count
        self.rng = rng

    def list_campaigns(self) -> List[Campaign]:
        """User campaigns first, followed by demo campaigns in hybrid mode."""
        user_campaigns = CampaignDatabase.list_campaigns()
        if self.mode != DataMode.HYBRID:
            return user_campaigns

        missing = max(0, self.mock_count - len(user_campaigns))
        mock_campaigns = [
            to_planner_campaign(synthetic, index)
            for index, synthetic in enumerate(generate_campaigns(missing, self.rng))
        ]
        return user_campaigns + mock_campaigns

    def get_campaign(self, campaign_id: str) -> Optional[Campaign]:
        return CampaignDatabase.get_campaign(campaign_id)

    def campaigns_by_status(self, status: str) -> List[Campaign]:
        return [c for c in self.list_campaigns() if c.status == status]

    def user_campaigns(self) -> List[Campaign]:
        return [c for c in self.list_campaigns() if not c.is_mock_data]

    def mock_campaigns(self) -> List[Campaign]:
        return [c for c in self.list_campaigns() if c.is_mock_data]

    def attach_simulation(self, campaign_input: CampaignInput) -> CampaignInput:
        """Fill in simulated results for campaigns saved without them."""
        if campaign_input.simulated_results is not None:
            return campaign_input

        results = simulate(
            campaign_input.overall_budget,
            campaign_input.channels,
            campaign_input.goal,
            campaign_input.start_date,
            campaign_input.end_date,
            rng=self.rng,
        )
        return campaign_input.model_copy(update={"simulated_results": results})

    def upsert_campaign(self, campaign_input: CampaignInput) -> Campaign:
        """Create or update a user campaign. Demo flags are never stored."""
        campaign_input = campaign_input.model_copy(update={"is_mock_data": False})
        return CampaignDatabase.upsert_campaign(self.attach_simulation(campaign_input))

    def remove_campaign(self, campaign_id: str) -> bool:
        if is_mock_id(campaign_id):
            logger.warning(f"Cannot delete mock campaign {campaign_id}")
            return False
        return CampaignDatabase.delete_campaign(campaign_id)

    def update_campaign_status(self, campaign_id: str, status: CampaignStatus) -> Optional[Campaign]:
        """Move a user campaign to a new status (kanban drag and drop)."""
        if is_mock_id(campaign_id):
            logger.warning(f"Cannot update status of mock campaign {campaign_id}")
            return None

        campaign = CampaignDatabase.get_campaign(campaign_id)
        if campaign is None or campaign.is_mock_data:
            return None

        updated = CampaignInput(**campaign.model_dump(exclude={"created_at", "updated_at", "status"}), status=status)
        return CampaignDatabase.upsert_campaign(updated)

    def convert_mock_to_user(self, mock_campaign: Campaign) -> Optional[Campaign]:
        """Store a demo campaign as a new draft user campaign."""
        if not mock_campaign.is_mock_data:
            return None

        data = mock_campaign.model_dump(exclude={"id", "created_at", "updated_at", "is_mock_data", "status", "name"})
        user_campaign = CampaignInput(
            name=mock_campaign.name.replace(DEMO_SUFFIX, ""),
            status=CampaignStatus.DRAFT,
            **data
        )
        return self.upsert_campaign(user_campaign)
