from datetime import date as DateType, datetime
from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, Field, field_validator, model_validator


class CampaignStatus(str, Enum):
    DRAFT = "draft"
    ACTIVE = "active"
    PAUSED = "paused"
    COMPLETED = "completed"


class CampaignGoal(str, Enum):
    BRAND_AWARENESS = "Brand Awareness"
    LEAD_GENERATION = "Lead Generation"
    SALES_CONVERSION = "Sales Conversion"
    CUSTOMER_RETENTION = "Customer Retention"
    PRODUCT_LAUNCH = "Product Launch"


class CampaignChannel(BaseModel):
    id: str = Field(..., description="Channel identifier (e.g., 'socialMedia', 'email')")
    name: str = Field(..., description="Display name (e.g., 'Social Media')")
    budget: float = Field(0, ge=0, description="Budget allocated to this channel")


class TargetAudience(BaseModel):
    persona_name: Optional[str] = Field(None, description="Optional persona label")
    demographics: str = Field("", description="Age, gender, location of the audience")
    interests_and_behaviors: str = Field("", description="Interests and behaviors")
    pain_points: str = Field("", description="Problems the campaign addresses")


class Messaging(BaseModel):
    core_message: str = Field("", description="Core campaign message")
    value_props: List[str] = Field(default_factory=list, description="Value propositions")
    content_ideas: str = Field("", description="Free-form content ideas")

    @field_validator("value_props")
    @classmethod
    def drop_blank_value_props(cls, value_props: List[str]) -> List[str]:
        return [prop.strip() for prop in value_props if prop.strip()]


class SimulatedResults(BaseModel):
    """
    Projected performance for a campaign.

    leads, cpc and cpl are None when they do not apply (non lead-generation
    goal, or a zero divisor). None is not the same as a zero cost.
    """
    reach: int = Field(0, ge=0, description="Estimated unique people reached")
    impressions: int = Field(0, ge=0, description="Estimated ad views")
    clicks: int = Field(0, ge=0, description="Estimated clicks")
    leads: Optional[int] = Field(None, ge=0, description="Estimated leads (Lead Generation only)")
    conversion_rate: Optional[float] = Field(None, description="Conversion rate in percent")
    cpc: Optional[float] = Field(None, description="Cost per click")
    cpl: Optional[float] = Field(None, description="Cost per lead")


class CampaignInput(BaseModel):
    """Campaign payload for create/update. id is omitted for new campaigns."""
    id: Optional[str] = Field(None, description="Campaign identifier, absent for new campaigns")
    name: str = Field(..., min_length=1, description="Campaign name")
    goal: str = Field(..., min_length=1, description="Campaign goal (e.g., 'Lead Generation')")
    start_date: DateType = Field(..., description="Campaign start date")
    end_date: DateType = Field(..., description="Campaign end date")
    overall_budget: Optional[float] = Field(None, ge=0, description="Total campaign budget")
    status: CampaignStatus = Field(CampaignStatus.DRAFT, validate_default=True, description="Lifecycle status")
    target_audience: TargetAudience = Field(default_factory=TargetAudience)
    channels: List[CampaignChannel] = Field(default_factory=list, description="Selected channels")
    messaging: Messaging = Field(default_factory=Messaging)
    simulated_results: Optional[SimulatedResults] = None
    is_mock_data: bool = Field(False, description="True for generated demo campaigns")

    class Config:
        use_enum_values = True

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, name: str) -> str:
        if not name.strip():
            raise ValueError("Campaign name is required")
        return name.strip()

    @model_validator(mode="after")
    def end_after_start(self):
        if self.end_date <= self.start_date:
            raise ValueError("End date must be after start date")
        return self


class Campaign(CampaignInput):
    id: str = Field(..., description="Unique campaign identifier")
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: datetime = Field(..., description="Last update timestamp")


class StatusUpdateRequest(BaseModel):
    status: CampaignStatus


class SimulationRequest(BaseModel):
    overall_budget: Optional[float] = Field(None, ge=0, description="Total campaign budget")
    channels: List[CampaignChannel] = Field(default_factory=list)
    goal: str = Field(..., description="Campaign goal; unknown goals use default coefficients")
    start_date: DateType
    end_date: DateType


class SimulationResponse(BaseModel):
    campaign_id: Optional[str] = None
    results: SimulatedResults
    insights: List[str] = Field(default_factory=list)
    duration_days: int = Field(..., description="Campaign length in days")
