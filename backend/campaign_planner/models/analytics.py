"""
Pydantic models for generated demo campaigns and dashboard analytics.
"""
from datetime import date as DateType, datetime
from typing import List, Optional
from pydantic import BaseModel, Field


class TeamMember(BaseModel):
    id: str
    name: str
    role: str
    avatar: str
    email: str


class CampaignMetrics(BaseModel):
    impressions: int = 0
    clicks: int = 0
    conversions: int = 0
    revenue: int = 0
    ctr: float = Field(0, description="Click-through rate in percent")
    conversion_rate: float = Field(0, description="Conversion rate in percent")
    cost_per_click: float = 0
    cost_per_conversion: float = 0


class AudienceProfile(BaseModel):
    age_range: str
    gender: str
    location: List[str] = Field(default_factory=list)
    interests: List[str] = Field(default_factory=list)


class SyntheticCampaign(BaseModel):
    """Generated demo campaign. Built once by the generator and never mutated."""
    id: str
    title: str
    description: str
    budget: int
    start_date: DateType
    end_date: DateType
    status: str
    channel: str
    progress: float = Field(..., ge=0, le=100)
    team: List[str] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)
    metrics: CampaignMetrics
    target_audience: AudienceProfile
    created_at: datetime
    updated_at: datetime


class TimeSeriesPoint(BaseModel):
    date: DateType
    impressions: int = 0
    clicks: int = 0
    conversions: int = 0
    revenue: int = 0


class ChannelPerformance(BaseModel):
    channel: str
    impressions: int = 0
    clicks: int = 0
    conversions: int = 0
    revenue: int = 0
    ctr: float = 0


class DeviceShare(BaseModel):
    device: str
    percentage: int
    users: int


class TopCampaign(BaseModel):
    id: str
    name: str
    revenue: int
    roi: Optional[float] = Field(None, description="Return on investment in percent, None for a zero budget")


class AnalyticsData(BaseModel):
    time_series_data: List[TimeSeriesPoint] = Field(default_factory=list)
    channel_performance: List[ChannelPerformance] = Field(default_factory=list)
    device_breakdown: List[DeviceShare] = Field(default_factory=list)
    top_campaigns: List[TopCampaign] = Field(default_factory=list)


class AnalyticsResponse(BaseModel):
    campaigns: List[SyntheticCampaign]
    analytics: AnalyticsData


class ReferenceData(BaseModel):
    team_members: List[TeamMember]
    tags: List[str]
    channels: List[str]
    goals: List[str]
