"""
Synthetic campaign generator for demo content.

Builds randomized but internally consistent campaigns and rolls a set of them
up into the time-series and channel analytics the dashboard charts.
"""
import logging
import math
import random
import string
import time
from datetime import date, datetime, timedelta
from typing import Dict, List, Optional, Sequence, Tuple

from campaign_planner.models.analytics import (
    AnalyticsData,
    AudienceProfile,
    CampaignMetrics,
    ChannelPerformance,
    DeviceShare,
    SyntheticCampaign,
    TeamMember,
    TimeSeriesPoint,
    TopCampaign,
)
from campaign_planner.models.campaign import CampaignStatus

logger = logging.getLogger(__name__)

CAMPAIGN_TITLES = [
    "Collavo Beta Launch",
    "Productivity Influencer Campaign",
    "Team Collaboration Features",
    "Free Trial Conversion Drive",
    "Product Hunt Launch Day",
    "LinkedIn Professional Outreach",
    "Content Creator Partnership",
    "Enterprise Sales Campaign",
]

CAMPAIGN_DESCRIPTIONS = [
    "Launch Collavo beta to early adopters and gather feedback",
    "Partner with productivity influencers to showcase Collavo features",
    "Highlight team collaboration tools for remote work",
    "Convert free trial users to paid subscriptions",
    "Coordinate Product Hunt launch for maximum visibility",
    "Target professionals on LinkedIn with productivity content",
    "Collaborate with content creators for authentic reviews",
    "Drive enterprise adoption with B2B sales campaigns",
]

CHANNELS = [
    "LinkedIn Ads",
    "Content Marketing",
    "Influencer Marketing",
    "Product Hunt",
    "Twitter/X Marketing",
    "YouTube Ads",
    "Email Marketing",
    "SEO/Organic",
    "Google Ads",
    "Podcast Sponsorship",
]

# Only the first N channels are charted in channel performance
TRACKED_CHANNEL_COUNT = 8

TEAM_MEMBERS = [
    TeamMember(id="1", name="Sarah Chen", role="Marketing Lead", avatar="👩‍💼", email="sarah@collavo.com"),
    TeamMember(id="2", name="Alex Rodriguez", role="Growth Marketer", avatar="👨‍📈", email="alex@collavo.com"),
    TeamMember(id="3", name="Maya Patel", role="Content Creator", avatar="👩‍💻", email="maya@collavo.com"),
    TeamMember(id="4", name="Jordan Kim", role="Product Marketer", avatar="👨‍🚀", email="jordan@collavo.com"),
    TeamMember(id="5", name="Emma Thompson", role="Community Manager", avatar="👩‍🤝‍👩", email="emma@collavo.com"),
    TeamMember(id="6", name="David Park", role="Performance Analyst", avatar="👨‍📊", email="david@collavo.com"),
]

TAGS = [
    "beta-launch", "productivity", "collaboration", "free-trial", "conversion",
    "influencer", "content-marketing", "product-hunt", "enterprise", "b2b",
    "remote-work", "team-tools", "saas", "startup", "growth-hacking",
]

LOCATIONS = [
    "United States", "Canada", "United Kingdom", "Germany", "France",
    "Australia", "Japan", "South Korea", "Brazil", "Mexico", "India",
    "Singapore", "Netherlands", "Sweden", "Spain", "Italy", "Switzerland",
]

INTERESTS = [
    "Productivity Tools", "Remote Work", "Team Management", "Project Management",
    "Startup Culture", "SaaS Products", "Business Efficiency", "Collaboration",
    "Time Management", "Work-Life Balance", "Digital Nomad", "Entrepreneurship",
]

AGE_RANGES = ["18-24", "25-34", "35-44", "45-54", "55-64", "65+"]
GENDERS = ["All", "Male", "Female", "Non-binary"]

STATUSES = [status.value for status in CampaignStatus]

# Share of a full run's metrics a campaign has accumulated in each status
STATUS_MULTIPLIERS = {
    CampaignStatus.COMPLETED.value: 1.0,
    CampaignStatus.ACTIVE.value: 0.7,
    CampaignStatus.PAUSED.value: 0.3,
    CampaignStatus.DRAFT.value: 0.1,
}
DEFAULT_STATUS_MULTIPLIER = 0.1

PROGRESS_RANGES: Dict[str, Tuple[float, float]] = {
    CampaignStatus.COMPLETED.value: (100, 100),
    CampaignStatus.ACTIVE.value: (30, 90),
    CampaignStatus.PAUSED.value: (20, 60),
}
DEFAULT_PROGRESS_RANGE = (0, 30)

BUDGET_RANGE = (500, 10000)
START_WINDOW_DAYS = 60
DURATION_RANGE_DAYS = (14, 60)
MAX_CREATED_BEFORE_START_DAYS = 7

IMPRESSIONS_PER_DOLLAR = (10, 30)
CTR_RANGE = (0.01, 0.06)
CONVERSION_RATE_RANGE = (0.02, 0.17)
ORDER_VALUE_RANGE = (50, 250)
DAILY_JITTER_RANGE = (0.5, 1.5)

DEVICE_BREAKDOWN = [
    DeviceShare(device="Desktop", percentage=45, users=12500),
    DeviceShare(device="Mobile", percentage=40, users=11100),
    DeviceShare(device="Tablet", percentage=15, users=4200),
]

SUMMED_METRICS = ("impressions", "clicks", "conversions", "revenue")


def _random_suffix(rng, length: int = 9) -> str:
    alphabet = string.ascii_lowercase + string.digits
    return "".join(rng.choice(alphabet) for _ in range(length))


def derive_metrics(budget: float, status: str, rng=None) -> CampaignMetrics:
    """
    Generate metrics for a campaign with the given budget and status.

    Counts are scaled down by the status multiplier to model a partially
    executed campaign. Rates are reported in percent.
    """
    rng = rng or random
    base_impressions = math.floor(budget * rng.uniform(*IMPRESSIONS_PER_DOLLAR))
    ctr = rng.uniform(*CTR_RANGE)
    clicks = math.floor(base_impressions * ctr)
    conversion_rate = rng.uniform(*CONVERSION_RATE_RANGE)
    conversions = math.floor(clicks * conversion_rate)
    revenue = conversions * rng.uniform(*ORDER_VALUE_RANGE)

    multiplier = STATUS_MULTIPLIERS.get(status, DEFAULT_STATUS_MULTIPLIER)
    scaled_clicks = clicks * multiplier
    scaled_conversions = conversions * multiplier

    # Cost ratios use the unrounded scaled counts
    return CampaignMetrics(
        impressions=math.floor(base_impressions * multiplier),
        clicks=math.floor(scaled_clicks),
        conversions=math.floor(scaled_conversions),
        revenue=math.floor(revenue * multiplier),
        ctr=round(ctr * 100, 2),
        conversion_rate=round(conversion_rate * 100, 2),
        cost_per_click=round(budget / max(scaled_clicks, 1), 2),
        cost_per_conversion=round(budget / max(scaled_conversions, 1), 2),
    )


def generate_campaign(campaign_id: Optional[str] = None, rng=None, now: Optional[datetime] = None) -> SyntheticCampaign:
    """
    Generate one synthetic campaign.

    Args:
        campaign_id: Identifier to use; a unique one is generated when omitted
        rng: Random source (defaults to the random module)
        now: Reference time for the date window (defaults to the current time)

    Returns:
        SyntheticCampaign: Campaign with metrics consistent with its budget and status
    """
    rng = rng or random
    now = now or datetime.now()

    start = now - timedelta(days=rng.uniform(0, START_WINDOW_DAYS))
    end = start + timedelta(days=rng.uniform(*DURATION_RANGE_DAYS))
    status = rng.choice(STATUSES)
    budget = math.floor(rng.uniform(*BUDGET_RANGE))

    low, high = PROGRESS_RANGES.get(status, DEFAULT_PROGRESS_RANGE)
    progress = rng.uniform(low, high)

    team = rng.sample(TEAM_MEMBERS, rng.randint(1, 3))
    tags = rng.sample(TAGS, rng.randint(1, 3))

    if not campaign_id:
        campaign_id = f"campaign_{int(time.time() * 1000)}_{_random_suffix(rng)}"

    return SyntheticCampaign(
        id=campaign_id,
        title=rng.choice(CAMPAIGN_TITLES),
        description=rng.choice(CAMPAIGN_DESCRIPTIONS),
        budget=budget,
        start_date=start.date(),
        end_date=end.date(),
        status=status,
        channel=rng.choice(CHANNELS),
        progress=progress,
        team=[member.name for member in team],
        tags=tags,
        metrics=derive_metrics(budget, status, rng),
        target_audience=AudienceProfile(
            age_range=rng.choice(AGE_RANGES),
            gender=rng.choice(GENDERS),
            location=rng.sample(LOCATIONS, rng.randint(1, 3)),
            interests=rng.sample(INTERESTS, rng.randint(2, 5)),
        ),
        created_at=start - timedelta(days=rng.uniform(0, MAX_CREATED_BEFORE_START_DAYS)),
        updated_at=now,
    )


def generate_campaigns(count: int, rng=None) -> List[SyntheticCampaign]:
    """Generate ``count`` campaigns with ids campaign_1..campaign_N."""
    return [generate_campaign(f"campaign_{i + 1}", rng) for i in range(count)]


def _build_time_series(campaigns: Sequence[SyntheticCampaign], rng, today: date, days: int) -> List[TimeSeriesPoint]:
    # Spread each campaign's totals evenly over the window with per-day noise.
    # This is an illustration, not a historical reconstruction.
    if days <= 0:
        return []
    daily_fraction = 1 / days
    points = []
    for offset in range(days):
        day = today - timedelta(days=days - 1 - offset)
        totals = dict.fromkeys(SUMMED_METRICS, 0)
        for campaign in campaigns:
            for metric in SUMMED_METRICS:
                value = getattr(campaign.metrics, metric)
                totals[metric] += math.floor(value * daily_fraction * rng.uniform(*DAILY_JITTER_RANGE))
        points.append(TimeSeriesPoint(date=day, **totals))
    return points


def _build_channel_performance(campaigns: Sequence[SyntheticCampaign]) -> List[ChannelPerformance]:
    performance = []
    for channel in CHANNELS[:TRACKED_CHANNEL_COUNT]:
        totals = dict.fromkeys(SUMMED_METRICS, 0)
        for campaign in campaigns:
            if campaign.channel != channel:
                continue
            for metric in SUMMED_METRICS:
                totals[metric] += getattr(campaign.metrics, metric)

        # ctr falls back to 0 here while cpc/cpl fall back to None in the simulation
        ctr = round(totals["clicks"] / totals["impressions"] * 100, 2) if totals["impressions"] > 0 else 0
        performance.append(ChannelPerformance(channel=channel, ctr=ctr, **totals))
    return performance


def _roi(revenue: float, budget: float) -> Optional[float]:
    if not budget:
        return None
    return round((revenue / budget - 1) * 100, 1)


def _build_top_campaigns(campaigns: Sequence[SyntheticCampaign], limit: int) -> List[TopCampaign]:
    ranked = sorted(campaigns, key=lambda c: c.metrics.revenue, reverse=True)[:limit]
    return [
        TopCampaign(
            id=campaign.id,
            name=campaign.title,
            revenue=campaign.metrics.revenue,
            roi=_roi(campaign.metrics.revenue, campaign.budget),
        )
        for campaign in ranked
    ]


def generate_analytics_data(
    campaigns: Sequence[SyntheticCampaign],
    rng=None,
    today: Optional[date] = None,
    days: int = 30,
    top_limit: int = 5,
) -> AnalyticsData:
    """
    Aggregate campaigns into dashboard analytics.

    Args:
        campaigns: Campaigns to aggregate; the sequence is not modified
        rng: Random source for the daily noise (defaults to the random module)
        today: Last day of the time-series window (defaults to today)
        days: Length of the trailing time-series window; no points when not positive
        top_limit: Number of campaigns in the revenue ranking

    Returns:
        AnalyticsData: Zero-valued aggregates when campaigns is empty
    """
    rng = rng or random
    today = today or date.today()

    logger.debug(f"Aggregating analytics for {len(campaigns)} campaigns over {days} days")

    return AnalyticsData(
        time_series_data=_build_time_series(campaigns, rng, today, days),
        channel_performance=_build_channel_performance(campaigns),
        device_breakdown=[share.model_copy() for share in DEVICE_BREAKDOWN],
        top_campaigns=_build_top_campaigns(campaigns, top_limit),
    )


def get_team_members() -> List[TeamMember]:
    return list(TEAM_MEMBERS)


def get_tags() -> List[str]:
    return list(TAGS)


def get_channels() -> List[str]:
    return list(CHANNELS)
