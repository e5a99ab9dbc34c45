"""
Campaign performance simulation.

Projects reach, impressions, clicks and leads from budget, channels and goal
using per-goal benchmark coefficients plus random jitter. Results are only
statistically stable: every call draws fresh values from the random source.
"""
import logging
import math
import random
from datetime import date, datetime, timezone
from typing import List, Optional, Sequence, Union

from campaign_planner.models.campaign import CampaignChannel, CampaignGoal, SimulatedResults

logger = logging.getLogger(__name__)

DateLike = Union[date, datetime, str]

# Reach per budget unit
REACH_MULTIPLIERS = {
    CampaignGoal.BRAND_AWARENESS.value: 15,
    CampaignGoal.LEAD_GENERATION.value: 8,
    CampaignGoal.SALES_CONVERSION.value: 6,
    CampaignGoal.CUSTOMER_RETENTION.value: 5,
    CampaignGoal.PRODUCT_LAUNCH.value: 12,
}
DEFAULT_REACH_MULTIPLIER = 10

CTR_BASES = {
    CampaignGoal.BRAND_AWARENESS.value: 0.015,
    CampaignGoal.LEAD_GENERATION.value: 0.025,
    CampaignGoal.SALES_CONVERSION.value: 0.035,
    CampaignGoal.CUSTOMER_RETENTION.value: 0.045,
    CampaignGoal.PRODUCT_LAUNCH.value: 0.02,
}
DEFAULT_CTR_BASE = 0.02

CONVERSION_RATE_BASES = {
    CampaignGoal.BRAND_AWARENESS.value: 0.01,
    CampaignGoal.LEAD_GENERATION.value: 0.08,
    CampaignGoal.SALES_CONVERSION.value: 0.12,
    CampaignGoal.CUSTOMER_RETENTION.value: 0.15,
    CampaignGoal.PRODUCT_LAUNCH.value: 0.05,
}
DEFAULT_CONVERSION_RATE_BASE = 0.05

CHANNEL_REACH_BONUS = 1000
MAX_REACH_JITTER = 500
IMPRESSION_MULTIPLIER_RANGE = (1.5, 3.0)
CTR_JITTER = 0.005
CONVERSION_RATE_JITTER = 0.01
MIN_CTR = 0.005
MIN_CONVERSION_RATE = 0.01

SECONDS_PER_DAY = 24 * 60 * 60

INSIGHT_HIGH_CTR = "🎯 Excellent click-through rate! Your targeting is very effective."
INSIGHT_LOW_CTR = "💡 Consider refining your ad copy or targeting to improve engagement."
INSIGHT_LOW_CPC = "💰 Great cost efficiency! Your cost per click is very competitive."
INSIGHT_HIGH_CPC = "⚠️ High cost per click. Consider optimizing your targeting or bidding strategy."
INSIGHT_HIGH_CONVERSION = "🚀 Outstanding conversion rate! Your landing page and offer are highly compelling."
INSIGHT_LOW_CONVERSION = "🔧 Consider optimizing your landing page or refining your value proposition."
INSIGHT_BUDGET_EFFICIENCY = "📈 Excellent budget efficiency! You're reaching a large audience cost-effectively."


def get_reach_multiplier(goal: str) -> float:
    return REACH_MULTIPLIERS.get(goal, DEFAULT_REACH_MULTIPLIER)


def get_ctr_base(goal: str) -> float:
    return CTR_BASES.get(goal, DEFAULT_CTR_BASE)


def get_conversion_rate_base(goal: str) -> float:
    return CONVERSION_RATE_BASES.get(goal, DEFAULT_CONVERSION_RATE_BASE)


def simulate(
    budget: Optional[float],
    channels: Sequence[CampaignChannel],
    goal: str,
    start_date: Optional[DateLike] = None,
    end_date: Optional[DateLike] = None,
    rng=None,
) -> SimulatedResults:
    """
    Generate simulated results for a campaign.

    Args:
        budget: Overall campaign budget (None is treated as 0)
        channels: Selected marketing channels; only their count is used
        goal: Campaign goal; unrecognized goals use the default coefficients
        start_date: Campaign start, accepted for signature parity with the campaign
        end_date: Campaign end, see campaign_duration() for the length
        rng: Random source with a ``uniform`` method (defaults to the random module)

    Returns:
        SimulatedResults: Projected metrics. leads is only set for Lead Generation,
        cpc/cpl are None when their divisor is zero.
    """
    rng = rng or random
    budget = budget or 0
    channel_count = len(channels)

    reach = round(
        budget * get_reach_multiplier(goal)
        + channel_count * CHANNEL_REACH_BONUS
        + rng.uniform(0, MAX_REACH_JITTER)
    )

    # Impressions: 1.5-3x reach depending on frequency
    impressions = round(reach * rng.uniform(*IMPRESSION_MULTIPLIER_RANGE))

    ctr = max(MIN_CTR, get_ctr_base(goal) + rng.uniform(-CTR_JITTER, CTR_JITTER))
    clicks = round(impressions * ctr)

    conversion_rate = max(
        MIN_CONVERSION_RATE,
        get_conversion_rate_base(goal) + rng.uniform(-CONVERSION_RATE_JITTER, CONVERSION_RATE_JITTER),
    )

    leads = None
    if goal == CampaignGoal.LEAD_GENERATION.value:
        leads = round(clicks * conversion_rate)

    cpc = round(budget / clicks, 2) if clicks > 0 else None
    cpl = round(budget / leads, 2) if leads else None

    logger.debug(
        f"Simulated goal={goal!r} budget={budget} channels={channel_count}: "
        f"reach={reach} impressions={impressions} clicks={clicks}"
    )

    return SimulatedResults(
        reach=reach,
        impressions=impressions,
        clicks=clicks,
        leads=leads,
        conversion_rate=round(conversion_rate * 100, 2),
        cpc=cpc,
        cpl=cpl,
    )


def _to_datetime(value: DateLike) -> datetime:
    # Naive UTC so dates and offset-aware timestamps can be subtracted
    if isinstance(value, str):
        if value.endswith(("Z", "z")):
            value = value[:-1] + "+00:00"
        value = datetime.fromisoformat(value)
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc).replace(tzinfo=None)
        return value
    return datetime(value.year, value.month, value.day)


def campaign_duration(start_date: DateLike, end_date: DateLike) -> int:
    """Campaign length in whole days, rounded up. Argument order does not matter."""
    start = _to_datetime(start_date)
    end = _to_datetime(end_date)
    diff_seconds = abs((end - start).total_seconds())
    return math.ceil(diff_seconds / SECONDS_PER_DAY)


def performance_insights(results: Optional[SimulatedResults], budget: Optional[float]) -> List[str]:
    """
    Build human-readable insights from simulated results.

    Each rule is evaluated independently. A rule whose input is missing
    (no impressions, no cpc, no conversion rate, no budget) is skipped.
    """
    insights: List[str] = []

    if not results:
        return insights

    if results.impressions > 0:
        ctr = results.clicks / results.impressions
        if ctr > 0.03:
            insights.append(INSIGHT_HIGH_CTR)
        elif ctr < 0.015:
            insights.append(INSIGHT_LOW_CTR)

    if results.cpc is not None:
        if results.cpc < 2:
            insights.append(INSIGHT_LOW_CPC)
        elif results.cpc > 5:
            insights.append(INSIGHT_HIGH_CPC)

    if results.conversion_rate is not None:
        if results.conversion_rate > 10:
            insights.append(INSIGHT_HIGH_CONVERSION)
        elif results.conversion_rate < 3:
            insights.append(INSIGHT_LOW_CONVERSION)

    if budget:
        reach_per_dollar = results.reach / budget
        if reach_per_dollar > 10:
            insights.append(INSIGHT_BUDGET_EFFICIENCY)

    return insights
