"""
Unit tests for the campaign performance simulation.
"""
import pytest
import random
from datetime import date, datetime
from campaign_planner.models.campaign import CampaignChannel, SimulatedResults
from campaign_planner.services.simulation import (
    simulate,
    campaign_duration,
    performance_insights,
    get_reach_multiplier,
    get_ctr_base,
    get_conversion_rate_base,
    INSIGHT_HIGH_CTR,
    INSIGHT_LOW_CTR,
    INSIGHT_LOW_CPC,
    INSIGHT_HIGH_CPC,
    INSIGHT_HIGH_CONVERSION,
    INSIGHT_LOW_CONVERSION,
    INSIGHT_BUDGET_EFFICIENCY,
)

GOALS = [
    "Brand Awareness",
    "Lead Generation",
    "Sales Conversion",
    "Customer Retention",
    "Product Launch",
    "Something Else",
]


def make_channels(count):
    return [CampaignChannel(id=f"ch{i}", name=f"Channel {i}", budget=100) for i in range(count)]


@pytest.mark.unit
class TestGoalCoefficients:
    """Test per-goal coefficient lookups."""

    @pytest.mark.parametrize("goal,reach,ctr,conversion", [
        ("Brand Awareness", 15, 0.015, 0.01),
        ("Lead Generation", 8, 0.025, 0.08),
        ("Sales Conversion", 6, 0.035, 0.12),
        ("Customer Retention", 5, 0.045, 0.15),
        ("Product Launch", 12, 0.02, 0.05),
    ])
    def test_known_goals(self, goal, reach, ctr, conversion):
        """Test coefficient tables for every known goal."""
        assert get_reach_multiplier(goal) == reach
        assert get_ctr_base(goal) == ctr
        assert get_conversion_rate_base(goal) == conversion

    def test_unknown_goal_uses_defaults(self):
        """Test that unrecognized goals fall back to defaults."""
        assert get_reach_multiplier("Viral Growth") == 10
        assert get_ctr_base("Viral Growth") == 0.02
        assert get_conversion_rate_base("") == 0.05


@pytest.mark.unit
class TestSimulate:
    """Test simulate function."""

    def test_sales_conversion_low_jitter(self, fixed_rng):
        """Test exact results with every draw at the low end of its range."""
        results = simulate(1000, make_channels(1), "Sales Conversion", "2024-01-01", "2024-01-31", rng=fixed_rng(0))

        assert results.reach == 7000
        assert results.impressions == 10500
        assert results.clicks == 315
        assert results.leads is None
        assert results.conversion_rate == 11.0
        assert results.cpc == 3.17
        assert results.cpl is None

    def test_lead_generation_low_jitter(self, fixed_rng):
        """Test leads and cost per lead for Lead Generation."""
        results = simulate(1000, make_channels(1), "Lead Generation", None, None, rng=fixed_rng(0))

        assert results.reach == 9000
        assert results.impressions == 13500
        assert results.clicks == 270
        assert results.leads == 19
        assert results.conversion_rate == 7.0
        assert results.cpc == 3.7
        assert results.cpl == 52.63

    def test_unknown_goal_uses_default_coefficients(self, fixed_rng):
        """Test simulation with an unrecognized goal."""
        results = simulate(1000, [], "Viral Growth", None, None, rng=fixed_rng(0))

        assert results.reach == 10000
        assert results.impressions == 15000
        assert results.clicks == 225
        assert results.conversion_rate == 4.0

    def test_conversion_rate_floor(self, fixed_rng):
        """Test that conversion rate never drops below 1%."""
        results = simulate(1000, [], "Brand Awareness", None, None, rng=fixed_rng(0))

        assert results.conversion_rate == 1.0

    def test_zero_budget_no_channels(self, fixed_rng):
        """Test that zero budget omits cost ratios instead of dividing by zero."""
        results = simulate(0, [], "Brand Awareness", "2024-01-01", "2024-01-31", rng=fixed_rng(0))

        assert results.reach == 0
        assert results.impressions == 0
        assert results.clicks == 0
        assert results.cpc is None
        assert results.cpl is None

    def test_zero_budget_random_jitter(self):
        """Test zero budget with real jitter never raises."""
        for _ in range(200):
            results = simulate(0, [], "Brand Awareness", "2024-01-01", "2024-01-31")
            if results.clicks == 0:
                assert results.cpc is None
            assert results.cpl is None

    def test_none_budget_treated_as_zero(self, fixed_rng):
        """Test that a missing budget behaves like zero."""
        results = simulate(None, make_channels(2), "Product Launch", None, None, rng=fixed_rng(0))

        assert results.reach == 2000

    def test_default_random_source(self):
        """Test simulate without an injected random source."""
        results = simulate(5000, make_channels(2), "Customer Retention", "2024-01-01", "2024-02-01")

        assert isinstance(results, SimulatedResults)
        assert results.reach > 0

    @pytest.mark.parametrize("goal", GOALS)
    def test_non_negative_and_ordered(self, goal, rng):
        """Test counts are non-negative and impressions cover reach and clicks."""
        for budget in (0, 1, 250, 5000, 250000):
            for channel_count in (0, 1, 4):
                results = simulate(budget, make_channels(channel_count), goal, None, None, rng=rng)

                assert results.reach >= 0
                assert results.impressions >= results.reach
                assert results.clicks >= 0
                assert results.impressions >= results.clicks

    @pytest.mark.parametrize("goal", GOALS)
    def test_leads_only_for_lead_generation(self, goal, rng):
        """Test that leads are present exactly for Lead Generation."""
        for budget in (100, 10000):
            results = simulate(budget, make_channels(1), goal, None, None, rng=rng)

            if goal == "Lead Generation":
                assert results.leads is not None
            else:
                assert results.leads is None
                assert results.cpl is None

    def test_sales_conversion_distribution(self):
        """Test CTR and conversion rate stay within the jitter band."""
        rng = random.Random(42)
        for _ in range(1000):
            results = simulate(10000, make_channels(1), "Sales Conversion", None, None, rng=rng)
            ctr = results.clicks / results.impressions

            assert 0.0299 <= ctr <= 0.0401
            assert 11.0 <= results.conversion_rate <= 13.0

    def test_end_to_end_lead_generation(self):
        """Test a realistic Lead Generation campaign."""
        channels = [CampaignChannel(id="ppc", name="PPC", budget=10000)]

        results = simulate(10000, channels, "Lead Generation", "2024-01-01", "2024-01-31")

        assert 79000 <= results.reach <= 82000
        assert results.leads is not None and results.leads > 0
        assert results.cpc is not None and results.cpc > 0
        assert results.cpl is not None and results.cpl > 0

    def test_conversion_rate_two_decimals(self, rng):
        """Test conversion rate is reported as a percentage with 2 decimals."""
        results = simulate(3000, make_channels(2), "Product Launch", None, None, rng=rng)

        assert results.conversion_rate == round(results.conversion_rate, 2)
        assert 4.0 <= results.conversion_rate <= 6.0


@pytest.mark.unit
class TestCampaignDuration:
    """Test campaign_duration function."""

    def test_iso_strings(self):
        """Test duration between ISO date strings."""
        assert campaign_duration("2024-01-01", "2024-01-31") == 30

    def test_date_objects(self):
        """Test duration between date objects."""
        assert campaign_duration(date(2024, 2, 1), date(2024, 3, 1)) == 29

    def test_symmetric(self):
        """Test that argument order does not matter."""
        a = date(2024, 1, 1)
        b = date(2024, 4, 15)

        assert campaign_duration(a, b) == campaign_duration(b, a)

    def test_partial_day_rounds_up(self):
        """Test that partial days count as a full day."""
        start = datetime(2024, 1, 1, 0, 0)
        end = datetime(2024, 1, 2, 1, 0)

        assert campaign_duration(start, end) == 2

    def test_same_day(self):
        """Test zero-length campaign."""
        assert campaign_duration("2024-05-05", "2024-05-05") == 0

    def test_utc_designator(self):
        """Test timestamps with a trailing Z."""
        assert campaign_duration("2024-01-01T00:00:00Z", "2024-01-31T00:00:00Z") == 30

    def test_mixed_naive_and_aware(self):
        """Test a plain date against an offset-aware timestamp."""
        assert campaign_duration("2024-01-01T00:00:00Z", date(2024, 1, 31)) == 30
        assert campaign_duration(date(2024, 1, 1), "2024-01-02T12:00:00+02:00") == 2


@pytest.mark.unit
class TestPerformanceInsights:
    """Test performance_insights function."""

    def test_all_positive_insights(self):
        """Test independent rules all firing on strong results."""
        results = SimulatedResults(reach=2000, impressions=1000, clicks=40, cpc=1.5, conversion_rate=12)

        insights = performance_insights(results, 100)

        assert insights == [
            INSIGHT_HIGH_CTR,
            INSIGHT_LOW_CPC,
            INSIGHT_HIGH_CONVERSION,
            INSIGHT_BUDGET_EFFICIENCY,
        ]

    def test_no_budget_efficiency_when_reach_low(self):
        """Test budget efficiency only fires above 10 reach per dollar."""
        results = SimulatedResults(reach=500, impressions=1000, clicks=40, cpc=1.5, conversion_rate=12)

        insights = performance_insights(results, 100)

        assert INSIGHT_HIGH_CTR in insights
        assert INSIGHT_LOW_CPC in insights
        assert INSIGHT_HIGH_CONVERSION in insights
        assert INSIGHT_BUDGET_EFFICIENCY not in insights

    def test_all_warning_insights(self):
        """Test improvement suggestions on weak results."""
        results = SimulatedResults(reach=100, impressions=1000, clicks=10, cpc=7.25, conversion_rate=2.5)

        insights = performance_insights(results, 1000)

        assert insights == [INSIGHT_LOW_CTR, INSIGHT_HIGH_CPC, INSIGHT_LOW_CONVERSION]

    def test_middle_values_produce_nothing(self):
        """Test that values between thresholds emit no insight."""
        results = SimulatedResults(reach=1000, impressions=1000, clicks=20, cpc=3.0, conversion_rate=5)

        assert performance_insights(results, 1000) == []

    def test_absent_values_are_skipped(self):
        """Test that absent cpc and conversion rate do not fail."""
        results = SimulatedResults(reach=0, impressions=0, clicks=0)

        assert performance_insights(results, 0) == []

    def test_zero_cpc_is_low_cost(self):
        """Test that a present zero cpc counts as a low cost per click."""
        results = SimulatedResults(reach=0, impressions=0, clicks=0, cpc=0.0)

        assert performance_insights(results, 0) == [INSIGHT_LOW_CPC]

    def test_none_results(self):
        """Test insights for missing results."""
        assert performance_insights(None, 1000) == []

    def test_insights_from_simulation(self, fixed_rng):
        """Test insights over a simulated Customer Retention campaign."""
        results = simulate(1000, make_channels(1), "Customer Retention", None, None, rng=fixed_rng(0.5))

        insights = performance_insights(results, 1000)

        # ctr 4.5%, conversion 15%
        assert INSIGHT_HIGH_CTR in insights
        assert INSIGHT_HIGH_CONVERSION in insights
