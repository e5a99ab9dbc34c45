"""
Shared fixtures for all tests.
"""
import pytest
import random
import tempfile
import os
from datetime import date
from pathlib import Path
from fastapi.testclient import TestClient
from campaign_planner.main import app
from campaign_planner.database import init_database, DATABASE_PATH


@pytest.fixture(scope="function")
def test_db():
    """Create isolated test database for each test."""
    db_fd, db_path = tempfile.mkstemp(suffix='.db')

    original_db_path = DATABASE_PATH

    # Override database path
    import campaign_planner.database
    campaign_planner.database.DATABASE_PATH = Path(db_path)

    init_database()

    yield db_path

    # Cleanup
    os.close(db_fd)
    os.unlink(db_path)

    campaign_planner.database.DATABASE_PATH = original_db_path


@pytest.fixture
def client(test_db):
    """FastAPI test client with isolated database."""
    with TestClient(app) as c:
        yield c


@pytest.fixture
def rng():
    """Seeded random source for reproducible draws."""
    return random.Random(1234)


class FixedRandom:
    """Random source that always returns the midpoint (or low end) of a range."""

    def __init__(self, position=0.5):
        self.position = position

    def uniform(self, a, b):
        return a + (b - a) * self.position

    def randint(self, a, b):
        return a

    def choice(self, seq):
        return seq[0]

    def sample(self, population, k):
        return list(population)[:k]


@pytest.fixture
def fixed_rng():
    """Factory for deterministic random sources."""
    return FixedRandom


class QueuedRandom(FixedRandom):
    """Random source whose uniform draws come from a fixed queue."""

    def __init__(self, values):
        super().__init__()
        self.values = list(values)

    def uniform(self, a, b):
        return self.values.pop(0)


@pytest.fixture
def queued_rng():
    """Factory for random sources with scripted uniform draws."""
    return QueuedRandom


@pytest.fixture
def sample_campaign():
    """Sample campaign payload for testing."""
    return {
        "name": "Spring Launch",
        "goal": "Lead Generation",
        "start_date": "2024-01-01",
        "end_date": "2024-01-31",
        "overall_budget": 10000,
        "target_audience": {
            "persona_name": "Ops Olivia",
            "demographics": "25-44, US",
            "interests_and_behaviors": "Productivity apps",
            "pain_points": "Too many meetings"
        },
        "channels": [
            {"id": "ppc", "name": "PPC Advertising", "budget": 6000},
            {"id": "email", "name": "Email Marketing", "budget": 4000}
        ],
        "messaging": {
            "core_message": "Work less, ship more",
            "value_props": ["Fewer meetings", "  ", "Async updates"],
            "content_ideas": "Webinar series"
        }
    }


@pytest.fixture
def campaign_input(sample_campaign):
    """Validated CampaignInput built from the sample payload."""
    from campaign_planner.models.campaign import CampaignInput
    return CampaignInput(**sample_campaign)


@pytest.fixture
def today():
    return date(2024, 6, 30)
