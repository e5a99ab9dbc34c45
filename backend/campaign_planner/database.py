"""
Database module for storing planner campaigns locally.
Uses SQLite for lightweight, serverless storage; each campaign is kept as a
JSON document keyed by its id.
"""
import logging
import sqlite3
import time
import uuid
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from campaign_planner.config import settings
from campaign_planner.models.campaign import Campaign, CampaignInput

logger = logging.getLogger(__name__)

DATABASE_PATH = Path(settings.database_path)


class CampaignNotFoundError(LookupError):
    """Raised when updating a campaign id that is not stored."""

    def __init__(self, campaign_id: str):
        super().__init__(f"Campaign with id {campaign_id} not found")
        self.campaign_id = campaign_id


@contextmanager
def get_db_connection():
    """Context manager for database connections."""
    DATABASE_PATH.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(str(DATABASE_PATH))
    conn.row_factory = sqlite3.Row  # Enable column access by name
    try:
        yield conn
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def init_database():
    """Initialize database schema."""
    with get_db_connection() as conn:
        cursor = conn.cursor()

        # Campaigns table; position keeps list() in insertion order across updates
        cursor.execute("""
            CREATE TABLE IF NOT EXISTS campaigns (
                position INTEGER PRIMARY KEY AUTOINCREMENT,
                id TEXT NOT NULL UNIQUE,
                status TEXT NOT NULL,
                payload TEXT NOT NULL,
                created_at TIMESTAMP NOT NULL,
                updated_at TIMESTAMP NOT NULL
            )
        """)

        cursor.execute("""
            CREATE INDEX IF NOT EXISTS idx_campaigns_status
            ON campaigns(status)
        """)

        conn.commit()


def generate_id() -> str:
    """Generate a campaign id from the current timestamp and a random suffix."""
    return f"{int(time.time() * 1000)}-{uuid.uuid4().hex[:9]}"


def _row_to_campaign(row: sqlite3.Row) -> Campaign:
    return Campaign.model_validate_json(row["payload"])


class CampaignDatabase:
    """Database operations for planner campaigns."""

    @staticmethod
    def list_campaigns() -> List[Campaign]:
        """Get all stored campaigns in the order they were created."""
        with get_db_connection() as conn:
            cursor = conn.execute("SELECT payload FROM campaigns ORDER BY position ASC")
            return [_row_to_campaign(row) for row in cursor.fetchall()]

    @staticmethod
    def get_campaign(campaign_id: str) -> Optional[Campaign]:
        """Get a single campaign by id, or None if it does not exist."""
        with get_db_connection() as conn:
            cursor = conn.execute("SELECT payload FROM campaigns WHERE id = ?", (campaign_id,))
            row = cursor.fetchone()
            return _row_to_campaign(row) if row else None

    @staticmethod
    def upsert_campaign(campaign_input: CampaignInput) -> Campaign:
        """
        Save a campaign.

        Without an id a new campaign is created with a generated id and fresh
        timestamps. With an id the stored campaign is replaced, keeping its
        original created_at.

        Raises:
            CampaignNotFoundError: If an id is given but no such campaign exists
        """
        now = datetime.now()
        data = campaign_input.model_dump(exclude={"id"})

        with get_db_connection() as conn:
            if campaign_input.id:
                cursor = conn.execute(
                    "SELECT created_at FROM campaigns WHERE id = ?", (campaign_input.id,)
                )
                row = cursor.fetchone()
                if not row:
                    raise CampaignNotFoundError(campaign_input.id)

                campaign = Campaign(
                    id=campaign_input.id,
                    created_at=datetime.fromisoformat(row["created_at"]),
                    updated_at=now,
                    **data
                )
                conn.execute("""
                    UPDATE campaigns
                    SET status = ?, payload = ?, updated_at = ?
                    WHERE id = ?
                """, (campaign.status, campaign.model_dump_json(), now.isoformat(), campaign.id))
                logger.info(f"Updated campaign {campaign.id}")
            else:
                campaign = Campaign(id=generate_id(), created_at=now, updated_at=now, **data)
                conn.execute("""
                    INSERT INTO campaigns (id, status, payload, created_at, updated_at)
                    VALUES (?, ?, ?, ?, ?)
                """, (
                    campaign.id,
                    campaign.status,
                    campaign.model_dump_json(),
                    now.isoformat(),
                    now.isoformat()
                ))
                logger.info(f"Created campaign {campaign.id}")

        return campaign

    @staticmethod
    def delete_campaign(campaign_id: str) -> bool:
        """Delete a campaign. Returns False if it did not exist."""
        with get_db_connection() as conn:
            cursor = conn.execute("DELETE FROM campaigns WHERE id = ?", (campaign_id,))
            deleted = cursor.rowcount > 0

        if not deleted:
            logger.warning(f"Campaign with id {campaign_id} not found")
        return deleted

    @staticmethod
    def clear_campaigns() -> int:
        """Delete every stored campaign. Returns the number removed."""
        with get_db_connection() as conn:
            cursor = conn.execute("DELETE FROM campaigns")
            return cursor.rowcount
