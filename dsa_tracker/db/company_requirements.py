"""Company requirement profile cache operations."""

import re
from datetime import datetime, timezone
from typing import Any

from supabase import Client

from dsa_tracker.core.config import get_settings
from dsa_tracker.core.logging import get_logger
from dsa_tracker.core.readiness.types import CompanyRequirementProfile
from dsa_tracker.db.supabase_client import get_supabase

logger = get_logger(__name__)


def company_slug(company_name: str) -> str:
    """Row id for a company: lower-cased, whitespace runs replaced by '-'."""
    return re.sub(r"\s+", "-", company_name.lower())


def _row_to_profile(row: dict[str, Any]) -> CompanyRequirementProfile:
    return CompanyRequirementProfile.model_validate(
        {
            "company_name": row.get("company_name") or "",
            "required_topics": row.get("required_topics"),
            "required_patterns": row.get("required_patterns"),
            "last_updated": row.get("last_updated"),
        }
    )


class SupabaseProfileStore:
    """Stores one requirement profile per company slug."""

    def __init__(self, client: Client | None = None, table: str | None = None):
        self._client = client
        self._table = table or get_settings().COMPANY_REQUIREMENTS_TABLE

    @property
    def client(self) -> Client:
        if self._client is None:
            self._client = get_supabase()
        return self._client

    def get(self, company_name: str) -> CompanyRequirementProfile | None:
        """
        Load a cached profile.

        Args:
            company_name: Company display name

        Returns:
            Profile, or None if the company has not been cached

        Raises:
            Exception: If database operation fails
        """
        slug = company_slug(company_name)

        try:
            response = (
                self.client.table(self._table)
                .select("*")
                .eq("id", slug)
                .limit(1)
                .execute()
            )
        except Exception as e:
            logger.error(f"Failed to load requirements for {company_name}: {e}")
            raise

        rows = response.data or []
        if not rows:
            return None

        return _row_to_profile(rows[0])

    def put(self, company_name: str, profile: CompanyRequirementProfile) -> CompanyRequirementProfile:
        """
        Upsert a profile for a company.

        Args:
            company_name: Company display name (determines the row id)
            profile: Profile to store

        Returns:
            The stored profile with last_updated set

        Raises:
            Exception: If database operation fails
        """
        slug = company_slug(company_name)
        now = datetime.now(timezone.utc)
        stored = profile.model_copy(update={"last_updated": now})

        row = {
            "id": slug,
            "company_name": stored.company_name or company_name,
            "required_topics": [
                t.model_dump(mode="json", by_alias=True, exclude_none=True) for t in stored.required_topics
            ],
            "required_patterns": [
                p.model_dump(mode="json", by_alias=True, exclude_none=True) for p in stored.required_patterns
            ],
            "last_updated": now.isoformat(),
        }

        try:
            self.client.table(self._table).upsert(row).execute()
        except Exception as e:
            logger.error(f"Failed to store requirements for {company_name}: {e}")
            raise

        logger.info(
            f"Stored requirements for {company_name}",
            extra={
                "company": slug,
                "extra_data": {
                    "topics": len(stored.required_topics),
                    "patterns": len(stored.required_patterns),
                },
            },
        )
        return stored
