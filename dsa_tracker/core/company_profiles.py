"""Company requirement profile lookup with generate-on-miss caching.

A profile is read from the store when present. Otherwise it is generated
by the AI collaborator, stored, and then returned. Readiness is always
computed by the local engine from whichever profile was obtained.
"""

import json
import logging
from pathlib import Path
from typing import Any, Protocol, Sequence

from dsa_tracker.core.logging import get_logger, log_with_context
from dsa_tracker.core.readiness import (
    CompanyRequirementProfile,
    ReadinessReport,
    UserCoverageRecord,
    compute_readiness,
)

logger = get_logger(__name__)

DEFAULT_COMPANIES = ("Microsoft", "Google", "Amazon", "Meta")
DEFAULT_COMPANY_DATA = Path(__file__).resolve().parents[1] / "data" / "default_companies.json"


class ProfileGenerationError(Exception):
    """Raised when a requirement profile could not be generated."""


class ProfileStore(Protocol):
    def get(self, company_name: str) -> CompanyRequirementProfile | None: ...

    def put(self, company_name: str, profile: CompanyRequirementProfile) -> CompanyRequirementProfile: ...


class ProfileGenerator(Protocol):
    async def generate(self, company_name: str) -> CompanyRequirementProfile: ...


def load_default_company_data(path: Path = DEFAULT_COMPANY_DATA) -> dict[str, CompanyRequirementProfile]:
    """Load the bundled static profiles, keyed by company name."""
    with path.open("r", encoding="utf-8") as f:
        raw = json.load(f)
    return {name: CompanyRequirementProfile.model_validate(data) for name, data in raw.items()}


class CompanyProfileService:
    """Obtains requirement profiles and scores users against them."""

    def __init__(self, store: ProfileStore, generator: ProfileGenerator):
        self.store = store
        self.generator = generator

    async def get_profile(self, company_name: str) -> tuple[CompanyRequirementProfile, bool]:
        """
        Get a company's profile, generating and caching it on a miss.

        Args:
            company_name: Company display name

        Returns:
            Tuple of (profile, cached)

        Raises:
            ProfileGenerationError: If the profile was not cached and generation failed
        """
        cached = self.store.get(company_name)
        if cached is not None:
            logger.info(f"Using cached requirements for {company_name}")
            return cached, True

        logger.info(f"Company {company_name} not in cache, generating profile")
        profile = await self.generator.generate(company_name)
        stored = self.store.put(company_name, profile)
        return stored, False

    async def assess(
        self,
        company_name: str,
        user_topics: Sequence[UserCoverageRecord],
        user_patterns: Sequence[UserCoverageRecord],
    ) -> ReadinessReport:
        """
        Score a user's coverage against a company's profile.

        Args:
            company_name: Company display name
            user_topics: Solved counts per topic
            user_patterns: Solved counts per pattern

        Returns:
            ReadinessReport with `cached` reflecting where the profile came from
        """
        profile, cached = await self.get_profile(company_name)
        report = compute_readiness(user_topics, user_patterns, profile)
        report.cached = cached

        log_with_context(
            logger,
            logging.INFO,
            f"Computed readiness for {company_name}: {report.overall_readiness}%",
            company=company_name,
            cached=cached,
        )
        return report

    async def initialize_defaults(
        self,
        static_data: dict[str, CompanyRequirementProfile] | None = None,
        companies: Sequence[str] = DEFAULT_COMPANIES,
    ) -> list[dict[str, Any]]:
        """
        Store profiles for the default companies, overwriting existing ones.

        Static data is used when available; otherwise the profile is
        generated. A failure for one company does not stop the others.

        Returns:
            One {"company", "status"[, "error"]} dict per company
        """
        static_data = static_data or {}
        results: list[dict[str, Any]] = []

        for company in companies:
            try:
                if company in static_data:
                    logger.info(f"Using static data for {company}")
                    profile = static_data[company]
                else:
                    profile = await self.generator.generate(company)

                self.store.put(company, profile)
                results.append({"company": company, "status": "updated"})
            except Exception as e:
                logger.error(f"Failed to initialize {company}: {e}")
                results.append({"company": company, "status": "failed", "error": str(e)})

        return results
