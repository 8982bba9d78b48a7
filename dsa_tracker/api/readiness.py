"""API endpoints for company interview readiness."""

from functools import lru_cache

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from dsa_tracker.core.company_profiles import CompanyProfileService, ProfileGenerationError
from dsa_tracker.core.logging import get_logger
from dsa_tracker.core.readiness import CompanyRequirementProfile, ReadinessReport, UserCoverageRecord

logger = get_logger(__name__)

router = APIRouter()


class ReadinessRequest(BaseModel):
    """Body of a readiness request."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    company_name: str = Field(..., description="Company to assess against")
    user_topics: list[UserCoverageRecord] = Field(default_factory=list)
    user_patterns: list[UserCoverageRecord] = Field(default_factory=list)


@lru_cache(maxsize=1)
def get_profile_service() -> CompanyProfileService:
    """Build the profile service with the Supabase store and Anthropic generator."""
    from dsa_tracker.chains.generate_company_profile import AnthropicProfileGenerator
    from dsa_tracker.db.company_requirements import SupabaseProfileStore

    return CompanyProfileService(store=SupabaseProfileStore(), generator=AnthropicProfileGenerator())


@router.post("/readiness", response_model=ReadinessReport)
async def assess_readiness(
    request: ReadinessRequest,
    service: CompanyProfileService = Depends(get_profile_service),  # noqa: B008
) -> ReadinessReport:
    """
    Score a user's coverage against a company's requirement profile.

    The profile is read from cache, or generated and cached on first use.

    Raises:
        HTTPException 400: If company name is blank
        HTTPException 502: If the profile could not be generated
        HTTPException 500: If assessment fails
    """
    company_name = request.company_name.strip()
    if not company_name:
        raise HTTPException(status_code=400, detail="companyName is required")

    try:
        return await service.assess(company_name, request.user_topics, request.user_patterns)

    except ProfileGenerationError as e:
        logger.error(f"Profile generation failed for {company_name}: {e}")
        raise HTTPException(
            status_code=502,
            detail="Failed to generate company requirements",
        ) from e

    except Exception as e:
        logger.exception(f"Failed to assess readiness for {company_name}")
        raise HTTPException(
            status_code=500,
            detail="Failed to compute readiness",
        ) from e


@router.get("/companies/{company_name}/requirements", response_model=CompanyRequirementProfile)
async def get_company_requirements(
    company_name: str,
    service: CompanyProfileService = Depends(get_profile_service),  # noqa: B008
) -> CompanyRequirementProfile:
    """
    Get the cached requirement profile for a company.

    Raises:
        HTTPException 404: If the company has not been cached
        HTTPException 500: If the lookup fails
    """
    try:
        profile = service.store.get(company_name)
    except Exception as e:
        logger.exception(f"Failed to load requirements for {company_name}")
        raise HTTPException(status_code=500, detail="Failed to load company requirements") from e

    if profile is None:
        raise HTTPException(status_code=404, detail=f"No requirements cached for {company_name}")

    return profile
