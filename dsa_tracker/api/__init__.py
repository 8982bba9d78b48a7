"""API router for v1 endpoints."""

from fastapi import APIRouter

from dsa_tracker.api import problems, readiness

router = APIRouter()

# Company readiness and cached requirement profiles
router.include_router(readiness.router, tags=["readiness"])

# Practice coverage and revision scheduling
router.include_router(problems.router, tags=["problems"])
