"""
General endpoints for health checks and basic information.
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["general"])

GREETING = "Hello, codealong material here!"


@router.get(
    "/",
    summary="Greeting",
    description="Static greeting confirming the API is reachable",
    response_class=PlainTextResponse,
)
def read_root() -> str:
    return GREETING


@router.get(
    "/health",
    summary="Health check",
    description="Check if the API service is running and healthy",
    response_description="Health status",
)
def health_check():
    return {"status": "healthy"}
