"""Health check endpoint."""

from fastapi import APIRouter, Depends

from ballot_campaign.api.dependencies.campaign import get_campaign_controller
from ballot_campaign.api.models.health import HealthResponse
from ballot_campaign.application.services.campaign_controller import CampaignController

router = APIRouter(prefix="/v1", tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(
    controller: CampaignController = Depends(get_campaign_controller),
) -> HealthResponse:
    """Report liveness along with the campaign phase."""
    phase = await controller.current_phase()
    return HealthResponse(status="healthy", phase=phase.value)
