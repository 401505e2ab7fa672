"""Campaign API dependencies.

The controller comes from the bootstrap singletons; tests override it with
app.dependency_overrides or bootstrap.campaign.set_campaign_controller().

Caller identity is taken verbatim from the X-Caller-ID header. Verifying
that header is the job of whatever fronts this service.
"""

from fastapi import Header

from ballot_campaign.application.services.campaign_controller import CampaignController
from ballot_campaign.bootstrap.campaign import (
    get_campaign_controller as _get_campaign_controller,
)

# Header carrying the caller identity
CALLER_HEADER = "X-Caller-ID"


def get_campaign_controller() -> CampaignController:
    """Get the campaign controller instance.

    Returns:
        The process-wide CampaignController.
    """
    return _get_campaign_controller()


def get_caller_id(
    caller_id: str = Header(..., alias=CALLER_HEADER, min_length=1),
) -> str:
    """Extract the caller identity from the request headers."""
    return caller_id
