"""FastAPI dependencies."""

from ballot_campaign.api.dependencies.campaign import (
    CALLER_HEADER,
    get_caller_id,
    get_campaign_controller,
)

__all__ = ["CALLER_HEADER", "get_caller_id", "get_campaign_controller"]
