"""Application services."""

from ballot_campaign.application.services.base import LoggingMixin
from ballot_campaign.application.services.campaign_controller import CampaignController

__all__: list[str] = ["CampaignController", "LoggingMixin"]
