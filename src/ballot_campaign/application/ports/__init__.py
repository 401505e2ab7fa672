"""Application ports (abstract interfaces)."""

from ballot_campaign.application.ports.administrator_check import (
    AdministratorCheckProtocol,
)
from ballot_campaign.application.ports.campaign_event_publisher import (
    CampaignEventPublisherProtocol,
)

__all__: list[str] = [
    "AdministratorCheckProtocol",
    "CampaignEventPublisherProtocol",
]
