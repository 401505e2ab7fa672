"""Port definition for campaign event publication.

The controller PUBLISHES events. Logging, metrics and notification
collaborators SUBSCRIBE independently. The controller's responsibility
ends at publishing; it never waits for a consumer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ballot_campaign.domain.events.campaign import CampaignEvent


class CampaignEventPublisherProtocol(ABC):
    """Port for publishing campaign events."""

    @abstractmethod
    async def publish(self, event: CampaignEvent) -> None:
        """Publish an event to subscribers.

        Args:
            event: The campaign event to publish.
        """
        ...
