"""Adapters implementing application ports."""

from ballot_campaign.infrastructure.adapters.campaign_event_bus import (
    CampaignEventSubscriber,
    InMemoryCampaignEventBus,
)

__all__: list[str] = ["CampaignEventSubscriber", "InMemoryCampaignEventBus"]
