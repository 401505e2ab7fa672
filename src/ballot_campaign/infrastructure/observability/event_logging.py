"""Structured audit log of campaign events.

Subscribes to the campaign event bus and writes one structured log entry
per event, carrying the full event payload.
"""

import structlog

from ballot_campaign.domain.events.campaign import CampaignEvent


class CampaignEventLogger:
    """Event bus subscriber writing campaign events to structlog."""

    def __init__(self) -> None:
        self._log = structlog.get_logger().bind(
            service="campaign_event_logger",
            component="audit",
        )

    def __call__(self, event: CampaignEvent) -> None:
        payload = event.to_dict()
        payload.pop("event_type")
        self._log.info("campaign_event", event_type=event.event_type, **payload)
