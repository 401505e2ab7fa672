"""In-memory campaign event bus.

Publishes campaign events to subscribed callables and keeps a bounded
history for status queries and tests. Subscribers may be plain functions
or coroutine functions.

A failing subscriber is logged with its traceback and does not stop
delivery to the remaining subscribers; the campaign itself never depends
on an event being consumed.
"""

from __future__ import annotations

import inspect
from collections import deque
from collections.abc import Awaitable, Callable
from typing import Union

import structlog

from ballot_campaign.application.ports.campaign_event_publisher import (
    CampaignEventPublisherProtocol,
)
from ballot_campaign.config.campaign_config import DEFAULT_EVENT_HISTORY_LIMIT
from ballot_campaign.domain.events.campaign import CampaignEvent

CampaignEventSubscriber = Callable[[CampaignEvent], Union[Awaitable[None], None]]

log = structlog.get_logger()


class InMemoryCampaignEventBus(CampaignEventPublisherProtocol):
    """Fan-out publisher with bounded in-memory history."""

    def __init__(self, history_limit: int = DEFAULT_EVENT_HISTORY_LIMIT) -> None:
        """Initialize the bus.

        Args:
            history_limit: Maximum events retained; oldest are dropped first.
        """
        if history_limit < 1:
            raise ValueError(f"history_limit must be at least 1, got {history_limit}")
        self._subscribers: list[tuple[str | None, CampaignEventSubscriber]] = []
        self._history: deque[CampaignEvent] = deque(maxlen=history_limit)
        self._log = log.bind(service="campaign_event_bus")

    def subscribe(
        self,
        subscriber: CampaignEventSubscriber,
        event_type: str | None = None,
    ) -> None:
        """Register a subscriber.

        Args:
            subscriber: Callable receiving each matching event.
            event_type: Only deliver events of this type (all events when None).
        """
        self._subscribers.append((event_type, subscriber))

    def unsubscribe(self, subscriber: CampaignEventSubscriber) -> None:
        self._subscribers = [
            (event_type, existing)
            for event_type, existing in self._subscribers
            if existing != subscriber
        ]

    async def publish(self, event: CampaignEvent) -> None:
        """Record the event and deliver it to matching subscribers.

        Args:
            event: The campaign event to publish.
        """
        self._history.append(event)

        for event_type, subscriber in list(self._subscribers):
            if event_type is not None and event_type != event.event_type:
                continue
            try:
                outcome = subscriber(event)
                if inspect.isawaitable(outcome):
                    await outcome
            except Exception:
                self._log.exception(
                    "event_subscriber_failed",
                    event_type=event.event_type,
                    subscriber=getattr(subscriber, "__qualname__", repr(subscriber)),
                )

    def history(self) -> list[CampaignEvent]:
        """Retained events, oldest first."""
        return list(self._history)

    def history_of(self, event_type: str) -> list[CampaignEvent]:
        return [event for event in self._history if event.event_type == event_type]

    def clear_history(self) -> None:
        """Test helper: drop retained events."""
        self._history.clear()
