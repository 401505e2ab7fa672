"""Prometheus metrics for campaign activity.

The collector subscribes to the campaign event bus and turns events into
counters and gauges. Vote choices are never exported; only totals.

Metrics:
- campaign_phase_transitions_total{from_status, to_status}
- campaign_voters_registered_total
- campaign_proposals_registered_total
- campaign_votes_cast_total
- campaign_tallies_total{outcome}
- campaign_current_phase (index in the workflow order)
- campaign_generation
"""

import os
import threading

from prometheus_client import CollectorRegistry, Counter, Gauge, generate_latest

from ballot_campaign.domain.events.campaign import (
    NO_WINNER_EVENT_TYPE,
    PROPOSAL_REGISTERED_EVENT_TYPE,
    VOTE_CAST_EVENT_TYPE,
    VOTER_REGISTERED_EVENT_TYPE,
    WINNER_SELECTED_EVENT_TYPE,
    CampaignEvent,
    WorkflowStatusChangedEvent,
)

# Content type for Prometheus metrics endpoint
METRICS_CONTENT_TYPE = "text/plain; version=0.0.4; charset=utf-8"

_collector_lock = threading.Lock()


class CampaignMetricsCollector:
    """Collects campaign metrics from published events.

    Attributes:
        phase_transitions_total: Counter of applied phase changes.
        voters_registered_total: Counter of voter registrations.
        proposals_registered_total: Counter of accepted proposals.
        votes_cast_total: Counter of votes.
        tallies_total: Counter of tallies by outcome.
        current_phase: Gauge holding the workflow index of the current phase.
        generation: Gauge holding the current campaign generation.
    """

    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        """Initialize metrics.

        Args:
            registry: Optional custom registry for testing isolation.
        """
        self._registry = registry or CollectorRegistry()
        self._environment = os.environ.get("ENVIRONMENT", "development")
        self._service_name = os.environ.get("SERVICE_NAME", "ballot-campaign")

        labels = ["service", "environment"]

        self.phase_transitions_total = Counter(
            name="campaign_phase_transitions_total",
            documentation="Total applied campaign phase transitions",
            labelnames=labels + ["from_status", "to_status"],
            registry=self._registry,
        )
        self.voters_registered_total = Counter(
            name="campaign_voters_registered_total",
            documentation="Total voter registrations",
            labelnames=labels,
            registry=self._registry,
        )
        self.proposals_registered_total = Counter(
            name="campaign_proposals_registered_total",
            documentation="Total proposals registered",
            labelnames=labels,
            registry=self._registry,
        )
        self.votes_cast_total = Counter(
            name="campaign_votes_cast_total",
            documentation="Total votes cast",
            labelnames=labels,
            registry=self._registry,
        )
        self.tallies_total = Counter(
            name="campaign_tallies_total",
            documentation="Total tallies by outcome",
            labelnames=labels + ["outcome"],
            registry=self._registry,
        )
        self.current_phase = Gauge(
            name="campaign_current_phase",
            documentation="Index of the current phase in the workflow order",
            labelnames=labels,
            registry=self._registry,
        )
        self.generation = Gauge(
            name="campaign_generation",
            documentation="Current campaign generation (number of resets)",
            labelnames=labels,
            registry=self._registry,
        )

    def _labels(self) -> dict[str, str]:
        return {"service": self._service_name, "environment": self._environment}

    def record_event(self, event: CampaignEvent) -> None:
        """Update metrics for one published event.

        Args:
            event: Campaign event delivered by the event bus.
        """
        labels = self._labels()

        if isinstance(event, WorkflowStatusChangedEvent):
            self.phase_transitions_total.labels(
                from_status=event.previous_status.value,
                to_status=event.new_status.value,
                **labels,
            ).inc()
            self.current_phase.labels(**labels).set(event.new_status.index)
            generation = event.generation + (1 if event.new_status.index == 0 else 0)
            self.generation.labels(**labels).set(generation)
        elif event.event_type == VOTER_REGISTERED_EVENT_TYPE:
            self.voters_registered_total.labels(**labels).inc()
        elif event.event_type == PROPOSAL_REGISTERED_EVENT_TYPE:
            self.proposals_registered_total.labels(**labels).inc()
        elif event.event_type == VOTE_CAST_EVENT_TYPE:
            self.votes_cast_total.labels(**labels).inc()
        elif event.event_type == WINNER_SELECTED_EVENT_TYPE:
            self.tallies_total.labels(outcome="winner", **labels).inc()
        elif event.event_type == NO_WINNER_EVENT_TYPE:
            self.tallies_total.labels(outcome="no_winner", **labels).inc()

    __call__ = record_event

    def get_registry(self) -> CollectorRegistry:
        """Get the Prometheus registry holding these metrics."""
        return self._registry


_campaign_metrics: CampaignMetricsCollector | None = None


def get_campaign_metrics() -> CampaignMetricsCollector:
    """Get or create the global CampaignMetricsCollector instance."""
    global _campaign_metrics
    if _campaign_metrics is None:
        with _collector_lock:
            if _campaign_metrics is None:
                _campaign_metrics = CampaignMetricsCollector()
    return _campaign_metrics


def generate_metrics() -> bytes:
    """Generate Prometheus exposition output for campaign metrics."""
    return generate_latest(get_campaign_metrics().get_registry())


def reset_campaign_metrics() -> None:
    """Reset the global collector (testing cleanup)."""
    global _campaign_metrics
    with _collector_lock:
        _campaign_metrics = None
