"""Prometheus monitoring for campaigns."""

from ballot_campaign.infrastructure.monitoring.campaign_metrics import (
    METRICS_CONTENT_TYPE,
    CampaignMetricsCollector,
    generate_metrics,
    get_campaign_metrics,
    reset_campaign_metrics,
)

__all__: list[str] = [
    "METRICS_CONTENT_TYPE",
    "CampaignMetricsCollector",
    "generate_metrics",
    "get_campaign_metrics",
    "reset_campaign_metrics",
]
