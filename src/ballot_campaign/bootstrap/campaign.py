"""Bootstrap wiring for the campaign controller.

Builds one controller per process from CampaignConfig, with the event bus
feeding the structured audit log and Prometheus metrics.

Note: The administrator check is the single-owner stub. A deployment with
an external access-control service replaces it via set_administrator_check()
before the first request.
"""

from __future__ import annotations

from ballot_campaign.application.ports.administrator_check import (
    AdministratorCheckProtocol,
)
from ballot_campaign.application.services.campaign_controller import CampaignController
from ballot_campaign.config.campaign_config import CampaignConfig
from ballot_campaign.infrastructure.adapters.campaign_event_bus import (
    InMemoryCampaignEventBus,
)
from ballot_campaign.infrastructure.monitoring.campaign_metrics import (
    get_campaign_metrics,
)
from ballot_campaign.infrastructure.observability.event_logging import (
    CampaignEventLogger,
)
from ballot_campaign.infrastructure.stubs.administrator_check_stub import (
    AdministratorCheckStub,
)

_config: CampaignConfig | None = None
_administrator_check: AdministratorCheckProtocol | None = None
_event_bus: InMemoryCampaignEventBus | None = None
_controller: CampaignController | None = None


def get_campaign_config() -> CampaignConfig:
    """Get the campaign configuration (from environment on first use)."""
    global _config
    if _config is None:
        _config = CampaignConfig.from_environment()
    return _config


def get_administrator_check() -> AdministratorCheckProtocol:
    global _administrator_check
    if _administrator_check is None:
        _administrator_check = AdministratorCheckStub(
            get_campaign_config().administrator_id
        )
    return _administrator_check


def get_event_bus() -> InMemoryCampaignEventBus:
    """Get the event bus, subscribing the audit logger and metrics on creation."""
    global _event_bus
    if _event_bus is None:
        bus = InMemoryCampaignEventBus(
            history_limit=get_campaign_config().event_history_limit
        )
        bus.subscribe(CampaignEventLogger())
        bus.subscribe(get_campaign_metrics().record_event)
        _event_bus = bus
    return _event_bus


def get_campaign_controller() -> CampaignController:
    global _controller
    if _controller is None:
        _controller = CampaignController(
            administrator_check=get_administrator_check(),
            event_publisher=get_event_bus(),
            max_description_length=get_campaign_config().max_description_length,
        )
    return _controller


def set_campaign_config(config: CampaignConfig) -> None:
    """Set custom configuration (testing/override)."""
    global _config
    _config = config


def set_administrator_check(check: AdministratorCheckProtocol) -> None:
    """Set custom administrator check (testing/override)."""
    global _administrator_check
    _administrator_check = check


def set_campaign_controller(controller: CampaignController) -> None:
    """Set custom controller (testing/override)."""
    global _controller
    _controller = controller


def reset_campaign_singletons() -> None:
    """Reset all campaign singletons (testing cleanup)."""
    global _config, _administrator_check, _event_bus, _controller
    _config = None
    _administrator_check = None
    _event_bus = None
    _controller = None
