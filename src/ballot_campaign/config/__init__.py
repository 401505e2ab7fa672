"""Campaign configuration."""

from ballot_campaign.config.campaign_config import (
    DEFAULT_ADMINISTRATOR_ID,
    DEFAULT_CAMPAIGN_CONFIG,
    DEFAULT_ENVIRONMENT,
    DEFAULT_EVENT_HISTORY_LIMIT,
    DEFAULT_MAX_DESCRIPTION_LENGTH,
    CampaignConfig,
)

__all__: list[str] = [
    "DEFAULT_ADMINISTRATOR_ID",
    "DEFAULT_CAMPAIGN_CONFIG",
    "DEFAULT_ENVIRONMENT",
    "DEFAULT_EVENT_HISTORY_LIMIT",
    "DEFAULT_MAX_DESCRIPTION_LENGTH",
    "CampaignConfig",
]
