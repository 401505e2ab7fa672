"""Campaign configuration.

This module defines configuration for a campaign deployment with
environment variable overrides.

Environment Variables:
- CAMPAIGN_ADMINISTRATOR_ID: Identity recognized as administrator (default: administrator)
- ENVIRONMENT: production (JSON logs) or development (console logs) (default: development)
- CAMPAIGN_EVENT_HISTORY_LIMIT: Events kept in memory by the event bus (default: 1000)
- CAMPAIGN_MAX_DESCRIPTION_LENGTH: Longest accepted proposal text (default: 1000)
"""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_ADMINISTRATOR_ID: str = "administrator"
DEFAULT_ENVIRONMENT: str = "development"
DEFAULT_EVENT_HISTORY_LIMIT: int = 1000
DEFAULT_MAX_DESCRIPTION_LENGTH: int = 1000


def _get_int_env(key: str, default: int) -> int:
    """Get integer environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or invalid.

    Returns:
        Parsed integer value or default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


@dataclass(frozen=True)
class CampaignConfig:
    """Configuration for a campaign deployment.

    Attributes:
        administrator_id: Identity allowed to drive phases and register voters.
        environment: 'production' or 'development'; selects the log renderer.
        event_history_limit: Maximum events retained by the in-memory bus.
        max_description_length: Longest accepted proposal description.
    """

    administrator_id: str = DEFAULT_ADMINISTRATOR_ID
    environment: str = DEFAULT_ENVIRONMENT
    event_history_limit: int = DEFAULT_EVENT_HISTORY_LIMIT
    max_description_length: int = DEFAULT_MAX_DESCRIPTION_LENGTH

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if not self.administrator_id or not self.administrator_id.strip():
            raise ValueError("administrator_id must be a non-empty identity")
        if self.event_history_limit < 1:
            raise ValueError(
                f"event_history_limit must be at least 1, got {self.event_history_limit}"
            )
        if self.max_description_length < 1:
            raise ValueError(
                "max_description_length must be at least 1, "
                f"got {self.max_description_length}"
            )

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @classmethod
    def from_environment(cls) -> CampaignConfig:
        """Create config from environment variables with defaults.

        Returns:
            CampaignConfig with values from environment or defaults.

        Raises:
            ValueError: If a configured value is out of range.
        """
        return cls(
            administrator_id=os.environ.get(
                "CAMPAIGN_ADMINISTRATOR_ID", DEFAULT_ADMINISTRATOR_ID
            ),
            environment=os.environ.get("ENVIRONMENT", DEFAULT_ENVIRONMENT),
            event_history_limit=_get_int_env(
                "CAMPAIGN_EVENT_HISTORY_LIMIT", DEFAULT_EVENT_HISTORY_LIMIT
            ),
            max_description_length=_get_int_env(
                "CAMPAIGN_MAX_DESCRIPTION_LENGTH", DEFAULT_MAX_DESCRIPTION_LENGTH
            ),
        )


DEFAULT_CAMPAIGN_CONFIG = CampaignConfig()
