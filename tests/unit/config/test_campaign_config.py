"""Unit tests for CampaignConfig."""

import pytest

from ballot_campaign.config.campaign_config import (
    DEFAULT_ADMINISTRATOR_ID,
    DEFAULT_EVENT_HISTORY_LIMIT,
    DEFAULT_MAX_DESCRIPTION_LENGTH,
    CampaignConfig,
)


class TestCampaignConfigDefaults:
    """Tests for default configuration values."""

    def test_defaults(self) -> None:
        config = CampaignConfig()

        assert config.administrator_id == DEFAULT_ADMINISTRATOR_ID
        assert config.environment == "development"
        assert config.event_history_limit == DEFAULT_EVENT_HISTORY_LIMIT
        assert config.max_description_length == DEFAULT_MAX_DESCRIPTION_LENGTH
        assert config.is_production is False


class TestCampaignConfigValidation:
    """Tests for __post_init__ validation."""

    @pytest.mark.parametrize("administrator_id", ["", "   "])
    def test_blank_administrator(self, administrator_id: str) -> None:
        with pytest.raises(ValueError, match="administrator_id"):
            CampaignConfig(administrator_id=administrator_id)

    def test_history_limit_must_be_positive(self) -> None:
        with pytest.raises(ValueError, match="event_history_limit"):
            CampaignConfig(event_history_limit=0)

    def test_description_length_must_be_positive(self) -> None:
        with pytest.raises(ValueError, match="max_description_length"):
            CampaignConfig(max_description_length=0)


class TestCampaignConfigFromEnvironment:
    """Tests for from_environment()."""

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CAMPAIGN_ADMINISTRATOR_ID", "owner")
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.setenv("CAMPAIGN_EVENT_HISTORY_LIMIT", "50")
        monkeypatch.setenv("CAMPAIGN_MAX_DESCRIPTION_LENGTH", "200")

        config = CampaignConfig.from_environment()

        assert config == CampaignConfig(
            administrator_id="owner",
            environment="production",
            event_history_limit=50,
            max_description_length=200,
        )
        assert config.is_production is True

    def test_unparseable_integer_falls_back(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("CAMPAIGN_EVENT_HISTORY_LIMIT", "lots")

        config = CampaignConfig.from_environment()

        assert config.event_history_limit == DEFAULT_EVENT_HISTORY_LIMIT

    def test_out_of_range_integer_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CAMPAIGN_MAX_DESCRIPTION_LENGTH", "-3")

        with pytest.raises(ValueError):
            CampaignConfig.from_environment()
