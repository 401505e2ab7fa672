"""Unit tests for structured logging configuration."""

import json
from collections.abc import Iterator

import pytest
import structlog

from ballot_campaign.application.services.base import LoggingMixin
from ballot_campaign.infrastructure.observability.correlation import set_correlation_id
from ballot_campaign.infrastructure.observability.logging import (
    configure_structlog,
    get_logger_for_service,
)


def _renderer_types() -> list[type]:
    return [type(p) for p in structlog.get_config().get("processors", [])]


class TestConfigureStructlog:
    """Tests for configure_structlog function."""

    def test_production_renders_json(self) -> None:
        configure_structlog(environment="production")

        assert structlog.processors.JSONRenderer in _renderer_types()

    def test_development_renders_console(self) -> None:
        configure_structlog(environment="development")

        assert structlog.dev.ConsoleRenderer in _renderer_types()

    def test_defaults_to_production(self) -> None:
        configure_structlog()

        assert structlog.processors.JSONRenderer in _renderer_types()


class TestLogOutput:
    """Tests for actual log output format."""

    @pytest.fixture(autouse=True)
    def production_logging(self) -> Iterator[None]:
        configure_structlog(environment="production")
        yield
        set_correlation_id("")

    def test_json_output_structure(self, capsys: pytest.CaptureFixture[str]) -> None:
        set_correlation_id("test-json-output")

        get_logger_for_service("CampaignController").info("vote_cast", proposal_id=1)

        entry = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
        assert entry["event"] == "vote_cast"
        assert entry["level"] == "info"
        assert "timestamp" in entry
        assert entry["correlation_id"] == "test-json-output"
        assert entry["service"] == "CampaignController"
        assert entry["component"] == "campaign"
        assert entry["proposal_id"] == 1

    def test_no_correlation_id_when_unset(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        set_correlation_id("")

        structlog.get_logger().info("startup")

        entry = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
        assert "correlation_id" not in entry


class TestLoggingMixin:
    """Tests for the service logging mixin."""

    def test_operation_logger_binds_context(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        configure_structlog(environment="production")

        class ExampleService(LoggingMixin):
            def __init__(self) -> None:
                self._init_logger()

        set_correlation_id("mixin-test")
        ExampleService()._log_operation("vote", caller_id="alice").info("vote_cast")
        set_correlation_id("")

        entry = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
        assert entry["service"] == "ExampleService"
        assert entry["operation"] == "vote"
        assert entry["caller_id"] == "alice"
        assert entry["correlation_id"] == "mixin-test"
