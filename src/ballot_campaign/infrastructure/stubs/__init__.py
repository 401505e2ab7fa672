"""Stub implementations of application ports for development and testing."""

from ballot_campaign.infrastructure.stubs.administrator_check_stub import (
    AdministratorCheckStub,
)

__all__: list[str] = ["AdministratorCheckStub"]
