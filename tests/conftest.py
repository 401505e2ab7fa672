"""
Pytest configuration and shared fixtures for ballot campaign tests.

Testing Standards:
- All async tests use pytest.mark.asyncio (auto mode enabled in pyproject.toml)
- Unit tests go in tests/unit/
- Integration tests go in tests/integration/
"""

from datetime import datetime, timedelta, timezone

import pytest

from ballot_campaign.application.services.campaign_controller import CampaignController
from ballot_campaign.infrastructure.adapters.campaign_event_bus import (
    InMemoryCampaignEventBus,
)
from ballot_campaign.infrastructure.stubs.administrator_check_stub import (
    AdministratorCheckStub,
)

ADMIN = "administrator"


class FakeClock:
    """Deterministic clock advancing one second per reading."""

    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2024, 1, 1, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        current = self.now
        self.now = self.now + timedelta(seconds=1)
        return current


@pytest.fixture
def anyio_backend() -> str:
    """Use asyncio as the async backend."""
    return "asyncio"


@pytest.fixture
def project_version() -> str:
    """Provide the current project version for tests."""
    from ballot_campaign import __version__

    return __version__


@pytest.fixture
def admin_id() -> str:
    return ADMIN


@pytest.fixture
def admin_check() -> AdministratorCheckStub:
    return AdministratorCheckStub(ADMIN)


@pytest.fixture
def event_bus() -> InMemoryCampaignEventBus:
    return InMemoryCampaignEventBus()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def controller(
    admin_check: AdministratorCheckStub,
    event_bus: InMemoryCampaignEventBus,
    clock: FakeClock,
) -> CampaignController:
    """Fresh controller in REGISTERING_VOTERS with no voters."""
    return CampaignController(admin_check, event_bus, clock=clock)


async def _drive_to_voting(
    controller: CampaignController,
    voters: tuple[str, ...] = ("A", "B", "C"),
    proposals: tuple[str, ...] = ("Alpha", "Beta"),
) -> None:
    """Register voters, submit proposals (by the first voter) and open voting."""
    for voter_id in voters:
        await controller.add_voter(ADMIN, voter_id)
    await controller.open_proposals_registration(ADMIN)
    for description in proposals:
        await controller.add_proposal(voters[0], description)
    await controller.close_proposals_registration(ADMIN)
    await controller.open_voting_session(ADMIN)


@pytest.fixture
def drive_to_voting():
    """Helper coroutine: drive a controller to VOTING_SESSION_STARTED."""
    return _drive_to_voting


@pytest.fixture
async def voting_controller(controller: CampaignController) -> CampaignController:
    """Controller with voters A/B/C, proposals Alpha/Beta and voting open."""
    await _drive_to_voting(controller)
    return controller
