"""Unit tests for campaign event payloads."""

from dataclasses import FrozenInstanceError
from datetime import datetime, timezone

import pytest

from ballot_campaign.domain.events import (
    CAMPAIGN_EVENT_SCHEMA_VERSION,
    NoWinnerEvent,
    VoteCastEvent,
    WorkflowStatusChangedEvent,
)
from ballot_campaign.domain.models.workflow_status import WorkflowStatus

NOW = datetime(2024, 1, 1, tzinfo=timezone.utc)


class TestEventSerialization:
    """Tests for CampaignEvent.to_dict()."""

    def test_status_changed(self) -> None:
        event = WorkflowStatusChangedEvent(
            occurred_at=NOW,
            generation=0,
            previous_status=WorkflowStatus.REGISTERING_VOTERS,
            new_status=WorkflowStatus.PROPOSALS_REGISTRATION_STARTED,
            triggered_by="administrator",
        )

        assert event.to_dict() == {
            "event_type": "campaign.workflow.status_changed",
            "occurred_at": NOW.isoformat(),
            "generation": 0,
            "previous_status": "RegisteringVoters",
            "new_status": "ProposalsRegistrationStarted",
            "triggered_by": "administrator",
            "schema_version": CAMPAIGN_EVENT_SCHEMA_VERSION,
        }

    def test_vote_cast_attributes_choice(self) -> None:
        event = VoteCastEvent(
            occurred_at=NOW, generation=2, voter_id="alice", proposal_id=1
        )

        payload = event.to_dict()

        assert payload["event_type"] == "campaign.vote.cast"
        assert payload["voter_id"] == "alice"
        assert payload["proposal_id"] == 1

    def test_no_winner_lists_tied_ids(self) -> None:
        event = NoWinnerEvent(
            occurred_at=NOW,
            generation=0,
            reason="tie among two or more proposals",
            max_votes=3,
            tied_proposal_ids=(0, 1),
        )

        assert event.to_dict()["tied_proposal_ids"] == [0, 1]

    def test_events_are_frozen(self) -> None:
        event = VoteCastEvent(
            occurred_at=NOW, generation=0, voter_id="alice", proposal_id=1
        )

        with pytest.raises(FrozenInstanceError):
            event.proposal_id = 2  # type: ignore[misc]
