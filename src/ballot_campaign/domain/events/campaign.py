"""Campaign event payloads.

This module defines the observable events a campaign emits:
- VoterRegisteredEvent: an identity became eligible
- ProposalRegisteredEvent: a proposal was appended
- WorkflowStatusChangedEvent: the phase moved (forward or reset)
- VoteCastEvent: a voter cast their single vote
- WinnerSelectedEvent: a tally elected exactly one proposal
- NoWinnerEvent: a tally ended without a winner

Events are published after the change they describe has fully applied.
Correctness of the campaign never depends on any event being consumed.
Votes are not secret: VoteCastEvent attributes the choice to the voter.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, ClassVar

from ballot_campaign.domain.models.workflow_status import WorkflowStatus

# Schema version for campaign events
CAMPAIGN_EVENT_SCHEMA_VERSION: str = "1.0.0"

VOTER_REGISTERED_EVENT_TYPE: str = "campaign.voter.registered"
PROPOSAL_REGISTERED_EVENT_TYPE: str = "campaign.proposal.registered"
WORKFLOW_STATUS_CHANGED_EVENT_TYPE: str = "campaign.workflow.status_changed"
VOTE_CAST_EVENT_TYPE: str = "campaign.vote.cast"
WINNER_SELECTED_EVENT_TYPE: str = "campaign.tally.winner_selected"
NO_WINNER_EVENT_TYPE: str = "campaign.tally.no_winner"


@dataclass(frozen=True, eq=True)
class CampaignEvent:
    """Base payload shared by every campaign event.

    Attributes:
        occurred_at: When the change was applied (UTC).
        generation: Campaign generation the change belongs to.
    """

    event_type: ClassVar[str] = "campaign.event"

    occurred_at: datetime
    generation: int

    def _payload(self) -> dict[str, Any]:
        return {}

    def to_dict(self) -> dict[str, Any]:
        """Convert payload to dict for publication.

        Returns:
            Dict with event_type, schema_version and the event fields.
        """
        return {
            "event_type": self.event_type,
            "occurred_at": self.occurred_at.isoformat(),
            "generation": self.generation,
            **self._payload(),
            "schema_version": CAMPAIGN_EVENT_SCHEMA_VERSION,
        }


@dataclass(frozen=True, eq=True)
class VoterRegisteredEvent(CampaignEvent):
    event_type: ClassVar[str] = VOTER_REGISTERED_EVENT_TYPE

    voter_id: str

    def _payload(self) -> dict[str, Any]:
        return {"voter_id": self.voter_id}


@dataclass(frozen=True, eq=True)
class ProposalRegisteredEvent(CampaignEvent):
    event_type: ClassVar[str] = PROPOSAL_REGISTERED_EVENT_TYPE

    proposal_id: int
    submitted_by: str

    def _payload(self) -> dict[str, Any]:
        return {"proposal_id": self.proposal_id, "submitted_by": self.submitted_by}


@dataclass(frozen=True, eq=True)
class WorkflowStatusChangedEvent(CampaignEvent):
    """Phase change, including the reset edge.

    Attributes:
        previous_status: Phase before the change.
        new_status: Phase after the change.
        triggered_by: Identity that requested the change.
    """

    event_type: ClassVar[str] = WORKFLOW_STATUS_CHANGED_EVENT_TYPE

    previous_status: WorkflowStatus
    new_status: WorkflowStatus
    triggered_by: str

    def _payload(self) -> dict[str, Any]:
        return {
            "previous_status": self.previous_status.value,
            "new_status": self.new_status.value,
            "triggered_by": self.triggered_by,
        }


@dataclass(frozen=True, eq=True)
class VoteCastEvent(CampaignEvent):
    event_type: ClassVar[str] = VOTE_CAST_EVENT_TYPE

    voter_id: str
    proposal_id: int

    def _payload(self) -> dict[str, Any]:
        return {"voter_id": self.voter_id, "proposal_id": self.proposal_id}


@dataclass(frozen=True, eq=True)
class WinnerSelectedEvent(CampaignEvent):
    event_type: ClassVar[str] = WINNER_SELECTED_EVENT_TYPE

    proposal_id: int
    vote_count: int

    def _payload(self) -> dict[str, Any]:
        return {"proposal_id": self.proposal_id, "vote_count": self.vote_count}


@dataclass(frozen=True, eq=True)
class NoWinnerEvent(CampaignEvent):
    """Tally ended without a winner.

    Attributes:
        reason: Why no proposal was elected.
        max_votes: Highest vote count observed.
        tied_proposal_ids: Proposals sharing max_votes (empty when nobody voted).
    """

    event_type: ClassVar[str] = NO_WINNER_EVENT_TYPE

    reason: str
    max_votes: int
    tied_proposal_ids: tuple[int, ...] = field(default_factory=tuple)

    def _payload(self) -> dict[str, Any]:
        return {
            "reason": self.reason,
            "max_votes": self.max_votes,
            "tied_proposal_ids": list(self.tied_proposal_ids),
        }
