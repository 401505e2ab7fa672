"""Owned campaign state.

The phase, both registries and the tally state form one resource. The
campaign controller owns a single CampaignState and serializes every
access to it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ballot_campaign.domain.models.proposal import ProposalRegistry
from ballot_campaign.domain.models.voter import VoterRegistry
from ballot_campaign.domain.models.workflow_status import WorkflowStatus
from ballot_campaign.domain.services.tally_engine import TallyEngine
from ballot_campaign.domain.services.workflow_state_machine import (
    WorkflowStateMachine,
)


@dataclass
class CampaignState:
    """Registries, phase and tally of one campaign."""

    voters: VoterRegistry = field(default_factory=VoterRegistry)
    proposals: ProposalRegistry = field(default_factory=ProposalRegistry)
    workflow: WorkflowStateMachine = field(default_factory=WorkflowStateMachine)
    tally: TallyEngine = field(default_factory=TallyEngine)

    @property
    def phase(self) -> WorkflowStatus:
        return self.workflow.current()

    def summary(self) -> dict[str, Any]:
        """Snapshot of counters for status reporting."""
        return {
            "phase": self.phase.value,
            "generation": self.workflow.generation,
            "voters_registered": self.voters.registered_count(),
            "voters_known": len(self.voters),
            "proposals": self.proposals.count(),
            "votes_cast": self.voters.voted_count(),
            "winner_elected": (
                self.phase is WorkflowStatus.VOTES_TALLIED and self.tally.winner_elected
            ),
        }
