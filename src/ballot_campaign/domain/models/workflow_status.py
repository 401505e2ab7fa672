"""Workflow status domain model for campaign phases.

A campaign moves through six phases in a fixed order. Each forward edge
is the only way out of a phase, except for the reset edge which returns
any non-initial phase to REGISTERING_VOTERS and starts a new generation.

State Machine:
    REGISTERING_VOTERS -> PROPOSALS_REGISTRATION_STARTED
    PROPOSALS_REGISTRATION_STARTED -> PROPOSALS_REGISTRATION_ENDED
    PROPOSALS_REGISTRATION_ENDED -> VOTING_SESSION_STARTED
    VOTING_SESSION_STARTED -> VOTING_SESSION_ENDED
    VOTING_SESSION_ENDED -> VOTES_TALLIED
    (any except REGISTERING_VOTERS) -> REGISTERING_VOTERS  (reset)
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any


class WorkflowStatus(Enum):
    """Phase of a campaign generation, in required order."""

    REGISTERING_VOTERS = "RegisteringVoters"
    PROPOSALS_REGISTRATION_STARTED = "ProposalsRegistrationStarted"
    PROPOSALS_REGISTRATION_ENDED = "ProposalsRegistrationEnded"
    VOTING_SESSION_STARTED = "VotingSessionStarted"
    VOTING_SESSION_ENDED = "VotingSessionEnded"
    VOTES_TALLIED = "VotesTallied"

    @property
    def index(self) -> int:
        """Position of this phase in the workflow order (0-based)."""
        return WORKFLOW_ORDER.index(self)

    def next_status(self) -> WorkflowStatus | None:
        """Get the single forward successor of this phase.

        Returns:
            The next phase, or None for VOTES_TALLIED.
        """
        return FORWARD_TRANSITIONS.get(self)

    def valid_transitions(self) -> frozenset[WorkflowStatus]:
        """Get every status reachable from this one in a single step.

        Returns:
            Forward successor (if any) plus the reset target for
            non-initial phases.
        """
        targets: set[WorkflowStatus] = set()
        successor = self.next_status()
        if successor is not None:
            targets.add(successor)
        if self is not INITIAL_STATUS:
            targets.add(INITIAL_STATUS)
        return frozenset(targets)

    def is_at_least(self, other: WorkflowStatus) -> bool:
        """Check whether this phase is at or after another in the order."""
        return self.index >= other.index


WORKFLOW_ORDER: tuple[WorkflowStatus, ...] = (
    WorkflowStatus.REGISTERING_VOTERS,
    WorkflowStatus.PROPOSALS_REGISTRATION_STARTED,
    WorkflowStatus.PROPOSALS_REGISTRATION_ENDED,
    WorkflowStatus.VOTING_SESSION_STARTED,
    WorkflowStatus.VOTING_SESSION_ENDED,
    WorkflowStatus.VOTES_TALLIED,
)

INITIAL_STATUS: WorkflowStatus = WorkflowStatus.REGISTERING_VOTERS

# Only exit from VOTES_TALLIED is reset
TERMINAL_STATUS: WorkflowStatus = WorkflowStatus.VOTES_TALLIED

FORWARD_TRANSITIONS: dict[WorkflowStatus, WorkflowStatus] = {
    current: successor
    for current, successor in zip(WORKFLOW_ORDER, WORKFLOW_ORDER[1:])
}


def is_valid_transition(from_status: WorkflowStatus, to_status: WorkflowStatus) -> bool:
    """Check if a single-step transition is permitted.

    Args:
        from_status: Current status.
        to_status: Proposed next status.

    Returns:
        True if the edge is a forward edge or the reset edge.
    """
    return to_status in from_status.valid_transitions()


def is_reset_transition(from_status: WorkflowStatus, to_status: WorkflowStatus) -> bool:
    """Check if an edge is the reset edge back to the initial phase."""
    return to_status is INITIAL_STATUS and from_status is not INITIAL_STATUS


@dataclass(frozen=True, eq=True)
class PhaseTransition:
    """Record of one applied phase change.

    Attributes:
        previous: Status before the change.
        new: Status after the change.
        generation: Campaign generation the change closed or advanced.
        transitioned_at: When the change was applied (UTC).
    """

    previous: WorkflowStatus
    new: WorkflowStatus
    generation: int
    transitioned_at: datetime

    @property
    def is_reset(self) -> bool:
        return is_reset_transition(self.previous, self.new)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "previous": self.previous.value,
            "new": self.new.value,
            "generation": self.generation,
            "transitioned_at": self.transitioned_at.isoformat(),
            "is_reset": self.is_reset,
        }
