"""Workflow state machine for campaign phases.

Owns the current phase and applies validated transitions only. The state
machine checks edges, not business guards; the controller evaluates the
guard predicate of an edge before calling ``advance_to``.

Every applied transition is returned as a PhaseTransition and appended to
the history, so collaborators can observe (previous, new) pairs.

Timestamps are supplied by the caller; this module never reads the clock.
"""

from __future__ import annotations

from datetime import datetime

from ballot_campaign.domain.errors.campaign import InvalidTransitionError
from ballot_campaign.domain.models.workflow_status import (
    INITIAL_STATUS,
    PhaseTransition,
    WorkflowStatus,
    is_reset_transition,
    is_valid_transition,
)


class WorkflowStateMachine:
    """Single-campaign phase holder with forward-only transitions.

    Attributes:
        generation: Number of completed resets (0 for the first campaign).
    """

    def __init__(self, initial: WorkflowStatus = INITIAL_STATUS) -> None:
        self._current = initial
        self._generation = 0
        self._history: list[PhaseTransition] = []

    def current(self) -> WorkflowStatus:
        return self._current

    @property
    def generation(self) -> int:
        return self._generation

    def allowed_targets(self) -> list[WorkflowStatus]:
        """Valid targets from the current phase, in workflow order."""
        targets = self._current.valid_transitions()
        return sorted(targets, key=lambda status: status.index)

    def can_advance_to(self, target: WorkflowStatus) -> bool:
        return is_valid_transition(self._current, target)

    def ensure_can_advance_to(self, target: WorkflowStatus) -> None:
        """Check an edge without applying it.

        Raises:
            InvalidTransitionError: If the edge is neither the forward
                edge nor the reset edge.
        """
        if not self.can_advance_to(target):
            raise InvalidTransitionError(
                from_status=self._current,
                to_status=target,
                allowed_transitions=self.allowed_targets(),
            )

    def advance_to(self, target: WorkflowStatus, timestamp: datetime) -> PhaseTransition:
        """Apply a transition.

        Args:
            target: Requested next phase.
            timestamp: Current time from the caller.

        Returns:
            The applied PhaseTransition record.

        Raises:
            InvalidTransitionError: If the edge is not permitted.
        """
        self.ensure_can_advance_to(target)

        transition = PhaseTransition(
            previous=self._current,
            new=target,
            generation=self._generation,
            transitioned_at=timestamp,
        )
        if is_reset_transition(self._current, target):
            self._generation += 1
        self._current = target
        self._history.append(transition)
        return transition

    def history(self) -> tuple[PhaseTransition, ...]:
        """All applied transitions, oldest first, across generations."""
        return tuple(self._history)
