"""Unit tests for WorkflowStatus and PhaseTransition."""

from datetime import datetime, timezone

import pytest

from ballot_campaign.domain.models.workflow_status import (
    FORWARD_TRANSITIONS,
    INITIAL_STATUS,
    TERMINAL_STATUS,
    WORKFLOW_ORDER,
    PhaseTransition,
    WorkflowStatus,
    is_reset_transition,
    is_valid_transition,
)


class TestWorkflowOrder:
    """Tests for the fixed phase order."""

    def test_six_phases_in_order(self) -> None:
        assert [s.value for s in WORKFLOW_ORDER] == [
            "RegisteringVoters",
            "ProposalsRegistrationStarted",
            "ProposalsRegistrationEnded",
            "VotingSessionStarted",
            "VotingSessionEnded",
            "VotesTallied",
        ]

    def test_index_matches_position(self) -> None:
        for position, status in enumerate(WORKFLOW_ORDER):
            assert status.index == position

    def test_initial_and_terminal(self) -> None:
        assert INITIAL_STATUS is WorkflowStatus.REGISTERING_VOTERS
        assert TERMINAL_STATUS is WorkflowStatus.VOTES_TALLIED

    def test_terminal_has_no_forward_successor(self) -> None:
        assert TERMINAL_STATUS.next_status() is None
        assert TERMINAL_STATUS not in FORWARD_TRANSITIONS

    def test_is_at_least(self) -> None:
        assert WorkflowStatus.VOTES_TALLIED.is_at_least(WorkflowStatus.VOTING_SESSION_ENDED)
        assert not WorkflowStatus.REGISTERING_VOTERS.is_at_least(
            WorkflowStatus.PROPOSALS_REGISTRATION_STARTED
        )


class TestTransitions:
    """Tests for edge validity."""

    @pytest.mark.parametrize("current,successor", list(FORWARD_TRANSITIONS.items()))
    def test_forward_edges_valid(
        self, current: WorkflowStatus, successor: WorkflowStatus
    ) -> None:
        assert is_valid_transition(current, successor)

    def test_initial_only_moves_forward(self) -> None:
        assert INITIAL_STATUS.valid_transitions() == frozenset(
            {WorkflowStatus.PROPOSALS_REGISTRATION_STARTED}
        )

    @pytest.mark.parametrize("status", WORKFLOW_ORDER[1:])
    def test_reset_edge_from_every_later_phase(self, status: WorkflowStatus) -> None:
        assert is_valid_transition(status, INITIAL_STATUS)
        assert is_reset_transition(status, INITIAL_STATUS)

    def test_skipping_a_phase_is_invalid(self) -> None:
        assert not is_valid_transition(
            WorkflowStatus.REGISTERING_VOTERS, WorkflowStatus.VOTING_SESSION_STARTED
        )

    def test_backward_non_reset_edge_is_invalid(self) -> None:
        assert not is_valid_transition(
            WorkflowStatus.VOTING_SESSION_ENDED, WorkflowStatus.VOTING_SESSION_STARTED
        )

    def test_self_transition_is_invalid(self) -> None:
        assert not is_valid_transition(
            WorkflowStatus.VOTES_TALLIED, WorkflowStatus.VOTES_TALLIED
        )
        assert not is_reset_transition(INITIAL_STATUS, INITIAL_STATUS)


class TestPhaseTransition:
    """Tests for the PhaseTransition record."""

    def test_to_dict(self) -> None:
        when = datetime(2024, 1, 1, tzinfo=timezone.utc)
        transition = PhaseTransition(
            previous=WorkflowStatus.VOTES_TALLIED,
            new=WorkflowStatus.REGISTERING_VOTERS,
            generation=0,
            transitioned_at=when,
        )

        assert transition.is_reset is True
        assert transition.to_dict() == {
            "previous": "VotesTallied",
            "new": "RegisteringVoters",
            "generation": 0,
            "transitioned_at": when.isoformat(),
            "is_reset": True,
        }
