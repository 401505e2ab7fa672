"""Unit tests for campaign guard predicates."""

from datetime import datetime, timezone

import pytest

from ballot_campaign.domain.errors import (
    AlreadyRegisteredError,
    AlreadyVotedError,
    DuplicateProposalError,
    EmptyRegistryError,
    InvalidDescriptionError,
    InvalidProposalIdError,
    InvalidTransitionError,
    NotRegisteredError,
    UnauthorizedError,
    VoterHasNotVotedError,
    VoterNotEligibleError,
    WrongPhaseError,
)
from ballot_campaign.domain.models.campaign_state import CampaignState
from ballot_campaign.domain.models.workflow_status import WORKFLOW_ORDER, WorkflowStatus
from ballot_campaign.domain.services import guards

NOW = datetime(2024, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def state() -> CampaignState:
    return CampaignState()


def _move_to(state: CampaignState, target: WorkflowStatus) -> None:
    for status in WORKFLOW_ORDER[1 : target.index + 1]:
        state.workflow.advance_to(status, NOW)


class TestOperationTable:
    """Tests for the operation/phase table."""

    def test_every_operation_has_a_phase_row(self) -> None:
        assert guards.ADMINISTRATOR_OPERATIONS <= set(guards.OPERATION_PHASES)

    def test_voter_operations_are_not_administrator_only(self) -> None:
        assert guards.ADD_PROPOSAL not in guards.ADMINISTRATOR_OPERATIONS
        assert guards.VOTE not in guards.ADMINISTRATOR_OPERATIONS

    def test_reset_allowed_everywhere_but_initial(self) -> None:
        assert guards.OPERATION_PHASES[guards.RESET_CAMPAIGN] == WORKFLOW_ORDER[1:]


class TestAuthorityAndPhase:
    """Tests for caller and phase guards."""

    def test_non_administrator_refused(self) -> None:
        with pytest.raises(UnauthorizedError) as exc_info:
            guards.require_administrator("mallory", False, guards.ADD_VOTER)

        assert exc_info.value.operation == guards.ADD_VOTER

    def test_voter_operation_skips_authority(self) -> None:
        guards.require_administrator("alice", False, guards.VOTE)

    def test_wrong_phase(self, state: CampaignState) -> None:
        with pytest.raises(WrongPhaseError) as exc_info:
            guards.require_phase(state, guards.VOTE)

        assert isinstance(exc_info.value, InvalidTransitionError)
        assert exc_info.value.current is WorkflowStatus.REGISTERING_VOTERS
        assert exc_info.value.required == (WorkflowStatus.VOTING_SESSION_STARTED,)

    def test_right_phase(self, state: CampaignState) -> None:
        _move_to(state, WorkflowStatus.VOTING_SESSION_ENDED)

        guards.require_phase(state, guards.GET_VOTER_CHOICE)
        assert guards.is_phase_allowed(state, guards.START_COUNTING)


class TestRegistryGuards:
    """Tests for registry-state guards."""

    def test_empty_voter_registry(self, state: CampaignState) -> None:
        with pytest.raises(EmptyRegistryError) as exc_info:
            guards.require_voters_registered(state, guards.OPEN_PROPOSALS_REGISTRATION)

        assert exc_info.value.registry == "voter"

    def test_empty_proposal_registry(self, state: CampaignState) -> None:
        with pytest.raises(EmptyRegistryError):
            guards.require_proposals_registered(
                state, guards.CLOSE_PROPOSALS_REGISTRATION
            )

    def test_already_registered(self, state: CampaignState) -> None:
        state.voters.register("alice")

        with pytest.raises(AlreadyRegisteredError):
            guards.require_not_registered(state, "alice")

    def test_eligible_voter(self, state: CampaignState) -> None:
        with pytest.raises(VoterNotEligibleError):
            guards.require_eligible_voter(state, "alice", guards.VOTE)

        state.voters.register("alice")
        guards.require_eligible_voter(state, "alice", guards.VOTE)

        state.voters.record_vote("alice", 0)
        with pytest.raises(AlreadyVotedError):
            guards.require_eligible_voter(state, "alice", guards.VOTE)

    def test_voter_from_previous_generation_not_eligible(
        self, state: CampaignState
    ) -> None:
        state.voters.register("alice")
        state.voters.reset_all()

        with pytest.raises(VoterNotEligibleError):
            guards.require_eligible_voter(state, "alice", guards.ADD_PROPOSAL)

    @pytest.mark.parametrize("description", ["", "   ", "\n"])
    def test_blank_description(self, description: str) -> None:
        with pytest.raises(InvalidDescriptionError):
            guards.require_valid_description(description, max_length=100)

    def test_oversized_description(self) -> None:
        with pytest.raises(InvalidDescriptionError, match="exceeds 5"):
            guards.require_valid_description("abcdef", max_length=5)

    def test_duplicate_description(self, state: CampaignState) -> None:
        state.proposals.submit("Alpha")

        with pytest.raises(DuplicateProposalError):
            guards.require_unique_description(state, "Alpha")

    def test_proposal_id_bounds(self, state: CampaignState) -> None:
        state.proposals.submit("Alpha")

        guards.require_valid_proposal_id(state, 0)
        with pytest.raises(InvalidProposalIdError):
            guards.require_valid_proposal_id(state, 1)

    def test_require_voted(self, state: CampaignState) -> None:
        with pytest.raises(NotRegisteredError):
            guards.require_voted(state, "alice")

        state.voters.register("alice")
        with pytest.raises(VoterHasNotVotedError):
            guards.require_voted(state, "alice")

        state.voters.record_vote("alice", 0)
        guards.require_voted(state, "alice")
