"""Unit tests for campaign error kinds and codes."""

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
    NoWinnerAvailableError,
    PreconditionNotMetError,
    UnauthorizedError,
    VoterHasNotVotedError,
    VoterNotEligibleError,
    WrongPhaseError,
)
from ballot_campaign.domain.exceptions import CampaignError
from ballot_campaign.domain.models.workflow_status import WorkflowStatus


class TestErrorCodes:
    """Every error maps to one of four stable codes."""

    @pytest.mark.parametrize(
        "error,code",
        [
            (UnauthorizedError("mallory", "add_voter"), "UNAUTHORIZED"),
            (
                InvalidTransitionError(
                    WorkflowStatus.REGISTERING_VOTERS, WorkflowStatus.VOTES_TALLIED
                ),
                "INVALID_TRANSITION",
            ),
            (
                WrongPhaseError(
                    "vote",
                    WorkflowStatus.REGISTERING_VOTERS,
                    (WorkflowStatus.VOTING_SESSION_STARTED,),
                ),
                "INVALID_TRANSITION",
            ),
            (AlreadyRegisteredError("alice"), "PRECONDITION_NOT_MET"),
            (NotRegisteredError("alice"), "PRECONDITION_NOT_MET"),
            (VoterNotEligibleError("alice", "vote"), "PRECONDITION_NOT_MET"),
            (AlreadyVotedError("alice"), "PRECONDITION_NOT_MET"),
            (VoterHasNotVotedError("alice"), "PRECONDITION_NOT_MET"),
            (DuplicateProposalError("Alpha", 0), "PRECONDITION_NOT_MET"),
            (InvalidDescriptionError(), "PRECONDITION_NOT_MET"),
            (InvalidProposalIdError(5, 2), "PRECONDITION_NOT_MET"),
            (EmptyRegistryError("voter", "open"), "PRECONDITION_NOT_MET"),
            (NoWinnerAvailableError("tie"), "NO_WINNER_AVAILABLE"),
        ],
    )
    def test_error_code(self, error: CampaignError, code: str) -> None:
        assert isinstance(error, CampaignError)
        assert error.error_code == code

    def test_precondition_subclasses(self) -> None:
        assert issubclass(AlreadyVotedError, PreconditionNotMetError)
        assert issubclass(WrongPhaseError, InvalidTransitionError)


class TestMessages:
    """Tests for human-readable messages."""

    def test_invalid_transition_lists_allowed(self) -> None:
        error = InvalidTransitionError(
            WorkflowStatus.REGISTERING_VOTERS,
            WorkflowStatus.VOTES_TALLIED,
            allowed_transitions=[WorkflowStatus.PROPOSALS_REGISTRATION_STARTED],
        )

        assert "RegisteringVoters -> VotesTallied" in str(error)
        assert "ProposalsRegistrationStarted" in str(error)

    def test_wrong_phase_names_operation(self) -> None:
        error = WrongPhaseError(
            "vote",
            WorkflowStatus.REGISTERING_VOTERS,
            (WorkflowStatus.VOTING_SESSION_STARTED,),
        )

        assert str(error) == (
            "vote is not allowed during RegisteringVoters; "
            "required phase: VotingSessionStarted"
        )

    def test_no_winner_reason(self) -> None:
        assert str(NoWinnerAvailableError("tie")) == "No winner available: tie"
