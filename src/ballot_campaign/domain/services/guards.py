"""Guard predicates for campaign operations.

Each guard inspects caller, phase or registry state and raises the
matching domain error when the call must be refused. Guards never
mutate state. The controller composes them before every mutation, so a
refused call leaves the campaign untouched.

OPERATION_PHASES is the single table of which phase each operation
requires.
"""

from __future__ import annotations

from ballot_campaign.domain.errors.campaign import (
    AlreadyRegisteredError,
    AlreadyVotedError,
    DuplicateProposalError,
    EmptyRegistryError,
    InvalidDescriptionError,
    InvalidProposalIdError,
    NotRegisteredError,
    UnauthorizedError,
    VoterHasNotVotedError,
    VoterNotEligibleError,
    WrongPhaseError,
)
from ballot_campaign.domain.models.campaign_state import CampaignState
from ballot_campaign.domain.models.workflow_status import WORKFLOW_ORDER, WorkflowStatus

ADD_VOTER = "add_voter"
OPEN_PROPOSALS_REGISTRATION = "open_proposals_registration"
ADD_PROPOSAL = "add_proposal"
CLOSE_PROPOSALS_REGISTRATION = "close_proposals_registration"
OPEN_VOTING_SESSION = "open_voting_session"
VOTE = "vote"
CLOSE_VOTING_SESSION = "close_voting_session"
START_COUNTING = "start_counting"
RESET_CAMPAIGN = "reset_campaign"
GET_VOTER_CHOICE = "get_voter_choice"
GET_WINNER = "get_winner"

OPERATION_PHASES: dict[str, tuple[WorkflowStatus, ...]] = {
    ADD_VOTER: (WorkflowStatus.REGISTERING_VOTERS,),
    OPEN_PROPOSALS_REGISTRATION: (WorkflowStatus.REGISTERING_VOTERS,),
    ADD_PROPOSAL: (WorkflowStatus.PROPOSALS_REGISTRATION_STARTED,),
    CLOSE_PROPOSALS_REGISTRATION: (WorkflowStatus.PROPOSALS_REGISTRATION_STARTED,),
    OPEN_VOTING_SESSION: (WorkflowStatus.PROPOSALS_REGISTRATION_ENDED,),
    VOTE: (WorkflowStatus.VOTING_SESSION_STARTED,),
    CLOSE_VOTING_SESSION: (WorkflowStatus.VOTING_SESSION_STARTED,),
    START_COUNTING: (WorkflowStatus.VOTING_SESSION_ENDED,),
    RESET_CAMPAIGN: WORKFLOW_ORDER[1:],
    GET_VOTER_CHOICE: (
        WorkflowStatus.VOTING_SESSION_ENDED,
        WorkflowStatus.VOTES_TALLIED,
    ),
    GET_WINNER: (WorkflowStatus.VOTES_TALLIED,),
}

ADMINISTRATOR_OPERATIONS: frozenset[str] = frozenset(
    {
        ADD_VOTER,
        OPEN_PROPOSALS_REGISTRATION,
        CLOSE_PROPOSALS_REGISTRATION,
        OPEN_VOTING_SESSION,
        CLOSE_VOTING_SESSION,
        START_COUNTING,
        RESET_CAMPAIGN,
    }
)


def is_phase_allowed(state: CampaignState, operation: str) -> bool:
    return state.phase in OPERATION_PHASES[operation]


def require_administrator(caller_id: str, is_administrator: bool, operation: str) -> None:
    """Refuse non-administrators for administrator-only operations.

    Raises:
        UnauthorizedError: If the caller is not the administrator.
    """
    if operation in ADMINISTRATOR_OPERATIONS and not is_administrator:
        raise UnauthorizedError(caller_id, operation)


def require_phase(state: CampaignState, operation: str) -> None:
    """Refuse operations called outside their required phase.

    Raises:
        WrongPhaseError: If the current phase is not in the operation's table row.
    """
    if not is_phase_allowed(state, operation):
        raise WrongPhaseError(operation, state.phase, OPERATION_PHASES[operation])


def require_voters_registered(state: CampaignState, operation: str) -> None:
    if state.voters.registered_count() == 0:
        raise EmptyRegistryError("voter", operation)


def require_proposals_registered(state: CampaignState, operation: str) -> None:
    if state.proposals.count() == 0:
        raise EmptyRegistryError("proposal", operation)


def require_not_registered(state: CampaignState, voter_id: str) -> None:
    if state.voters.is_registered(voter_id):
        raise AlreadyRegisteredError(voter_id)


def require_eligible_voter(state: CampaignState, voter_id: str, operation: str) -> None:
    """Require a registered voter of this generation who has not voted.

    Raises:
        VoterNotEligibleError: If the identity is not registered.
        AlreadyVotedError: If the identity has already voted.
    """
    if not state.voters.is_registered(voter_id):
        raise VoterNotEligibleError(voter_id, operation)
    if state.voters.has_voted(voter_id):
        raise AlreadyVotedError(voter_id)


def require_valid_description(description: str, max_length: int) -> None:
    """Refuse empty, whitespace-only or oversized descriptions.

    Raises:
        InvalidDescriptionError: If the description is unusable.
    """
    if not description or not description.strip():
        raise InvalidDescriptionError()
    if len(description) > max_length:
        raise InvalidDescriptionError(
            f"Proposal description exceeds {max_length} characters "
            f"(got {len(description)})"
        )


def require_unique_description(state: CampaignState, description: str) -> None:
    for proposal in state.proposals.list():
        if proposal.description == description:
            raise DuplicateProposalError(description, proposal.proposal_id)


def require_valid_proposal_id(state: CampaignState, proposal_id: int) -> None:
    if proposal_id < 0 or proposal_id >= state.proposals.count():
        raise InvalidProposalIdError(proposal_id, state.proposals.count())


def require_voted(state: CampaignState, voter_id: str) -> None:
    """Require a registered voter who has cast a vote.

    Raises:
        NotRegisteredError: If the identity is not a registered voter.
        VoterHasNotVotedError: If the voter did not vote.
    """
    if not state.voters.is_registered(voter_id):
        raise NotRegisteredError(voter_id)
    if not state.voters.has_voted(voter_id):
        raise VoterHasNotVotedError(voter_id)
