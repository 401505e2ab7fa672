"""Campaign API request/response models.

Pydantic models for the /v1/campaign endpoints. Responses are built from
the frozen domain records with the from_domain() classmethods, so the
routes never hand-assemble field lists.
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, Field, PlainSerializer

from ballot_campaign.domain.models.proposal import Proposal
from ballot_campaign.domain.models.tally import TallyResult
from ballot_campaign.domain.models.voter import Voter
from ballot_campaign.domain.models.workflow_status import PhaseTransition

# Custom datetime serializer for ISO 8601 with Z suffix (Pydantic v2)
DateTimeWithZ = Annotated[
    datetime,
    PlainSerializer(
        lambda v: v.isoformat().replace("+00:00", "Z") if v else None, return_type=str
    ),
]


class RegisterVoterRequest(BaseModel):
    """Request to register a voter (administrator only).

    Attributes:
        voter_id: Identity to make eligible for this generation.
    """

    voter_id: str = Field(..., min_length=1, description="Identity to register")


class SubmitProposalRequest(BaseModel):
    """Request to submit a proposal.

    Emptiness and length are checked by the campaign, not here, so the
    refusal carries the campaign's own error code.
    """

    description: str = Field(..., description="Free-text proposal description")


class CastVoteRequest(BaseModel):
    proposal_id: int = Field(..., description="Id of the chosen proposal")


class PhaseResponse(BaseModel):
    phase: str
    generation: int


class VoterResponse(BaseModel):
    """Voting state of one identity."""

    voter_id: str
    is_registered: bool
    has_voted: bool
    voted_proposal_id: int

    @classmethod
    def from_domain(cls, voter: Voter) -> VoterResponse:
        return cls(
            voter_id=voter.voter_id,
            is_registered=voter.is_registered,
            has_voted=voter.has_voted,
            voted_proposal_id=voter.voted_proposal_id,
        )


class VoterListResponse(BaseModel):
    voters: list[str] = Field(
        default_factory=list,
        description="Every identity ever registered, in registration order",
    )


class VoterChoiceResponse(BaseModel):
    voter_id: str
    proposal_id: int


class ProposalResponse(BaseModel):
    proposal_id: int
    description: str
    vote_count: int

    @classmethod
    def from_domain(cls, proposal: Proposal) -> ProposalResponse:
        return cls(
            proposal_id=proposal.proposal_id,
            description=proposal.description,
            vote_count=proposal.vote_count,
        )


class ProposalListResponse(BaseModel):
    proposals: list[ProposalResponse] = Field(default_factory=list)


class PhaseTransitionResponse(BaseModel):
    """One applied phase change.

    Attributes:
        previous_status: Phase before the change.
        new_status: Phase after the change.
        generation: Generation the change belongs to.
        transitioned_at: When the change was applied (ISO 8601 UTC).
        is_reset: True for the reset edge.
    """

    previous_status: str
    new_status: str
    generation: int
    transitioned_at: DateTimeWithZ
    is_reset: bool

    @classmethod
    def from_domain(cls, transition: PhaseTransition) -> PhaseTransitionResponse:
        return cls(
            previous_status=transition.previous.value,
            new_status=transition.new.value,
            generation=transition.generation,
            transitioned_at=transition.transitioned_at,
            is_reset=transition.is_reset,
        )


class TransitionHistoryResponse(BaseModel):
    transitions: list[PhaseTransitionResponse] = Field(default_factory=list)


class TallyResultResponse(BaseModel):
    """Outcome of a tally.

    Attributes:
        outcome: WINNER or NO_WINNER.
        winner_elected: True when exactly one proposal held the maximum.
        winning_proposal_id: Set only when a winner was elected.
        max_votes: Highest vote count observed.
        top_proposal_ids: Every proposal holding max_votes.
        reason: Why no winner was elected, when none was.
        tallied_at: When the tally ran (ISO 8601 UTC).
    """

    outcome: str
    winner_elected: bool
    winning_proposal_id: int | None = None
    max_votes: int
    top_proposal_ids: list[int] = Field(default_factory=list)
    reason: str | None = None
    tallied_at: DateTimeWithZ

    @classmethod
    def from_domain(cls, result: TallyResult) -> TallyResultResponse:
        return cls(
            outcome=result.outcome.value,
            winner_elected=result.winner_elected,
            winning_proposal_id=result.winning_proposal_id,
            max_votes=result.max_votes,
            top_proposal_ids=list(result.top_proposal_ids),
            reason=result.reason,
            tallied_at=result.tallied_at,
        )


class WinnerResponse(BaseModel):
    proposal_id: int
    description: str
    vote_count: int


class CampaignSummaryResponse(BaseModel):
    """Counters describing the campaign at a glance."""

    administrator: str
    phase: str
    generation: int
    voters_registered: int
    voters_known: int
    proposals: int
    votes_cast: int
    winner_elected: bool


class CampaignErrorResponse(BaseModel):
    """Error response for campaign operations (RFC 7807).

    Attributes:
        type: Error type URI.
        title: Human-readable error title.
        status: HTTP status code.
        detail: Detailed error message.
        instance: Request path that caused the error.
        error_code: Stable campaign error code.
        phase: Campaign phase when the call was refused.
    """

    type: str = Field(..., description="Error type URI")
    title: str = Field(..., description="Human-readable error title")
    status: int = Field(..., description="HTTP status code")
    detail: str = Field(..., description="Detailed error message")
    instance: str = Field(..., description="Request path that caused the error")
    error_code: str = Field(..., description="Stable campaign error code")
    phase: str | None = Field(
        default=None, description="Campaign phase when the call was refused"
    )
