"""API request/response models."""

from ballot_campaign.api.models.campaign import (
    CampaignErrorResponse,
    CampaignSummaryResponse,
    CastVoteRequest,
    PhaseResponse,
    PhaseTransitionResponse,
    ProposalListResponse,
    ProposalResponse,
    RegisterVoterRequest,
    SubmitProposalRequest,
    TallyResultResponse,
    TransitionHistoryResponse,
    VoterChoiceResponse,
    VoterListResponse,
    VoterResponse,
    WinnerResponse,
)
from ballot_campaign.api.models.health import HealthResponse

__all__ = [
    "CampaignErrorResponse",
    "CampaignSummaryResponse",
    "CastVoteRequest",
    "HealthResponse",
    "PhaseResponse",
    "PhaseTransitionResponse",
    "ProposalListResponse",
    "ProposalResponse",
    "RegisterVoterRequest",
    "SubmitProposalRequest",
    "TallyResultResponse",
    "TransitionHistoryResponse",
    "VoterChoiceResponse",
    "VoterListResponse",
    "VoterResponse",
    "WinnerResponse",
]
