"""Domain errors for ballot campaigns.

Provides specific exception classes for different failure scenarios.
All exceptions inherit from CampaignError.
"""

from ballot_campaign.domain.errors.campaign import (
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

__all__: list[str] = [
    "AlreadyRegisteredError",
    "AlreadyVotedError",
    "DuplicateProposalError",
    "EmptyRegistryError",
    "InvalidDescriptionError",
    "InvalidProposalIdError",
    "InvalidTransitionError",
    "NoWinnerAvailableError",
    "NotRegisteredError",
    "PreconditionNotMetError",
    "UnauthorizedError",
    "VoterHasNotVotedError",
    "VoterNotEligibleError",
    "WrongPhaseError",
]
