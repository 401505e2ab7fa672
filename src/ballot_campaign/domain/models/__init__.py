"""Domain models for ballot campaigns.

CampaignState is imported from its own module; it depends on the domain
services and is kept out of this package namespace.
"""

from ballot_campaign.domain.models.proposal import Proposal, ProposalRegistry
from ballot_campaign.domain.models.tally import TallyOutcome, TallyResult
from ballot_campaign.domain.models.voter import Voter, VoterRegistry
from ballot_campaign.domain.models.workflow_status import (
    INITIAL_STATUS,
    TERMINAL_STATUS,
    WORKFLOW_ORDER,
    PhaseTransition,
    WorkflowStatus,
)

__all__: list[str] = [
    "INITIAL_STATUS",
    "TERMINAL_STATUS",
    "WORKFLOW_ORDER",
    "PhaseTransition",
    "Proposal",
    "ProposalRegistry",
    "TallyOutcome",
    "TallyResult",
    "Voter",
    "VoterRegistry",
    "WorkflowStatus",
]
