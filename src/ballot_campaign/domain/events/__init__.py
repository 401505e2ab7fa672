"""Campaign domain events."""

from ballot_campaign.domain.events.campaign import (
    CAMPAIGN_EVENT_SCHEMA_VERSION,
    NO_WINNER_EVENT_TYPE,
    PROPOSAL_REGISTERED_EVENT_TYPE,
    VOTE_CAST_EVENT_TYPE,
    VOTER_REGISTERED_EVENT_TYPE,
    WINNER_SELECTED_EVENT_TYPE,
    WORKFLOW_STATUS_CHANGED_EVENT_TYPE,
    CampaignEvent,
    NoWinnerEvent,
    ProposalRegisteredEvent,
    VoteCastEvent,
    VoterRegisteredEvent,
    WinnerSelectedEvent,
    WorkflowStatusChangedEvent,
)

__all__: list[str] = [
    "CAMPAIGN_EVENT_SCHEMA_VERSION",
    "NO_WINNER_EVENT_TYPE",
    "PROPOSAL_REGISTERED_EVENT_TYPE",
    "VOTE_CAST_EVENT_TYPE",
    "VOTER_REGISTERED_EVENT_TYPE",
    "WINNER_SELECTED_EVENT_TYPE",
    "WORKFLOW_STATUS_CHANGED_EVENT_TYPE",
    "CampaignEvent",
    "NoWinnerEvent",
    "ProposalRegisteredEvent",
    "VoteCastEvent",
    "VoterRegisteredEvent",
    "WinnerSelectedEvent",
    "WorkflowStatusChangedEvent",
]
