"""
Domain layer - Pure business logic for ballot campaigns.

This layer contains:
- Domain models (voters, proposals, workflow status, tally results)
- Domain services (state machine, tally engine, guards)
- Domain events
- Domain exceptions

CRITICAL: This layer must NOT import from application, infrastructure, or api.
Only stdlib and typing imports are allowed.
"""

from ballot_campaign.domain.exceptions import CampaignError

__all__: list[str] = ["CampaignError"]
