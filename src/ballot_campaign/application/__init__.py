"""
Application layer - Use cases and orchestration for ballot campaigns.

This layer contains:
- Ports (abstract interfaces for the administrator capability and event publication)
- Services (the campaign controller and its logging base)

This layer may import from domain, but NOT from infrastructure or api.
"""
