"""
Infrastructure layer - Adapters, stubs, observability and monitoring.

This layer implements the application ports:
- Event bus adapter for campaign event publication
- Administrator check stub for single-owner deployments
- Structured logging and correlation ids
- Prometheus campaign metrics
"""
