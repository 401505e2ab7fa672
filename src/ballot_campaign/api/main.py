"""FastAPI application entry point for the ballot campaign."""

from fastapi import FastAPI

from ballot_campaign import __version__
from ballot_campaign.api.middleware.logging_middleware import LoggingMiddleware
from ballot_campaign.api.routes.campaign import router as campaign_router
from ballot_campaign.api.routes.health import router as health_router
from ballot_campaign.api.routes.metrics import router as metrics_router
from ballot_campaign.bootstrap.campaign import get_campaign_config
from ballot_campaign.bootstrap.logging import configure_structlog

configure_structlog(get_campaign_config().environment)

app = FastAPI(
    title="Ballot Campaign API",
    description="Single-administrator election campaign",
    version=__version__,
)

app.add_middleware(LoggingMiddleware)
app.include_router(health_router)
app.include_router(metrics_router)
app.include_router(campaign_router)
