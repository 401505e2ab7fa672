"""Metrics endpoint for Prometheus scraping.

Exposes the campaign counters and gauges in Prometheus exposition format.
"""

from fastapi import APIRouter, Response

from ballot_campaign.bootstrap.metrics import get_metrics_exporter

router = APIRouter(prefix="/v1", tags=["metrics"])


@router.get(
    "/metrics",
    summary="Prometheus metrics endpoint",
    description="Returns campaign metrics in Prometheus exposition format for scraping.",
    response_class=Response,
    responses={
        200: {
            "description": "Metrics in Prometheus format",
            "content": {"text/plain": {}},
        }
    },
)
async def get_metrics() -> Response:
    exporter = get_metrics_exporter()
    return Response(
        content=exporter.generate_metrics(),
        media_type=exporter.content_type,
    )
