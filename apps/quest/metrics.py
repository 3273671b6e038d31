"""Quest 도메인 Prometheus 메트릭"""

from fastapi import FastAPI
from fastapi.responses import Response
from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)

REGISTRY = CollectorRegistry(auto_describe=True)
METRICS_PATH = "/metrics/status"

QUEST_EVALUATIONS = Counter(
    "quest_evaluations_total",
    "Quest submission evaluations by outcome",
    ["status", "reason"],
    registry=REGISTRY,
)

QUEST_MODERATION_FAILURES = Counter(
    "quest_moderation_failures_total",
    "Evaluations aborted because content moderation failed or timed out",
    registry=REGISTRY,
)

QUEST_SUBMISSION_SCORE = Histogram(
    "quest_submission_score",
    "Final score of scored quest submissions",
    buckets=(0, 1, 2, 3, 4, 5, 6, 7, 8, 9),
    registry=REGISTRY,
)


def register_metrics(app: FastAPI) -> None:
    """Prometheus /metrics 엔드포인트 등록"""

    @app.get(METRICS_PATH, include_in_schema=False)
    async def metrics_endpoint() -> Response:
        return Response(content=generate_latest(REGISTRY), media_type=CONTENT_TYPE_LATEST)
