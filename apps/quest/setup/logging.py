"""Logging Configuration.

- ecs (기본): ECS 호환 JSON (ecs_logging.StdlibFormatter)
- text: 로컬 개발용 한 줄 포맷

extra로 전달된 민감 필드(api_key, authorization 등)는 마스킹됩니다.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import ecs_logging

from apps.quest.setup.config import get_settings

SENSITIVE_FIELD_PATTERNS = ("api_key", "authorization", "token", "secret")
MASK_PLACEHOLDER = "***"

TEXT_FORMAT = "%(asctime)s %(levelname)-5s [%(name)s] %(message)s"


class SensitiveFieldFilter(logging.Filter):
    """LogRecord의 민감 extra 필드를 마스킹."""

    def filter(self, record: logging.LogRecord) -> bool:
        for key in list(record.__dict__):
            if any(pattern in key.lower() for pattern in SENSITIVE_FIELD_PATTERNS):
                setattr(record, key, MASK_PLACEHOLDER)
        return True


def setup_logging() -> None:
    """로깅 설정."""
    settings = get_settings()

    handler = logging.StreamHandler(sys.stdout)
    if settings.log_format == "text":
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))
    else:
        handler.setFormatter(ecs_logging.StdlibFormatter(exclude_fields=["process", "log.original"]))
    handler.addFilter(SensitiveFieldFilter())

    root_logger = logging.getLogger()
    root_logger.setLevel(settings.log_level.upper())
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    # 서비스 메타데이터 (ECS service.*)
    old_factory = logging.getLogRecordFactory()

    def record_factory(*args: Any, **kwargs: Any) -> logging.LogRecord:
        record = old_factory(*args, **kwargs)
        record.service = {
            "name": settings.service_name,
            "version": settings.service_version,
            "environment": settings.environment,
        }
        return record

    logging.setLogRecordFactory(record_factory)

    # httpx 요청 로그는 moderation 호출마다 찍히므로 WARNING 이상만
    for name in ("httpx", "httpcore", "redis"):
        logging.getLogger(name).setLevel(logging.WARNING)
