"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger.json import JsonFormatter

from pfhr_gateway.config import settings


class CustomJsonFormatter(JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_score(
    request_id: str,
    submission_id: str,
    score: float,
    risk_level: str,
    category: str,
    authenticated: bool,
    duration_ms: float,
) -> None:
    """Log structured scoring outcome. Raw financial inputs are never logged."""
    logging.info(
        "Score computed",
        extra={
            "request_id": request_id,
            "submission_id": submission_id,
            "step": "score_complete",
            "score": score,
            "risk_level": risk_level,
            "category": category,
            "authenticated": authenticated,
            "duration_ms": duration_ms,
        },
    )
