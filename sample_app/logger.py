"""结构化日志（structlog）：开发环境彩色控制台，生产环境 JSON。"""
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Optional

import structlog
from structlog.types import Processor

from sample_app.config import JSON_LOGS, LOG_LEVEL

# 这些键的值一律不进日志
_SENSITIVE_KEYS = {"password", "password_confirmation", "salt", "encrypted_password"}


def _add_timestamp(logger: logging.Logger, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    event_dict["timestamp"] = datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")
    return event_dict


def _censor_secrets(logger: logging.Logger, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    for key in list(event_dict):
        if key.lower() in _SENSITIVE_KEYS:
            event_dict[key] = "***REDACTED***"
    return event_dict


def setup_logging(log_level: str = LOG_LEVEL, json_logs: bool = JSON_LOGS) -> None:
    """配置 structlog 与标准库 logging（应用入口调用一次）。"""
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        _add_timestamp,
        _censor_secrets,
    ]
    if json_logs:
        shared_processors.append(structlog.processors.format_exc_info)
        renderer: Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(getattr(logging, log_level.upper(), logging.INFO))


def get_logger(name: Optional[str] = None) -> "structlog.stdlib.BoundLogger":
    """获取结构化 logger，例如 get_logger(__name__).info("user_registered", user_id=...)。"""
    return structlog.stdlib.get_logger(name)
