"""구조화된 JSON 로거 팩토리.

Structured JSON logger factory.
"""

import json
import logging
import sys
from datetime import datetime, timezone

from querystudy.config import settings


class JSONFormatter(logging.Formatter):
    """로그 레코드를 한 줄 JSON으로 출력하는 포매터."""

    def format(self, record: logging.LogRecord) -> str:
        log_obj = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "service": settings.APP_NAME,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info and record.exc_info[1]:
            log_obj["exception"] = str(record.exc_info[1])
        return json.dumps(log_obj, ensure_ascii=False)


def get_logger(name: str = "querystudy") -> logging.Logger:
    """이름별 로거를 반환합니다. 핸들러는 한 번만 붙입니다.

    Return a named logger with a single stdout JSON handler.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(JSONFormatter())
        logger.handlers = [handler]
        logger.setLevel(settings.LOG_LEVEL)
    return logger
