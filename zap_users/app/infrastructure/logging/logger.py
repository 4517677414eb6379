import json
import logging
from datetime import datetime, timezone


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger
    logger.setLevel(logging.INFO)
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    return logger


def log_action(
    logger: logging.Logger,
    module: str,
    action: str,
    context_id: int | None,
    outcome: str,
    user_count: int | None = None,
    error_code: str | None = None,
) -> None:
    level = logging.INFO if outcome == "success" else logging.WARNING
    logger.log(
        level,
        json.dumps(
            {
                "ts": datetime.now(timezone.utc).isoformat(),
                "level": logging.getLevelName(level),
                "module": module,
                "action": action,
                "context_id": context_id,
                "outcome": outcome,
                "user_count": user_count,
                "error_code": error_code,
            }
        ),
    )
