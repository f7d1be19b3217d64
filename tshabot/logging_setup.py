"""JSON logging on top of loguru.

Every record is written as one JSON object per line:
{"time": "2026-01-02T15:04:05.000+00:00", "level": "INFO", "msg": "...", ...bound fields}
"""

import json
import logging
import sys

from loguru import logger


def _serialize(record) -> None:
    fields = {k: v for k, v in record["extra"].items() if k != "serialized"}
    entry = {
        "time": record["time"].isoformat(timespec="milliseconds"),
        "level": record["level"].name,
        "msg": record["message"],
        **fields,
    }
    if record["exception"] is not None and "error" not in entry:
        entry["error"] = repr(record["exception"].value)
    record["extra"]["serialized"] = json.dumps(entry, default=str)


class InterceptHandler(logging.Handler):
    """Forward stdlib logging (uvicorn, httpx) into loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno
        logger.opt(depth=6, exception=record.exc_info).log(level, record.getMessage())


def setup_logging(level: str = "INFO", sink=sys.stderr) -> None:
    logger.remove()
    logger.configure(patcher=_serialize)
    # one line per record; tracebacks are folded into "error"
    logger.add(sink, level=level, format=lambda record: "{extra[serialized]}\n")

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        std = logging.getLogger(name)
        std.handlers = [InterceptHandler()]
        std.propagate = False
