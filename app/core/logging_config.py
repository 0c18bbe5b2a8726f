"""
Centralized logging configuration for CineCatalog.

Call setup_logging() once at application startup.
All modules using logging.getLogger(__name__) inherit this configuration.
"""
import logging
import logging.handlers
import json
import sys
from datetime import datetime, timezone
from pathlib import Path
from contextvars import ContextVar

# ── Context variable for request correlation ──
request_id_var: ContextVar[str] = ContextVar("request_id", default="-")

LOG_FILE_NAME = "cinecatalog.log"
ERROR_LOG_FILE_NAME = "cinecatalog.error.log"
MAX_LOG_BYTES = 10 * 1024 * 1024

# Extra attributes copied into JSON log lines when a caller sets them
EXTRA_FIELDS = (
    "method", "path", "status_code", "duration_ms",
    "client_ip", "request_size", "response_size",
)

NOISY_LOGGERS = (
    "uvicorn.access", "httpcore", "httpx",
    "pymongo", "motor", "asyncio", "watchfiles",
)


def get_request_id() -> str:
    """Get the current request ID from context. Usable from any module."""
    return request_id_var.get("-")


class JSONFormatter(logging.Formatter):
    """Outputs each log record as a single JSON line."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "request_id": get_request_id(),
        }
        if record.exc_info and record.exc_info[0] is not None:
            entry["exception"] = self.formatException(record.exc_info)
        for key in EXTRA_FIELDS:
            if hasattr(record, key):
                entry[key] = getattr(record, key)
        return json.dumps(entry, ensure_ascii=False, default=str)


class ColoredFormatter(logging.Formatter):
    """
    Colored console output.
    Format: [HH:MM:SS] LEVEL    logger | message  [req:id]
    """

    COLORS = {
        "DEBUG":    "\033[36m",    # Cyan
        "INFO":     "\033[32m",    # Green
        "WARNING":  "\033[33m",    # Yellow
        "ERROR":    "\033[31m",    # Red
        "CRITICAL": "\033[1;31m",  # Bold Red
    }
    RESET = "\033[0m"
    DIM = "\033[2m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, self.RESET)
        time_str = datetime.fromtimestamp(record.created).strftime("%H:%M:%S")

        # app.controllers.film_controller → film_controller
        name = record.name.rsplit(".", 1)[-1] if record.name.count(".") > 1 else record.name

        req_id = get_request_id()
        req_tag = f" {self.DIM}[req:{req_id[:8]}]{self.RESET}" if req_id != "-" else ""

        line = (
            f"{self.DIM}[{time_str}]{self.RESET} "
            f"{color}{record.levelname:<8}{self.RESET} "
            f"{name} | {record.getMessage()}{req_tag}"
        )
        if record.exc_info and record.exc_info[0] is not None:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


def _rotating_handler(path: Path, level: int, log_json: bool, backup_count: int) -> logging.Handler:
    handler = logging.handlers.RotatingFileHandler(
        filename=str(path),
        maxBytes=MAX_LOG_BYTES,
        backupCount=backup_count,
        encoding="utf-8",
    )
    handler.setLevel(level)
    if log_json:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
        ))
    return handler


def setup_logging(
    log_level: str = "INFO",
    log_dir: Path = Path("./logs"),
    log_json: bool = True,
) -> None:
    """
    Configure the root logger with console + file handlers.

    Args:
        log_level: Minimum log level (DEBUG, INFO, WARNING, ERROR).
        log_dir: Directory for log files.
        log_json: Whether to write JSON to log files.
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    root = logging.getLogger()
    root.setLevel(level)

    # Replace handlers installed by basicConfig or an earlier create_app()
    root.handlers.clear()

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(level)
    console.setFormatter(ColoredFormatter())
    root.addHandler(console)

    root.addHandler(_rotating_handler(log_dir / LOG_FILE_NAME, level, log_json, backup_count=5))
    root.addHandler(_rotating_handler(log_dir / ERROR_LOG_FILE_NAME, logging.ERROR, log_json, backup_count=3))

    for noisy in NOISY_LOGGERS:
        logging.getLogger(noisy).setLevel(logging.WARNING)

    # Keep uvicorn.error at INFO so startup messages show
    logging.getLogger("uvicorn.error").setLevel(logging.INFO)

    logging.getLogger("cinecatalog").info(
        f"Logging configured: level={log_level}, dir={log_dir}, json={log_json}"
    )
