"""
Logging setup for the complaint tracker.

``setup_logging`` attaches this service's console handler (and an
optional file handler) to the root logger using the level and file from
``Settings``.  Both handlers carry ``SecretCodeFilter``: a secret code
is a user's only credential, so any ``secretCode=...`` or
``"SecretCode": "..."`` fragment reaching a handler is masked before it
is written, whichever module or library produced it.
"""

import logging
import re
from pathlib import Path

from .config import Settings


HANDLER_NAME = "complaint_tracker"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
REDACTED = "***"

_SECRET_CODE_PATTERN = re.compile(
    r"""(["']?secret_?code["']?\s*[:=]\s*["']?)([^"'\s,}]+)""",
    re.IGNORECASE,
)


class SecretCodeFilter(logging.Filter):
    """Masks secret code values in the formatted message of a record."""

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        redacted = _SECRET_CODE_PATTERN.sub(lambda m: m.group(1) + REDACTED, message)
        if redacted != message:
            record.msg = redacted
            record.args = None
        return True


def _make_handler(handler: logging.Handler, suffix: str) -> logging.Handler:
    handler.set_name(f"{HANDLER_NAME}.{suffix}")
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    handler.addFilter(SecretCodeFilter())
    return handler


def setup_logging(cfg: Settings) -> None:
    """Attach the service's handlers to the root logger, once per process.

    Other handlers already on the root logger (a test runner's, for
    instance) are left in place.
    """
    root = logging.getLogger()
    if any((h.get_name() or "").startswith(HANDLER_NAME) for h in root.handlers):
        return

    root.setLevel(cfg.log_level)
    root.addHandler(_make_handler(logging.StreamHandler(), "console"))
    if cfg.log_file:
        log_path = Path(cfg.log_file).resolve()
        root.addHandler(_make_handler(logging.FileHandler(log_path, encoding="utf-8"), "file"))
