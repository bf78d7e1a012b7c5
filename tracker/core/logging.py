"""
Process-wide logging setup: plain-text records on stdout, one line each.

Gunicorn/uvicorn keep their own loggers; this only configures the root
logger that `tracker.*` modules log through.
"""
import logging
import sys


def setup_logging(log_level: str = "INFO") -> None:
    logging.basicConfig(
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stdout,
        level=getattr(logging, log_level.upper(), logging.INFO),
    )

    # SQL echo stays off unless asked for explicitly
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
