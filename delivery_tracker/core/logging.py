"""Logging configuration shared by the API and the scripts."""
import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger once; later calls only adjust the level."""
    root = logging.getLogger()
    root.setLevel(level.upper())

    if any(getattr(handler, "_tracker_handler", False) for handler in root.handlers):
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._tracker_handler = True
    root.addHandler(handler)

    # SQL echo is controlled by the engine, keep the logger quiet otherwise
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
