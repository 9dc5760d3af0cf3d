import logging
import os

# LOG_LEVEL=DEBUG / INFO / WARNING / ERROR
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()


def setup_logging(level: str = LOG_LEVEL) -> None:
    """Call once at program start (main.py and scripts/)."""
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
