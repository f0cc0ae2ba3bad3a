from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging once for CLI and API entry points."""
    logging.basicConfig(
        level=getattr(logging, level.strip().upper(), logging.INFO),
        format=LOG_FORMAT,
    )
    # httpx logs every request at INFO.
    logging.getLogger("httpx").setLevel(logging.WARNING)
