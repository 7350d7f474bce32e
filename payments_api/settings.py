"""
Service configuration from environment variables and logging setup.

Read once at startup; the core has no configuration of its own.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

HOST_ENV = "PAYMENTS_API_HOST"
PORT_ENV = "PAYMENTS_API_PORT"
LOG_LEVEL_ENV = "PAYMENTS_LOG_LEVEL"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass(frozen=True)
class Settings:
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> Settings:
        return cls(
            host=os.getenv(HOST_ENV, cls.host),
            port=int(os.getenv(PORT_ENV, str(cls.port))),
            log_level=os.getenv(LOG_LEVEL_ENV, cls.log_level).upper(),
        )


def configure_logging(level: str = "INFO") -> None:
    """Root stream handler for the service process. Unknown level names fall back to INFO."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
    )
