"""Configuration for the SOLID playground.

Nothing needs configuring to run an example; these settings only tune
logging and the defaults the CLI falls back on.
"""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass
class SolidConfig:
    """Settings read once by the CLI group."""

    log_level: str = "WARNING"
    log_format: str = "standard"
    default_channel: str = "email"
    currency: str = "USD"

    @classmethod
    def from_env(cls) -> SolidConfig:
        """Create config from environment variables."""
        return cls(
            log_level=os.getenv("SOLID_LOG_LEVEL", "WARNING"),
            log_format=os.getenv("SOLID_LOG_FORMAT", "standard"),
            default_channel=os.getenv("SOLID_CHANNEL", "email").lower(),
            currency=os.getenv("SOLID_CURRENCY", "USD").upper(),
        )
