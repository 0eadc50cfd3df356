"""Runtime settings, read from ``SHOP_``-prefixed environment variables."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

ENV_PREFIX = "SHOP_"


@dataclass(frozen=True)
class Settings:
    log_level: str = "WARNING"
    prompt: str = "Enter command"
    currency: str = "USD"

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> Settings:
        """Build settings from the environment, falling back to defaults."""
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            log_level=env.get(f"{ENV_PREFIX}LOG_LEVEL", defaults.log_level).upper(),
            prompt=env.get(f"{ENV_PREFIX}PROMPT", defaults.prompt),
            currency=env.get(f"{ENV_PREFIX}CURRENCY", defaults.currency).upper(),
        )


def configure_logging(level: str) -> None:
    """Configure the root logger; unknown level names fall back to WARNING."""
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        numeric = logging.WARNING
    logging.basicConfig(
        level=numeric,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
