"""Configuration module for the random private IP generator."""

import logging
import os
from typing import Optional

from dotenv import load_dotenv

SEED_ENV_VAR = "RANDOM_PRIVATE_IP_SEED"


class Config:
    """Application configuration."""

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed

    @classmethod
    def from_env(cls) -> "Config":
        """Create configuration from environment variables.

        Loads a .env file if present, then reads RANDOM_PRIVATE_IP_SEED.
        An unset or empty seed leaves the random source unseeded.

        Raises:
            ValueError: If the seed is not an integer.
        """
        load_dotenv()

        raw_seed = os.getenv(SEED_ENV_VAR)
        if not raw_seed:
            return cls()

        try:
            seed = int(raw_seed)
        except ValueError:
            raise ValueError(
                f"Invalid {SEED_ENV_VAR}: {raw_seed!r} is not an integer"
            ) from None

        return cls(seed=seed)

    def setup_logging(self) -> None:
        """Configure logging for the application."""
        log_level = os.getenv("LOG_LEVEL", "INFO").upper()

        logging.basicConfig(
            level=getattr(logging, log_level, logging.INFO),
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    def __repr__(self) -> str:
        return f"Config(seed={self.seed!r})"
