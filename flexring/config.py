"""
Ring settings, optionally read from environment variables

    FLEXRING_REPLICAS   positions per unit of weight (default 64)
    FLEXRING_HASHER     "crc32" or a hashlib algorithm name (default crc32)
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .errors import ConfigurationError, InvalidArgumentError
from .hashers import resolve_hasher
from .ring import HashRing


logger = logging.getLogger(__name__)

REPLICAS_ENV = "FLEXRING_REPLICAS"
HASHER_ENV = "FLEXRING_HASHER"


@dataclass
class RingConfig:
    """Construction settings for a HashRing"""
    replicas: int = 64
    hasher: str = "crc32"

    def validate(self):
        if isinstance(self.replicas, bool) or not isinstance(self.replicas, int) or self.replicas < 1:
            raise ConfigurationError(f"replicas must be a positive integer, got {self.replicas!r}")
        try:
            resolve_hasher(self.hasher)
        except InvalidArgumentError as e:
            raise ConfigurationError(str(e)) from e

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "RingConfig":
        """Load settings from the environment, falling back to defaults"""
        if environ is None:
            environ = os.environ

        replicas_str = environ.get(REPLICAS_ENV, "").strip()
        hasher = environ.get(HASHER_ENV, "").strip() or cls.hasher

        replicas = cls.replicas
        if replicas_str:
            try:
                replicas = int(replicas_str)
            except ValueError as e:
                raise ConfigurationError(f"{REPLICAS_ENV} must be an integer, got {replicas_str!r}") from e

        config = cls(replicas=replicas, hasher=hasher)
        config.validate()
        logger.info(f"Loaded ring config: replicas={config.replicas}, hasher={config.hasher}")
        return config

    def build_ring(self) -> HashRing:
        return HashRing.from_config(self)
