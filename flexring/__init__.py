"""
flexring: consistent hashing with weighted targets and pluggable hashers
"""

from .config import RingConfig
from .errors import (
    ConfigurationError,
    DuplicateTargetError,
    EmptyRingError,
    HashRingError,
    InvalidArgumentError,
    UnknownTargetError,
)
from .hashers import Crc32Hasher, DigestHasher, Hasher, resolve_hasher
from .ring import DEFAULT_REPLICAS, HashRing, PositionTable, SortState, TargetRegistry
from .synchronized import SynchronizedHashRing

__version__ = "1.0.0"

__all__ = [
    "ConfigurationError",
    "Crc32Hasher",
    "DEFAULT_REPLICAS",
    "DigestHasher",
    "DuplicateTargetError",
    "EmptyRingError",
    "HashRing",
    "HashRingError",
    "Hasher",
    "InvalidArgumentError",
    "PositionTable",
    "RingConfig",
    "SortState",
    "SynchronizedHashRing",
    "TargetRegistry",
    "UnknownTargetError",
    "resolve_hasher",
]
