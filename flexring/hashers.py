"""
Hash functions for placing targets and resources on the ring

A hasher maps a string to a position. Positions only need to be totally
ordered and deterministic across processes; the built-in hashers return
non-negative integers.
"""

import hashlib
import zlib
from typing import Callable, Union

from .errors import InvalidArgumentError


class Hasher:
    """Base class for ring hashers"""

    name = "abstract"

    def hash(self, data: str) -> int:
        raise NotImplementedError

    def __call__(self, data: str) -> int:
        return self.hash(data)

    def __repr__(self):
        return f"{self.__class__.__name__}({self.name!r})"


class Crc32Hasher(Hasher):
    """CRC-32 over the UTF-8 encoding of the input (the default hasher)"""

    name = "crc32"

    def hash(self, data: str) -> int:
        return zlib.crc32(data.encode("utf-8")) & 0xFFFFFFFF


class DigestHasher(Hasher):
    """Any hashlib digest, with the hex digest read as an integer"""

    def __init__(self, algorithm: str = "md5"):
        if not isinstance(algorithm, str):
            raise InvalidArgumentError(f"Hash algorithm must be a name, got {algorithm!r}")
        algorithm = algorithm.lower()
        try:
            digest = hashlib.new(algorithm)
        except (ValueError, TypeError) as e:
            raise InvalidArgumentError(f"Unknown hash algorithm '{algorithm}'") from e
        # shake_* digests have no fixed length
        if not digest.digest_size:
            raise InvalidArgumentError(f"Hash algorithm '{algorithm}' has no fixed digest size")
        self.name = algorithm

    def hash(self, data: str) -> int:
        digest = hashlib.new(self.name, data.encode("utf-8")).hexdigest()
        return int(digest, 16)


HasherLike = Union[None, str, Hasher, Callable[[str], object]]


def resolve_hasher(value: HasherLike) -> Callable[[str], object]:
    """
    Turn a hasher setting into a callable

    Args:
        value: None or "crc32" for the default, a hashlib algorithm name,
            a Hasher instance or any callable taking a string

    Returns:
        Callable mapping a string to a position
    """
    if value is None:
        return Crc32Hasher()
    if isinstance(value, str):
        if value.lower() == Crc32Hasher.name:
            return Crc32Hasher()
        return DigestHasher(value)
    if callable(value):
        return value
    raise InvalidArgumentError(f"Hasher must be a name or a callable, got {type(value).__name__}")
