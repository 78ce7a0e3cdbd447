"""
Thread-safe wrapper around HashRing

Lookups sort the ring's position table in place, so both mutations and
lookups are taken under the same lock.
"""

import threading
from typing import Iterable, List, Optional

from .ring import HashRing


class SynchronizedHashRing:
    """HashRing guarded by a re-entrant lock"""

    def __init__(self, ring: Optional[HashRing] = None, **ring_kwargs):
        if ring is not None and ring_kwargs:
            raise TypeError("Pass either an existing ring or ring arguments, not both")
        self._ring = ring if ring is not None else HashRing(**ring_kwargs)
        self._lock = threading.RLock()

    @property
    def lock(self) -> threading.RLock:
        return self._lock

    @property
    def target_count(self) -> int:
        with self._lock:
            return self._ring.target_count

    def __len__(self) -> int:
        return self.target_count

    def __contains__(self, target) -> bool:
        with self._lock:
            return target in self._ring

    def add_target(self, target: str, weight: float = 1) -> "SynchronizedHashRing":
        with self._lock:
            self._ring.add_target(target, weight)
        return self

    def add_targets(self, targets: Iterable[str], weight: float = 1) -> "SynchronizedHashRing":
        with self._lock:
            self._ring.add_targets(targets, weight)
        return self

    def remove_target(self, target: str) -> "SynchronizedHashRing":
        with self._lock:
            self._ring.remove_target(target)
        return self

    def get_all_targets(self) -> List[str]:
        with self._lock:
            return self._ring.get_all_targets()

    def snapshot(self) -> List[str]:
        """Registered targets, read atomically"""
        return self.get_all_targets()

    def lookup(self, resource: str) -> str:
        with self._lock:
            return self._ring.lookup(resource)

    def lookup_list(self, resource: str, count: int) -> List[str]:
        with self._lock:
            return self._ring.lookup_list(resource, count)
