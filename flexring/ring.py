"""
Consistent Hash Ring Implementation

Targets are hashed onto a circle of positions, several times each (replicas)
in proportion to their weight. A resource is hashed onto the same circle and
placed on the targets found walking clockwise from its position.
"""

import bisect
import logging
import math
import numbers
from decimal import Decimal
from enum import Enum
from typing import Callable, Dict, Iterable, Iterator, List, Optional

from .errors import (
    DuplicateTargetError,
    EmptyRingError,
    InvalidArgumentError,
    UnknownTargetError,
)
from .hashers import HasherLike, resolve_hasher


logger = logging.getLogger(__name__)

DEFAULT_REPLICAS = 64


class SortState(Enum):
    """Whether the position table's ordered view is current"""
    DIRTY = "dirty"
    SORTED = "sorted"


class PositionTable:
    """Mapping of ring positions to the targets that own them

    The ordered view of positions is rebuilt lazily: mutations only mark the
    table dirty, and the sort happens the next time a lookup needs it.
    """

    def __init__(self):
        self._owners: Dict[object, str] = {}  # position -> target
        self._sorted_positions: List[object] = []
        self.state = SortState.SORTED

    def __len__(self) -> int:
        return len(self._owners)

    def __contains__(self, position) -> bool:
        return position in self._owners

    def owner(self, position) -> Optional[str]:
        return self._owners.get(position)

    def items(self):
        return self._owners.items()

    def insert(self, position, target: str) -> Optional[str]:
        """Store target at position, returning the target it replaced, if any"""
        previous = self._owners.get(position)
        self._owners[position] = target
        self.mark_dirty()
        return previous

    def delete(self, position, target: str) -> bool:
        """Drop position if target still owns it"""
        if self._owners.get(position) != target:
            return False
        del self._owners[position]
        self.mark_dirty()
        return True

    def mark_dirty(self):
        self.state = SortState.DIRTY

    def ensure_sorted(self):
        if self.state is SortState.DIRTY:
            self._sorted_positions = sorted(self._owners)
            self.state = SortState.SORTED
            logger.debug(f"Sorted {len(self._sorted_positions)} ring positions")

    @property
    def sorted_positions(self) -> List[object]:
        self.ensure_sorted()
        return self._sorted_positions

    def walk_from(self, position) -> Iterator[str]:
        """Yield owners clockwise, starting just past position and wrapping once"""
        positions = self.sorted_positions
        total = len(positions)
        start = bisect.bisect_right(positions, position)
        for offset in range(total):
            yield self._owners[positions[(start + offset) % total]]


class TargetRegistry:
    """Mapping of targets to the ordered positions they were hashed to"""

    def __init__(self):
        self._positions: Dict[str, List[object]] = {}

    def __len__(self) -> int:
        return len(self._positions)

    def __contains__(self, target) -> bool:
        return target in self._positions

    def __iter__(self) -> Iterator[str]:
        return iter(self._positions)

    def register(self, target: str, positions: List[object]):
        self._positions[target] = positions

    def unregister(self, target: str) -> List[object]:
        return self._positions.pop(target)

    def positions_of(self, target: str) -> List[object]:
        return list(self._positions[target])


class HashRing:
    """Consistent hash ring with weighted targets

    The ring does no locking of its own. Lookups sort the position table in
    place, so callers sharing a ring between threads must serialise lookups
    as well as mutations (see SynchronizedHashRing).
    """

    def __init__(self, hasher: HasherLike = None, replicas: int = DEFAULT_REPLICAS):
        if isinstance(replicas, bool) or not isinstance(replicas, int) or replicas < 1:
            raise InvalidArgumentError(f"replicas must be a positive integer, got {replicas!r}")
        self._hasher: Callable[[str], object] = resolve_hasher(hasher)
        self._replicas = replicas
        self._table = PositionTable()
        self._registry = TargetRegistry()

    @classmethod
    def from_config(cls, config) -> "HashRing":
        """Build a ring from a RingConfig"""
        config.validate()
        return cls(hasher=config.hasher, replicas=config.replicas)

    @property
    def replicas(self) -> int:
        return self._replicas

    @property
    def hasher(self) -> Callable[[str], object]:
        return self._hasher

    @property
    def target_count(self) -> int:
        return len(self._registry)

    @property
    def sort_state(self) -> SortState:
        return self._table.state

    def __len__(self) -> int:
        return len(self._registry)

    def __contains__(self, target) -> bool:
        return target in self._registry

    def __repr__(self):
        return (f"{self.__class__.__name__}(targets={len(self._registry)}, "
                f"positions={len(self._table)}, replicas={self._replicas})")

    def _replica_count(self, weight: float) -> int:
        # round half up, so a 0.5 share still earns a position
        return int(math.floor(self._replicas * weight + 0.5))

    def add_target(self, target: str, weight: float = 1) -> "HashRing":
        """
        Add a target to the ring

        Args:
            target: Unique target identifier
            weight: Share of traffic relative to a weight-1 target

        Returns:
            The ring, for chaining
        """
        if target in self._registry:
            raise DuplicateTargetError(target)
        if isinstance(weight, bool) or not isinstance(weight, (numbers.Real, Decimal)) or not float(weight) > 0:
            raise InvalidArgumentError(f"weight must be a positive number, got {weight!r}")
        weight = float(weight)

        positions = []
        for i in range(self._replica_count(weight)):
            position = self._hasher(f"{target}{i}")
            previous = self._table.insert(position, target)
            if previous is not None and previous != target:
                logger.debug(f"Replica {i} of {target} overwrote position {position} of {previous}")
            positions.append(position)

        self._registry.register(target, positions)
        self._table.mark_dirty()
        logger.info(f"Added target {target} with {len(positions)} replicas")
        return self

    def add_targets(self, targets: Iterable[str], weight: float = 1) -> "HashRing":
        """Add several targets with the same weight, in order.

        Not atomic: if one target fails, the ones before it stay added.
        """
        for target in targets:
            self.add_target(target, weight)
        return self

    def remove_target(self, target: str) -> "HashRing":
        """Remove a target and all of its positions"""
        if target not in self._registry:
            raise UnknownTargetError(target)

        for position in self._registry.unregister(target):
            self._table.delete(position, target)

        self._table.mark_dirty()
        logger.info(f"Removed target {target}")
        return self

    def get_all_targets(self) -> List[str]:
        """All registered targets, in registration order"""
        return list(self._registry)

    def positions_of(self, target: str) -> List[object]:
        """Positions a target was hashed to"""
        if target not in self._registry:
            raise UnknownTargetError(target)
        return self._registry.positions_of(target)

    def lookup(self, resource: str) -> str:
        """Get the target responsible for a resource"""
        targets = self.lookup_list(resource, 1)
        if not targets:
            raise EmptyRingError()
        return targets[0]

    def lookup_list(self, resource: str, count: int) -> List[str]:
        """
        Get distinct targets for a resource, in order of precedence

        Args:
            resource: Key being placed
            count: Maximum number of targets to return

        Returns:
            Up to count targets, fewer if the ring holds fewer
        """
        if isinstance(count, bool) or not isinstance(count, int) or count < 1:
            raise InvalidArgumentError(f"Invalid count requested: {count}")

        if not len(self._table):
            return []

        # only one possible answer
        if len(self._registry) == 1:
            return list(self._registry)

        self._table.ensure_sorted()
        wanted = min(count, len(self._registry))
        resource_position = self._hasher(resource)

        results: List[str] = []
        seen = set()
        for target in self._table.walk_from(resource_position):
            if target not in seen:
                results.append(target)
                seen.add(target)
                if len(results) == wanted:
                    break
        return results
