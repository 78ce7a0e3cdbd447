#!/usr/bin/env python3
"""
Demo script for flexring

This script demonstrates how to:
1. Build a ring of cache targets
2. Place resources and replicas on it
3. Show how little moves when a target joins or leaves
4. Give a larger target more of the traffic with weights
"""

import logging
from collections import Counter

from flexring import HashRing, RingConfig


def show_placement(ring: HashRing, keys, replicas: int = 2):
    """Print where each key lands"""
    for key in keys:
        targets = ring.lookup_list(key, replicas)
        print(f"  {key} -> {targets[0]} (replicas: {', '.join(targets[1:]) or '-'})")


def demo_basic_placement(ring: HashRing):
    """Demonstrate basic lookups"""
    print("\n=== Basic Placement Demo ===")
    ring.add_targets(["cache-1", "cache-2", "cache-3"])
    print(f"Targets: {ring.get_all_targets()}")
    show_placement(ring, ["user:1001", "user:1002", "product:2001", "order:3001", "object-a", "object-b"])


def demo_membership_change(ring: HashRing):
    """Demonstrate how few keys move when membership changes"""
    print("\n=== Membership Change Demo ===")
    keys = [f"key_{i}" for i in range(10000)]
    before = {key: ring.lookup(key) for key in keys}

    ring.add_target("cache-4")
    after_add = {key: ring.lookup(key) for key in keys}
    moved = sum(1 for key in keys if before[key] != after_add[key])
    print(f"Added cache-4: {moved} of {len(keys)} keys moved ({moved / len(keys):.1%})")

    ring.remove_target("cache-1")
    after_remove = {key: ring.lookup(key) for key in keys}
    moved = sum(1 for key in keys if after_add[key] != after_remove[key])
    print(f"Removed cache-1: {moved} of {len(keys)} keys moved ({moved / len(keys):.1%})")

    print(f"'object' now lives on {ring.lookup_list('object', 2)}")


def demo_weights():
    """Demonstrate weighted targets"""
    print("\n=== Weighted Targets Demo ===")
    ring = HashRing(hasher="md5")
    ring.add_target("small", weight=1).add_target("large", weight=3)

    counts = Counter(ring.lookup(f"key_{i}") for i in range(10000))
    for target, count in counts.most_common():
        print(f"  {target}: {count} keys")


def main():
    """Main demo function"""
    logging.basicConfig(level=logging.WARNING)

    print("=== flexring Demo ===")
    ring = RingConfig.from_env().build_ring()
    print(f"Ring: {ring!r}, hasher: {ring.hasher!r}")

    demo_basic_placement(ring)
    demo_membership_change(ring)
    demo_weights()

    print("\n=== Demo completed ===")


if __name__ == "__main__":
    main()
