"""
Test helper utilities and common functions
"""

from collections import defaultdict
from typing import Any, Dict, Iterable, List


def snapshot_mapping(ring, keys: Iterable[str]) -> Dict[str, str]:
    """Map every key to the target the ring currently places it on"""
    return {key: ring.lookup(key) for key in keys}


def count_remapped(before: Dict[str, str], after: Dict[str, str]) -> int:
    """Number of keys whose target changed between two snapshots"""
    return sum(1 for key, target in before.items() if after.get(key) != target)


def analyze_key_distribution(ring, keys: List[str]) -> Dict[str, Any]:
    """
    Analyze how keys are distributed across targets

    Args:
        ring: Ring to query
        keys: List of keys to analyze

    Returns:
        Distribution analysis results
    """
    target_counts = defaultdict(int)
    for key in keys:
        target_counts[ring.lookup(key)] += 1

    counts = list(target_counts.values())
    if not counts:
        return {"target_counts": {}, "statistics": {}}

    min_count = min(counts)
    max_count = max(counts)
    avg_count = sum(counts) / len(counts)
    std_dev = (sum((x - avg_count) ** 2 for x in counts) / len(counts)) ** 0.5

    return {
        "target_counts": dict(target_counts),
        "statistics": {
            "min_keys_per_target": min_count,
            "max_keys_per_target": max_count,
            "avg_keys_per_target": avg_count,
            "std_deviation": std_dev,
            "load_balance_ratio": min_count / max_count if max_count > 0 else 0
        }
    }
