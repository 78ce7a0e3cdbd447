"""
Pytest configuration and shared fixtures for hash ring tests
"""

import os
import sys

import pytest

# Add the project root and the tests directory to Python path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, os.path.dirname(__file__))

from flexring import HashRing, SynchronizedHashRing


@pytest.fixture
def hash_ring():
    """Create a fresh hash ring for testing"""
    return HashRing(replicas=10)  # Smaller for faster tests


@pytest.fixture
def default_ring():
    """Ring with the default hasher and replica count"""
    return HashRing()


@pytest.fixture
def cache_ring(default_ring):
    """Default ring holding three cache targets"""
    return default_ring.add_targets(["cache-1", "cache-2", "cache-3"])


@pytest.fixture
def synchronized_ring():
    """Lock-guarded ring for concurrency tests"""
    return SynchronizedHashRing(replicas=16)


@pytest.fixture
def sample_targets():
    """Sample target names for testing"""
    return ["node1", "node2", "node3", "node4"]


@pytest.fixture
def test_keys():
    """Common test keys for consistent distribution testing"""
    return [
        "user:123", "user:456", "user:789",
        "product:abc", "product:def", "product:ghi",
        "order:001", "order:002", "order:003",
        "session:aaa", "session:bbb", "session:ccc"
    ]


# Pytest configuration
def pytest_configure(config):
    """Configure pytest"""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "slow: mark test as slow running"
    )


def pytest_collection_modifyitems(config, items):
    """Add markers to tests based on their location"""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
