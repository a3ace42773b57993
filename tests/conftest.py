"""
Shared pytest fixtures for linkedqueue tests.

Provides queue builders, a drain helper and an invariant checker that walks
the node chain and compares it against the maintained head, tail and size.
"""

import os
import sys

import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import linkedqueue


def check_invariants(q):
    """Assert head, tail and size agree with the reachable chain."""
    if q.size == 0:
        assert q.head is None
        assert q.tail is None
        return

    seen = set()
    node = q.head
    last = None
    for _ in range(q.size):
        assert node is not None, "chain shorter than size"
        assert id(node) not in seen, "cycle in chain"
        seen.add(id(node))
        last = node
        node = node.next

    assert node is None, "chain longer than size"
    assert last is q.tail


def drain(q):
    """Remove every value through remove_head and return them in order."""
    values = []
    buf = bytearray(256)
    while linkedqueue.size(q):
        assert linkedqueue.remove_head(q, buf)
        values.append(bytes(buf[:buf.index(0)]).decode())
        check_invariants(q)
    return values


def build(values):
    """Create a queue by tail-inserting values."""
    q = linkedqueue.new()
    for v in values:
        assert linkedqueue.insert_tail(q, v)
    return q


@pytest.fixture
def queue():
    """An empty queue, released after the test."""
    q = linkedqueue.new()
    yield q
    linkedqueue.destroy(q)


@pytest.fixture
def abc_queue():
    """Queue holding 'a', 'b', 'c' in FIFO order."""
    q = build(["a", "b", "c"])
    yield q
    linkedqueue.destroy(q)
