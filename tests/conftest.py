"""
Pytest fixtures for random_art tests.
"""

import pytest

from random_art.builder import make_rng


@pytest.fixture
def rng():
    """A generator with a fixed seed."""
    return make_rng(1234)


@pytest.fixture
def wire():
    """Attach children to an operation and return it."""

    def _wire(node, *children):
        node.attach_children(children)
        return node

    return _wire
