"""Pytest fixtures for Treatment CBA tests."""

import pytest

from cba.core.demo import load_demo
from cba.core.store import TreatmentStore


@pytest.fixture
def empty_store() -> TreatmentStore:
    """Fresh store with no treatments."""
    return TreatmentStore()


@pytest.fixture
def demo_store() -> TreatmentStore:
    """Store loaded with the four demo treatments."""
    store = TreatmentStore()
    load_demo(store)
    return store
