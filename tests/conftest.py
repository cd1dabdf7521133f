"""Shared pytest configuration for pivot shaping tests."""

import itertools

import pytest

from pivotgraph.pipeline import default_context


@pytest.fixture
def tokens():
    """Deterministic event-id generator: evt-0, evt-1, ..."""
    counter = itertools.count()
    return lambda: f"evt-{next(counter)}"


@pytest.fixture
def ctx(tokens):
    return default_context(
        event_id_field="EventID",
        propagated_labels=["index", "product", "vendor", "searchLink"],
        new_token=tokens,
        inference_enabled=True,
    )
