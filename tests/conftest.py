"""Pytest configuration for collectkit tests."""

import logging

import pytest

from collectkit import List, Map


@pytest.fixture
def empty_list() -> List[int]:
    """Return an empty List."""
    return List()


@pytest.fixture
def even_list() -> List[int]:
    """Return a List built from [2, 4, 6, 8].

    Returns
    -------
        List with four even integers

    """
    return List([2, 4, 6, 8])


@pytest.fixture
def sample_map() -> Map[str, int]:
    """Return a Map with three entries."""
    return Map({"a": 1, "b": 2, "c": 3})


@pytest.fixture
def sequence_logs(caplog) -> pytest.LogCaptureFixture:
    """Capture DEBUG records from the sequence module.

    Returns
    -------
        The caplog fixture at DEBUG for the collectkit.sequence logger

    """
    caplog.set_level(logging.DEBUG, logger="collectkit.sequence")
    return caplog
