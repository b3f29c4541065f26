"""Shared fixtures for sequence tests."""

import numpy as np
import pytest

from seqpm import Item, Itemset, Sequence, config


@pytest.fixture
def items():
    return {name: Item(name) for name in "ABCDE"}


@pytest.fixture
def scenario_sequence(items):
    """Sequence 1: {t=10, A B} {t=20, C}."""
    seq = Sequence(1)
    seq.add_itemset(Itemset([items["A"], items["B"]], timestamp=10))
    seq.add_itemset(Itemset([items["C"]], timestamp=20))
    return seq


@pytest.fixture
def occurrences(items):
    """Occurrence bitmaps over a database of 4 sequences.

    A: 4/4, B: 1/4, C: 3/4, D: 2/4, E missing.
    """
    return {
        items["A"]: np.array([True, True, True, True]),
        items["B"]: np.array([True, False, False, False]),
        items["C"]: np.array([True, True, False, True]),
        items["D"]: np.array([False, True, True, False]),
    }


@pytest.fixture(autouse=True)
def restore_config():
    saved = (config.check_timestamp_order, config.string_padding)
    yield
    config.check_timestamp_order, config.string_padding = saved
