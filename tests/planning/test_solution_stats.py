from __future__ import annotations

import numpy as np
import pytest

from lpbasic.network.domain_types import EdgeId
from lpbasic.planning.solution import (
    BinarySolution,
    FrequencySolution,
    as_solution,
    calculate_cost,
    edge_frequencies,
    line_frequencies,
)
from lpbasic.planning.stats import basic_stats


def test_as_solution_dispatches_on_entry_type():
    assert isinstance(as_solution([True, False]), BinarySolution)
    assert isinstance(as_solution(np.array([True, False])), BinarySolution)
    assert isinstance(as_solution([3, 0]), FrequencySolution)
    wrapped = FrequencySolution((1, 2))
    assert as_solution(wrapped) is wrapped


def test_line_frequencies_for_both_variants(instance):
    assert line_frequencies(instance, [True, False]) == [4, 0]
    assert line_frequencies(instance, FrequencySolution((8, 1))) == [8, 1]


def test_line_frequencies_length_mismatch(instance):
    with pytest.raises(ValueError):
        line_frequencies(instance, [True])


def test_calculate_cost(instance):
    assert calculate_cost(instance, [True, False]) == pytest.approx(40.0)
    assert calculate_cost(instance, [True, True]) == pytest.approx(50.0)
    assert calculate_cost(instance, FrequencySolution((2, 3))) == pytest.approx(35.0)
    assert calculate_cost(instance, [False, False]) == 0.0


def test_edge_frequencies_include_unserved_edges(instance):
    assert edge_frequencies(instance, [True, False]) == {
        EdgeId(0, 1): 4,
        EdgeId(1, 2): 4,
        EdgeId(2, 3): 0,
    }


def test_basic_stats(instance):
    stats = basic_stats(instance, [True, False])
    assert stats["num_lines"] == 2
    assert stats["num_stops"] == 4
    assert stats["num_edges"] == 3
    assert stats["taken_lines"] == 1
    assert stats["average_frequency"] == pytest.approx(8.0 / 3.0)
    assert stats["median"] == pytest.approx(4.0)
    assert stats["lowest_frequency"] == 0
    assert stats["highest_frequency"] == 4
    assert stats["variance"] == pytest.approx(np.var([4, 4, 0], ddof=1))
    assert stats["standard_deviation"] == pytest.approx(np.sqrt(stats["variance"]))
    assert stats["line_cost"] == pytest.approx(40.0)


def test_basic_stats_frequency_variant(instance):
    stats = basic_stats(instance, FrequencySolution((0, 3)))
    assert stats["taken_lines"] == 1
    assert stats["highest_frequency"] == 3
    assert stats["line_cost"] == pytest.approx(15.0)
