from __future__ import annotations

from lpbasic.network.domain_types import EdgeId, Line
from lpbasic.planning.model_config import ModelConfig
from lpbasic.planning.problem_instance import ProblemInstance
from lpbasic.planning.solution import BinarySolution, FrequencySolution, covered_edges
from lpbasic.planning.solution_validation import SolutionCheck, verify_solution


def test_end_to_end_selection(instance):
    ok, message = verify_solution(instance, [True, False])
    assert ok is True
    assert message == "Valid"
    covered = covered_edges(instance, [True, False])
    assert EdgeId(0, 1) in covered
    assert EdgeId(1, 2) in covered
    assert EdgeId(2, 3) not in covered


def test_all_false_is_valid(instance):
    assert verify_solution(instance, BinarySolution((False, False))) == SolutionCheck(True, "Valid")


def test_length_mismatch_reported_not_raised(instance):
    ok, message = verify_solution(instance, [True])
    assert ok is False
    assert "1 entries" in message and "2 lines" in message


def test_invalid_instance_reported_not_raised(network):
    bad = ProblemInstance(
        network,
        [
            Line(id=1, walk=[(0, 1)], frequency=1, cost=1.0),
            Line(id=1, walk=[(1, 2)], frequency=1, cost=1.0),
        ],
    )
    ok, message = verify_solution(bad, [False, False])
    assert ok is False
    assert message.startswith("Invalid instance:")


def test_frequency_solution_entries_checked(instance):
    assert verify_solution(instance, FrequencySolution((4, 0))).ok
    ok, message = verify_solution(instance, FrequencySolution((4, -1)))
    assert not ok
    assert "negative" in message
    ok, message = verify_solution(instance, [4, 1.5])
    assert not ok
    assert "not an integer" in message


def test_binary_entries_must_be_booleans(instance):
    ok, message = verify_solution(instance, BinarySolution((True, 1)))
    assert not ok
    assert "not a boolean" in message


def test_config_bounds_checked(instance):
    config = ModelConfig(min_frequency_multiplier=0.5, max_frequency_multiplier=2.0)
    assert verify_solution(instance, [True, True], config).ok

    ok, message = verify_solution(instance, [True, False], config)
    assert not ok
    assert "below its minimum" in message

    ok, message = verify_solution(instance, FrequencySolution((4, 5)), config)
    assert not ok
    assert "above its maximum" in message


def test_slack_relaxes_minimum(instance):
    config = ModelConfig(use_slack=True, slack_penalty=100.0)
    assert verify_solution(instance, [False, False], config) == (True, "Valid")


def test_unhashable_frequency_reported_not_raised(network):
    bad = ProblemInstance(network, [Line(id=1, walk=[(0, 1)], frequency=[4], cost=1.0)])
    ok, message = verify_solution(bad, [False])
    assert ok is False
    assert message.startswith("Invalid instance:")


def test_recorded_line_coverage_must_include_operated_lines(network):
    network.get_edge((1, 2)).metadata["line_coverage"] = [2]
    network.get_edge((2, 3)).metadata["line_coverage"] = [2]
    instance = ProblemInstance(
        network,
        [
            Line(id=1, walk=[(0, 1), (1, 2)], frequency=4, cost=10.0),
            Line(id=2, walk=[(2, 3)], frequency=2, cost=5.0),
        ],
    )

    assert verify_solution(instance, [False, True]).ok
    ok, message = verify_solution(instance, [True, False])
    assert ok is False
    assert "missing from its recorded line_coverage" in message
    assert "1->2" in message


def test_malformed_line_coverage_is_reported(instance):
    instance.network.get_edge((0, 1)).metadata["line_coverage"] = "1"
    ok, message = verify_solution(instance, [True, False])
    assert ok is False
    assert "malformed line_coverage" in message
