from __future__ import annotations

import pytest

from lpbasic.network.domain_types import Line
from lpbasic.network.transit_network import TransitNetwork
from lpbasic.planning.problem_instance import ProblemInstance


def make_network() -> TransitNetwork:
    network = TransitNetwork()
    network.add_edge(0, 1, frequency=4, weight=1.5)
    network.add_edge(1, 2, frequency=4, weight=2.0)
    network.add_edge(2, 3, frequency=2, weight=0.5)
    return network


def make_lines() -> list[Line]:
    return [
        Line(id=1, walk=[(0, 1), (1, 2)], frequency=4, cost=10.0),
        Line(id=2, walk=[(2, 3)], frequency=2, cost=5.0),
    ]


@pytest.fixture
def network() -> TransitNetwork:
    return make_network()


@pytest.fixture
def instance() -> ProblemInstance:
    return ProblemInstance(make_network(), make_lines())
