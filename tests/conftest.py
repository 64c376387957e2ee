"""Shared graph fixtures.

Graph diagrams show edge weights in brackets.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from railgraph.edges import EdgeSet
from railgraph.network import RailNetwork

#: The graph of the classic trains problem.
TRAINS_EDGE_LIST = "AB5, BC4, CD8, DC8, DE6, AD5, CE2, EB3, AE7"

EXAMPLES_DIR = Path(__file__).resolve().parent.parent / "examples"


@pytest.fixture
def trains_edges() -> EdgeSet:
    # A->B [5], A->D [5], A->E [7]
    # B->C [4]
    # C->D [8], C->E [2]
    # D->C [8], D->E [6]
    # E->B [3]
    #
    # Cycles: C-D-C, C-E-B-C, C-D-E-B-C
    return EdgeSet.from_text(TRAINS_EDGE_LIST)


@pytest.fixture
def trains(trains_edges: EdgeSet) -> RailNetwork:
    return RailNetwork(trains_edges)


@pytest.fixture
def line_edges() -> EdgeSet:
    #     [1]      [2]      [3]
    #  A───────►B───────►C───────►D
    return EdgeSet.from_tokens(["AB1", "BC2", "CD3"])


@pytest.fixture
def diamond_edges() -> EdgeSet:
    #       [1]        [1]
    #   ┌────────►B─────────┐
    #   │                   ▼
    #   A                   D
    #   │                   ▲
    #   │   [2]        [2]  │
    #   └────────►C─────────┘
    return EdgeSet.from_tokens(["AB1", "BD1", "AC2", "CD2"])


@pytest.fixture
def loop_edges() -> EdgeSet:
    #      [1]
    #  A◄───────►B     (A->B [1], B->A [2])
    #      [2]
    return EdgeSet.from_tokens(["AB1", "BA2"])


@pytest.fixture
def triangle_edges() -> EdgeSet:
    #  A◄──►B, B◄──►C, A◄──►C     (every pair linked both ways, all [1])
    return EdgeSet.from_tokens(["AB1", "BA1", "BC1", "CB1", "AC1", "CA1"])
