"""Sample graphs shared by the algorithm tests."""

import networkx as nx
import pytest


@pytest.fixture
def diamond_tail():
    # Weights:
    #       [1]      [1]
    #   A──────►B───────►D──────►E
    #   │       │[1]     ▲  [1]
    #   │[2]    ▼        │
    #   └──────►C────────┘
    #                [1]
    g = nx.DiGraph()
    g.add_edge("A", "B", weight=1)
    g.add_edge("A", "C", weight=2)
    g.add_edge("B", "D", weight=1)
    g.add_edge("C", "D", weight=1)
    g.add_edge("B", "C", weight=1)
    g.add_edge("D", "E", weight=1)
    return g


@pytest.fixture
def square_undirected():
    # All weights 1, undirected:
    #   A───B
    #   │   │
    #   D───C
    g = nx.Graph()
    g.add_edge("A", "B", weight=1)
    g.add_edge("B", "C", weight=1)
    g.add_edge("C", "D", weight=1)
    g.add_edge("D", "A", weight=1)
    return g


@pytest.fixture
def parallel_multi():
    # A──►B has parallel edges with weights 5 and 1.
    #       [5,1]     [1]
    #   A═══════►B───────►C
    #   │                 ▲
    #   └─────────────────┘
    #           [3]
    g = nx.MultiDiGraph()
    g.add_edge("A", "B", weight=5)
    g.add_edge("A", "B", weight=1)
    g.add_edge("B", "C", weight=1)
    g.add_edge("A", "C", weight=3)
    return g


@pytest.fixture
def ladder_ties():
    # Two rungs of equal-cost choices: four tied shortest A->F paths of
    # weight 4, plus a direct A->F edge of weight 10.
    #
    #     B       D
    #   ↗   ↘   ↗   ↘
    #  A     C─┤     F
    #   ↘   ↗   ↘   ↗
    #     X       Y
    g = nx.DiGraph()
    for u, v in [
        ("A", "B"),
        ("A", "X"),
        ("B", "C"),
        ("X", "C"),
        ("C", "D"),
        ("C", "Y"),
        ("D", "F"),
        ("Y", "F"),
    ]:
        g.add_edge(u, v, weight=1)
    g.add_edge("A", "F", weight=10)
    return g
