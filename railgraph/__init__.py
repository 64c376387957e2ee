"""railgraph: route costing and enumeration over small directed rail graphs.

Primary API:
    RailNetwork - Query facade (route costs, route searches)
    RouteQuery - Start/end route search request
    EdgeSet - Directed, weighted adjacency built from "AB5, BC4, ..." edge lists
    enumerate_routes() - Bounded depth-first route enumeration
    make_predicate() - Build route predicates from condition mappings

Example:
    from railgraph import RailNetwork

    net = RailNetwork.from_edge_list("AB5, BC4, CD8, DC8, DE6, AD5, CE2, EB3, AE7")
    net.route_cost("A-B-C").cost                                  # 9
    net.routes("C", "C", lambda stops, cost: stops <= 3).number_of_trips  # 2
    net.routes("A", "C", shortest_route=True).output              # "A-B-C"
"""

from __future__ import annotations

from railgraph import cli, logging
from railgraph.conditions import make_predicate
from railgraph.config import ENUMERATION_CONFIG, EnumerationConfig
from railgraph.edges import EdgeSet
from railgraph.enumerate import enumerate_routes, shortest_route
from railgraph.exceptions import (
    EdgeNotFound,
    MalformedEdgeToken,
    NoSuchRoute,
    PathTooShort,
    PredicateRequiredForSameNodeQuery,
    RailGraphError,
    UnknownNode,
)
from railgraph.network import RailNetwork, RouteQuery
from railgraph.path import Route, cost_route
from railgraph.results import (
    MultiRouteResult,
    RouteBreakdown,
    RouteResult,
    SingleRouteResult,
)
from railgraph.scenario import Scenario
from railgraph.types import RouteStatus

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Model
    "EdgeSet",
    "Route",
    "RailNetwork",
    "RouteQuery",
    "Scenario",
    # Algorithms
    "cost_route",
    "enumerate_routes",
    "shortest_route",
    "make_predicate",
    # Configuration
    "EnumerationConfig",
    "ENUMERATION_CONFIG",
    # Results
    "RouteStatus",
    "RouteResult",
    "SingleRouteResult",
    "MultiRouteResult",
    "RouteBreakdown",
    # Errors
    "RailGraphError",
    "MalformedEdgeToken",
    "UnknownNode",
    "NoSuchRoute",
    "EdgeNotFound",
    "PathTooShort",
    "PredicateRequiredForSameNodeQuery",
    # Utilities
    "cli",
    "logging",
]
