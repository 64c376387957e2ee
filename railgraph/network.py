"""Query facade over a rail graph.

:class:`RailNetwork` normalizes query input, dispatches to route costing or
route enumeration, and turns every outcome into a result record. Malformed
queries yield invalid results with a descriptive message; well-formed queries
without an answer yield ``NO SUCH ROUTE``. Neither raises, so one bad query
never aborts a batch.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from railgraph.config import ENUMERATION_CONFIG, EnumerationConfig
from railgraph.edges import EdgeSet
from railgraph.enumerate import enumerate_routes, shortest_route
from railgraph.exceptions import (
    NoSuchRoute,
    PathTooShort,
    PredicateRequiredForSameNodeQuery,
    UnknownNode,
)
from railgraph.logging import get_logger
from railgraph.path import cost_route, parse_route
from railgraph.results import (
    RouteResult,
    SingleRouteResult,
    invalid_result,
    multi_route_result,
    no_route_result,
    single_route_result,
)
from railgraph.types import NodeID, RoutePredicate

logger = get_logger(__name__)


@dataclass(frozen=True)
class RouteQuery:
    """Request for routes between two nodes.

    Attributes:
        start_node: Node the routes start at (case-insensitive).
        end_node: Node the routes end at (case-insensitive).
        predicate: Optional filter over (stops, cost) of a completed route.
        shortest_route: Reduce the accepted routes to the one with the fewest
            stops.
    """

    start_node: NodeID
    end_node: NodeID
    predicate: Optional[RoutePredicate] = None
    shortest_route: bool = False

    def describe(self) -> str:
        return f"Starting at {self.start_node} and ending at {self.end_node}"


def _normalize_node(node: Optional[str]) -> str:
    return (node or "").strip().upper()


class RailNetwork:
    """
    Route queries against a single, read-only EdgeSet.

    Example:
        >>> net = RailNetwork.from_edge_list("AB5, BC4, CD8")
        >>> net.route_cost("A-B-C").cost
        9
    """

    def __init__(
        self, edges: EdgeSet, config: EnumerationConfig = ENUMERATION_CONFIG
    ) -> None:
        self.edges = edges
        self.config = config

    @classmethod
    def from_edge_list(
        cls, text: str, config: EnumerationConfig = ENUMERATION_CONFIG
    ) -> RailNetwork:
        """
        Build a network from a comma-separated edge list.

        Raises:
            MalformedEdgeToken: If the edge list cannot be parsed.
        """
        return cls(EdgeSet.from_text(text), config=config)

    def route_cost(self, route: str) -> SingleRouteResult:
        """
        Compute the cost of a fully specified, hyphen-separated route.

        Args:
            route: Route such as ``"A-B-C"``; case and whitespace are ignored.

        Returns:
            A valid result with the total cost, ``NO SUCH ROUTE`` when an edge
            is missing, or an invalid result if fewer than two nodes are given.
        """
        nodes = parse_route(route)
        try:
            walked = cost_route(self.edges, nodes)
        except PathTooShort as exc:
            return invalid_result(route, str(exc))  # type: ignore[return-value]
        except NoSuchRoute as exc:
            logger.debug("Route %s is not traversable: %s", route, exc)
            return no_route_result(route)  # type: ignore[return-value]
        return single_route_result(route, walked)

    def routes(
        self,
        start_node: NodeID,
        end_node: NodeID,
        predicate: Optional[RoutePredicate] = None,
        shortest_route: bool = False,
    ) -> RouteResult:
        """Shorthand for :meth:`find_routes` with a new RouteQuery."""
        return self.find_routes(
            RouteQuery(
                start_node=start_node,
                end_node=end_node,
                predicate=predicate,
                shortest_route=shortest_route,
            )
        )

    def find_routes(self, query: RouteQuery) -> RouteResult:
        """
        Find all routes matching `query`.

        Returns:
            A MultiRouteResult listing every accepted route, or a
            SingleRouteResult holding the fewest-stops route when
            ``query.shortest_route`` is set.
        """
        start = _normalize_node(query.start_node)
        end = _normalize_node(query.end_node)
        multi = not query.shortest_route
        description = RouteQuery(start, end).describe()

        if not start or not end:
            return invalid_result(
                description, "Both start_node and end_node are required", multi=multi
            )

        try:
            found = enumerate_routes(
                self.edges,
                start,
                end,
                predicate=query.predicate,
                shortest_route=query.shortest_route,
                config=self.config,
            )
        except (UnknownNode, PredicateRequiredForSameNodeQuery) as exc:
            return invalid_result(description, str(exc), multi=multi)

        if query.shortest_route:
            return single_route_result(description, shortest_route(found))
        return multi_route_result(description, found)
