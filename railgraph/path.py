from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Sequence, Tuple

from railgraph.edges import EdgeSet
from railgraph.exceptions import EdgeNotFound, NoSuchRoute, PathTooShort
from railgraph.types import ROUTE_SEPARATOR, Cost, NodeID


@dataclass(frozen=True)
class Route:
    """
    A route through the graph and its total cost.

    Attributes:
        nodes (Tuple[NodeID, ...]): Ordered node ids from start to end.
        cost (Cost): Sum of the weights of the traversed edges.
    """

    nodes: Tuple[NodeID, ...]
    cost: Cost

    def __iter__(self) -> Iterator[NodeID]:
        return iter(self.nodes)

    def __len__(self) -> int:
        return len(self.nodes)

    def __str__(self) -> str:
        """Render the route as hyphen-joined node ids, e.g. ``A-B-C``."""
        return ROUTE_SEPARATOR.join(self.nodes)

    def __lt__(self, other: Any) -> bool:
        """
        Order routes by stop count, then by their rendered string.

        Returns NotImplemented if `other` is not a Route.
        """
        if not isinstance(other, Route):
            return NotImplemented
        return (self.stops, str(self)) < (other.stops, str(other))

    @property
    def stops(self) -> int:
        """Number of edges traversed (nodes minus one)."""
        return len(self.nodes) - 1

    @property
    def src_node(self) -> NodeID:
        return self.nodes[0]

    @property
    def dst_node(self) -> NodeID:
        return self.nodes[-1]


def parse_route(text: str) -> Tuple[NodeID, ...]:
    """
    Normalize a hyphen-separated route query into node ids.

    ``" a - b-C "`` becomes ``("A", "B", "C")``.
    """
    return tuple(part.strip().upper() for part in text.strip().split(ROUTE_SEPARATOR))


def cost_route(edges: EdgeSet, nodes: Sequence[NodeID]) -> Route:
    """
    Compute the cost of a fully specified route.

    Walks each consecutive pair of nodes and sums the edge weights. This never
    searches or backtracks.

    Args:
        edges: The graph adjacency.
        nodes: Ordered node ids; at least two are required.

    Returns:
        The walked Route with its total cost.

    Raises:
        PathTooShort: If fewer than two nodes are given.
        NoSuchRoute: On the first consecutive pair without an edge.
    """
    if len(nodes) < 2:
        raise PathTooShort(len(nodes))

    total = 0
    for src, dst in zip(nodes, nodes[1:]):
        try:
            total += edges.weight(src, dst)
        except EdgeNotFound:
            raise NoSuchRoute(src, dst) from None

    return Route(tuple(nodes), total)
