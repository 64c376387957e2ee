"""Route enumeration over cyclic graphs.

Routes may revisit nodes (e.g. every route from C back to C below some cost),
so exploration cannot rely on a global visited set. Instead each branch is cut
once its trailing run of nodes has repeated too often; see
:class:`railgraph.config.EnumerationConfig`.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from railgraph.config import ENUMERATION_CONFIG, EnumerationConfig
from railgraph.edges import EdgeSet
from railgraph.exceptions import PredicateRequiredForSameNodeQuery
from railgraph.logging import get_logger
from railgraph.path import Route
from railgraph.types import Cost, NodeID, RoutePredicate

logger = get_logger(__name__)


def repeats_trailing_pattern(
    nodes: Tuple[NodeID, ...], config: EnumerationConfig = ENUMERATION_CONFIG
) -> bool:
    """
    Check whether the trailing window of `nodes` has repeated too often.

    Args:
        nodes: The route built so far, including its newest node.
        config: Window size and repeat limit.

    Returns:
        True if the last ``config.pattern_window`` nodes occur more than
        ``config.max_pattern_repeats`` times in `nodes`.
    """
    window = config.pattern_window
    if len(nodes) < window:
        return False

    tail = nodes[-window:]
    count = 0
    for idx in range(len(nodes) - window + 1):
        if nodes[idx : idx + window] == tail:
            count += 1
    return count > config.max_pattern_repeats


def enumerate_routes(
    edges: EdgeSet,
    start: NodeID,
    target: NodeID,
    predicate: Optional[RoutePredicate] = None,
    shortest_route: bool = False,
    config: EnumerationConfig = ENUMERATION_CONFIG,
) -> List[Route]:
    """
    Enumerate routes from `start` to `target` accepted by `predicate`.

    The search is depth-first. Each time a successor equals `target` the
    extended route is a completion and is kept if `predicate(stops, cost)`
    accepts it. The search continues past the target either way, so routes
    that pass through the target more than once are found too. A zero-length
    route is never a completion.

    Args:
        edges: The graph adjacency.
        start: Start node id.
        target: End node id.
        predicate: Filter over (stops, cost) of completed routes. ``None``
            accepts every completion.
        shortest_route: Only used to decide whether a same-node query without
            a predicate is allowed; reduction is done by :func:`shortest_route`.
        config: Repetition cut-off settings.

    Returns:
        Accepted routes in discovery order. Every route appears once. Empty
        when `target` cannot be reached from `start` at all.

    Raises:
        UnknownNode: If `start` or `target` is not a node of the graph.
        PredicateRequiredForSameNodeQuery: If ``start == target`` and neither a
            predicate nor shortest-route mode is given.
    """
    if start == target and predicate is None and not shortest_route:
        raise PredicateRequiredForSameNodeQuery(start)

    if not edges.has_path(start, target):
        logger.debug("%s is unreachable from %s", target, start)
        return []

    found: List[Route] = []
    _extend(edges, (start,), 0, target, predicate, config, found)

    logger.debug(
        "Enumerated %d accepted route(s) from %s to %s", len(found), start, target
    )
    return found


def _extend(
    edges: EdgeSet,
    nodes: Tuple[NodeID, ...],
    cost: Cost,
    target: NodeID,
    predicate: Optional[RoutePredicate],
    config: EnumerationConfig,
    found: List[Route],
) -> None:
    for nbr, weight in edges.successors(nodes[-1]):
        # Tuples are immutable, so sibling branches never share a route prefix.
        candidate = nodes + (nbr,)
        candidate_cost = cost + weight

        if nbr == target:
            stops = len(candidate) - 1
            if predicate is None or predicate(stops, candidate_cost):
                found.append(Route(candidate, candidate_cost))

        if config.max_stops is not None and len(candidate) - 1 >= config.max_stops:
            continue
        if repeats_trailing_pattern(candidate, config):
            continue

        _extend(edges, candidate, candidate_cost, target, predicate, config, found)


def shortest_route(routes: Iterable[Route]) -> Optional[Route]:
    """
    Select the route with the fewest stops.

    Ties are broken by the lexicographic order of the rendered route string.
    This is not a minimum-weight selection.

    Returns:
        The selected Route, or None if `routes` is empty.
    """
    return min(routes, default=None)
