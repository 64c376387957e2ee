from __future__ import annotations

import string
from typing import Iterable, Iterator, List, Tuple

import networkx as nx

from railgraph.exceptions import EdgeNotFound, MalformedEdgeToken, UnknownNode
from railgraph.logging import get_logger
from railgraph.types import Cost, NodeID

logger = get_logger(__name__)

#: Separator between tokens of a textual edge list, e.g. "AB5, BC4".
EDGE_LIST_SEPARATOR = ","

#: (source, destination, weight)
EdgeTuple = Tuple[NodeID, NodeID, Cost]


def split_edge_list(text: str) -> List[str]:
    """
    Split a comma-separated edge list into trimmed tokens.

    Args:
        text: Edge list such as ``"AB5, BC4, CD8"``.

    Returns:
        A list of tokens with surrounding whitespace removed. Empty entries
        (e.g. from a trailing comma) are kept so that validation can reject them.
    """
    return [token.strip() for token in text.split(EDGE_LIST_SEPARATOR)]


def parse_edge_token(token: str) -> EdgeTuple:
    """
    Parse a single ``<Source><Destination><Weight>`` token.

    Args:
        token: A three character token; surrounding whitespace is ignored.

    Returns:
        Tuple of (source, destination, weight) with node ids uppercased.

    Raises:
        MalformedEdgeToken: If the token is not exactly 3 characters, the third
            character is not a digit, or the weight is zero.
    """
    data = token.strip()
    if len(data) != 3:
        raise MalformedEdgeToken(token, "expected exactly 3 characters")
    if data[2] not in string.digits:
        raise MalformedEdgeToken(token, "weight must be a single digit")

    weight = int(data[2])
    if weight <= 0:
        raise MalformedEdgeToken(token, "weight must be positive")

    return data[0].upper(), data[1].upper(), weight


class EdgeSet:
    """
    Directed, weighted adjacency of a rail graph.

    Each ordered (source, destination) pair holds at most one weight; the
    first declaration wins and later duplicates are ignored. Terminal nodes
    (only ever seen as a destination) are nodes without continuations.

    The adjacency is stored in a ``networkx.DiGraph`` whose edges carry a
    ``weight`` attribute. Instances are built once and treated as read-only.
    """

    def __init__(self, edges: Iterable[EdgeTuple] = ()) -> None:
        self._graph = nx.DiGraph()
        for src, dst, weight in edges:
            self._add_edge(src, dst, weight)

    @classmethod
    def from_tokens(cls, tokens: Iterable[str]) -> EdgeSet:
        """
        Build an EdgeSet from ``<Source><Destination><Weight>`` tokens.

        Args:
            tokens: Edge tokens such as ``["AB5", "BC4"]``.

        Returns:
            A populated EdgeSet.

        Raises:
            MalformedEdgeToken: If the sequence is empty or any token is invalid.
                Nothing is returned on failure.
        """
        parsed = [parse_edge_token(token) for token in tokens]
        if not parsed:
            raise MalformedEdgeToken("", "edge list is empty")

        edge_set = cls(parsed)
        logger.debug(
            "Built edge set with %d nodes and %d edges from %d tokens",
            len(edge_set),
            edge_set._graph.number_of_edges(),
            len(parsed),
        )
        return edge_set

    @classmethod
    def from_text(cls, text: str) -> EdgeSet:
        """Build an EdgeSet from a comma-separated edge list."""
        return cls.from_tokens(split_edge_list(text))

    def _add_edge(self, src: NodeID, dst: NodeID, weight: Cost) -> None:
        if self._graph.has_edge(src, dst):
            logger.debug(
                "Ignoring duplicate edge %s->%s (weight %d); keeping %d",
                src,
                dst,
                weight,
                self._graph[src][dst]["weight"],
            )
            return
        self._graph.add_edge(src, dst, weight=weight)

    def __len__(self) -> int:
        """Return the number of nodes."""
        return self._graph.number_of_nodes()

    def __contains__(self, node: object) -> bool:
        return node in self._graph

    def __iter__(self) -> Iterator[NodeID]:
        return iter(self._graph)

    def nodes(self) -> List[NodeID]:
        """Return node ids in first-seen order."""
        return list(self._graph.nodes)

    def edges(self) -> List[EdgeTuple]:
        """Return (source, destination, weight) tuples grouped by source node."""
        return [
            (src, dst, attr["weight"])
            for src, dst, attr in self._graph.edges(data=True)
        ]

    def to_tokens(self) -> List[str]:
        """Return the edge list as ``<Source><Destination><Weight>`` tokens."""
        return [f"{src}{dst}{weight}" for src, dst, weight in self.edges()]

    def weight(self, source: NodeID, destination: NodeID) -> Cost:
        """
        Return the weight of the directed edge source->destination.

        Raises:
            EdgeNotFound: If no such edge is stored.
        """
        try:
            return self._graph[source][destination]["weight"]
        except KeyError:
            raise EdgeNotFound(source, destination) from None

    def successors(self, source: NodeID) -> List[Tuple[NodeID, Cost]]:
        """
        Return (destination, weight) pairs reachable by one edge from source.

        Args:
            source: Node id.

        Returns:
            Pairs in declaration order; empty for a terminal node.

        Raises:
            UnknownNode: If source is not a node of this graph.
        """
        if source not in self._graph:
            raise UnknownNode(source)
        return [
            (dst, attr["weight"]) for dst, attr in self._graph.adj[source].items()
        ]

    def has_path(self, source: NodeID, destination: NodeID) -> bool:
        """
        Check whether destination can be reached from source.

        When source equals destination, only a non-trivial cycle through the
        node counts, since a zero-length route is never a valid answer.

        Raises:
            UnknownNode: If either node is not in the graph.
        """
        for node in (source, destination):
            if node not in self._graph:
                raise UnknownNode(node)

        if source != destination:
            return nx.has_path(self._graph, source, destination)
        return any(
            nx.has_path(self._graph, nbr, destination)
            for nbr in self._graph.successors(source)
        )
