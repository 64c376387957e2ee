"""YAML scenarios: one rail graph plus a batch of named route queries.

Example::

    graph: "AB5, BC4, CD8, DC8, DE6, AD5, CE2, EB3, AE7"
    queries:
      - name: distance_abc
        route: A-B-C
      - name: trips_c_c
        start: C
        end: C
        where: {stops: {"<=": 3}}
      - name: shortest_a_c
        start: A
        end: C
        shortest: true
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from railgraph.conditions import make_predicate
from railgraph.logging import get_logger
from railgraph.network import RailNetwork, RouteQuery
from railgraph.results import RouteResult

logger = get_logger(__name__)

_TOP_LEVEL_KEYS = {"graph", "queries"}
_QUERY_KEYS = {"name", "route", "start", "end", "where", "shortest"}


def load_scenario_yaml(yaml_str: str) -> Dict[str, Any]:
    """Load and validate a scenario YAML string.

    Returns:
        The scenario as a dictionary with a ``graph`` string and a ``queries``
        list in which every entry has a unique ``name``.

    Raises:
        ValueError: If the document does not have the expected shape.
    """
    data = yaml.safe_load(yaml_str)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError("The provided YAML must map to a dictionary at top-level.")

    extra = set(data.keys()) - _TOP_LEVEL_KEYS
    if extra:
        raise ValueError(
            f"Unrecognized top-level key(s) in scenario: {', '.join(sorted(extra))}. "
            f"Allowed keys are {sorted(_TOP_LEVEL_KEYS)}"
        )

    graph = data.get("graph")
    if not isinstance(graph, str) or not graph.strip():
        raise ValueError("'graph' must be a non-empty edge list string")

    queries = data.get("queries", [])
    if queries is None:
        queries = []
    if not isinstance(queries, list):
        raise ValueError("'queries' must be a list")

    seen: set[str] = set()
    for idx, entry in enumerate(queries, start=1):
        if not isinstance(entry, dict):
            raise ValueError(f"Query #{idx} must be a mapping")
        unknown = set(entry.keys()) - _QUERY_KEYS
        if unknown:
            raise ValueError(
                f"Unrecognized key(s) in query #{idx}: {', '.join(sorted(unknown))}"
            )

        has_route = "route" in entry
        has_ends = "start" in entry or "end" in entry
        if has_route == has_ends:
            raise ValueError(
                f"Query #{idx} must define either 'route' or both 'start' and 'end'"
            )
        if has_ends and not ("start" in entry and "end" in entry):
            raise ValueError(f"Query #{idx} must define both 'start' and 'end'")
        if has_route and ("where" in entry or "shortest" in entry):
            raise ValueError(
                f"Query #{idx}: 'where' and 'shortest' apply only to start/end queries"
            )
        if "shortest" in entry and not isinstance(entry["shortest"], bool):
            raise ValueError(f"Query #{idx}: 'shortest' must be a boolean")

        name = str(entry.get("name") or f"query_{idx}")
        entry["name"] = name
        if name in seen:
            raise ValueError(f"Duplicate query name '{name}'")
        seen.add(name)

    data["queries"] = queries
    return data


@dataclass
class ScenarioQuery:
    """A named query of a scenario: either a fixed route or a route search."""

    name: str
    route: Optional[str] = None
    query: Optional[RouteQuery] = None

    def run(self, network: RailNetwork) -> RouteResult:
        if self.route is not None:
            return network.route_cost(self.route)
        assert self.query is not None
        return network.find_routes(self.query)


@dataclass
class Scenario:
    """A rail network and the queries to run against it."""

    network: RailNetwork
    queries: List[ScenarioQuery] = field(default_factory=list)

    @classmethod
    def from_yaml(cls, yaml_str: str) -> Scenario:
        """Build a scenario from a YAML string.

        Raises:
            ValueError: On an invalid document, an unparseable edge list, or
                invalid query conditions.
        """
        data = load_scenario_yaml(yaml_str)
        network = RailNetwork.from_edge_list(data["graph"])

        queries: List[ScenarioQuery] = []
        for entry in data["queries"]:
            if "route" in entry:
                queries.append(
                    ScenarioQuery(name=entry["name"], route=str(entry["route"]))
                )
                continue
            queries.append(
                ScenarioQuery(
                    name=entry["name"],
                    query=RouteQuery(
                        start_node=str(entry["start"]),
                        end_node=str(entry["end"]),
                        predicate=make_predicate(entry.get("where")),
                        shortest_route=entry.get("shortest", False),
                    ),
                )
            )

        logger.debug(
            "Loaded scenario with %d nodes and %d queries",
            len(network.edges),
            len(queries),
        )
        return cls(network=network, queries=queries)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> Scenario:
        return cls.from_yaml(Path(path).read_text(encoding="utf-8"))

    def run(self) -> Dict[str, RouteResult]:
        """Run every query in order and return results keyed by query name."""
        results: Dict[str, RouteResult] = {}
        for item in self.queries:
            result = item.run(self.network)
            logger.info("Query %s: %s (%s)", item.name, result.message, result.input)
            results[item.name] = result
        return results
