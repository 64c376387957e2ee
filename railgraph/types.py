"""Shared type aliases and enums."""

from __future__ import annotations

from enum import Enum
from typing import Callable

#: A graph vertex, a single uppercase character such as "A".
NodeID = str

#: Edge weights and route totals are positive integers.
Cost = int

#: Query predicate evaluated on a completed route: (stops, cost) -> accept.
RoutePredicate = Callable[[int, Cost], bool]

#: Separator used when rendering a route and when parsing route queries.
ROUTE_SEPARATOR = "-"


class RouteStatus(str, Enum):
    """Status message of a route query on the found/not-found axis."""

    SUCCESS = "Completed Successfully!"
    NO_SUCH_ROUTE = "NO SUCH ROUTE"
