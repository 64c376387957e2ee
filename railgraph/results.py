"""Result records returned by route queries.

A query yields either a :class:`SingleRouteResult` (route costing and
shortest-route searches) or a :class:`MultiRouteResult` (route enumeration).
The variant is chosen when the result is built, never inferred later.
Results are immutable and own their data outright.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence, Tuple, Union

from railgraph.path import Route
from railgraph.types import Cost, RouteStatus


@dataclass(frozen=True)
class RouteBreakdown:
    """One accepted route of a multi-route result.

    Attributes:
        route: Hyphen-joined node ids, e.g. ``"C-D-C"``.
        cost: Total weight of the route.
        stops: Edges traversed.
    """

    route: str
    cost: Cost
    stops: int

    def to_dict(self) -> Dict[str, Any]:
        return {"route": self.route, "cost": self.cost, "stops": self.stops}


@dataclass(frozen=True)
class SingleRouteResult:
    """Outcome of a query that answers with at most one route.

    Attributes:
        input: Query input echoed for traceability.
        valid: True iff a route was found.
        message: Status message, or a descriptive error for malformed queries.
        output: Rendered route taken; empty when invalid.
        cost: Total weight; 0 when invalid.
        stops: Edges traversed; 0 when invalid.
    """

    input: str
    valid: bool
    message: str
    output: str = ""
    cost: Cost = 0
    stops: int = 0

    @property
    def number_of_trips(self) -> int:
        return 1 if self.valid else 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": "single",
            "input": self.input,
            "valid": self.valid,
            "message": self.message,
            "number_of_trips": self.number_of_trips,
            "output": self.output,
            "cost": self.cost,
            "stops": self.stops,
        }


@dataclass(frozen=True)
class MultiRouteResult:
    """Outcome of a query that enumerates routes.

    ``outputs``, ``costs``, ``stops`` and ``breakdown`` are aligned by index.
    """

    input: str
    valid: bool
    message: str
    outputs: Tuple[str, ...] = ()
    costs: Tuple[Cost, ...] = ()
    stops: Tuple[int, ...] = ()
    breakdown: Tuple[RouteBreakdown, ...] = ()

    @property
    def number_of_trips(self) -> int:
        return len(self.outputs)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": "multi",
            "input": self.input,
            "valid": self.valid,
            "message": self.message,
            "number_of_trips": self.number_of_trips,
            "outputs": list(self.outputs),
            "costs": list(self.costs),
            "stops": list(self.stops),
            "breakdown": [entry.to_dict() for entry in self.breakdown],
        }


RouteResult = Union[SingleRouteResult, MultiRouteResult]


def single_route_result(query_input: str, route: Optional[Route]) -> SingleRouteResult:
    """Build a single-route result; ``None`` means no route was found."""
    if route is None:
        return no_route_result(query_input)  # type: ignore[return-value]
    return SingleRouteResult(
        input=query_input,
        valid=True,
        message=RouteStatus.SUCCESS.value,
        output=str(route),
        cost=route.cost,
        stops=route.stops,
    )


def multi_route_result(query_input: str, routes: Sequence[Route]) -> MultiRouteResult:
    """Build a multi-route result; an empty sequence means no route was found."""
    if not routes:
        return no_route_result(query_input, multi=True)  # type: ignore[return-value]

    breakdown = tuple(
        RouteBreakdown(route=str(route), cost=route.cost, stops=route.stops)
        for route in routes
    )
    return MultiRouteResult(
        input=query_input,
        valid=True,
        message=RouteStatus.SUCCESS.value,
        outputs=tuple(entry.route for entry in breakdown),
        costs=tuple(entry.cost for entry in breakdown),
        stops=tuple(entry.stops for entry in breakdown),
        breakdown=breakdown,
    )


def no_route_result(query_input: str, multi: bool = False) -> RouteResult:
    """Build the result of a well-formed query that has no answer."""
    return invalid_result(query_input, RouteStatus.NO_SUCH_ROUTE.value, multi=multi)


def invalid_result(query_input: str, message: str, multi: bool = False) -> RouteResult:
    """Build an invalid result carrying `message`."""
    if multi:
        return MultiRouteResult(input=query_input, valid=False, message=message)
    return SingleRouteResult(input=query_input, valid=False, message=message)
