"""Declarative route predicates.

Builds ``(stops, cost) -> bool`` predicates from condition mappings such as::

    {"stops": {"<=": 3}}
    {"cost": {"<": 30}, "stops": {">=": 2}}

Supports operators: ==, !=, <, <=, >, >=. Every listed condition must hold.
"""

from __future__ import annotations

import operator
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

from railgraph.types import Cost, RoutePredicate

__all__ = [
    "OPERATORS",
    "FIELDS",
    "evaluate_condition",
    "make_predicate",
]

OPERATORS: Dict[str, Callable[[Any, Any], bool]] = {
    "==": operator.eq,
    "!=": operator.ne,
    "<": operator.lt,
    "<=": operator.le,
    ">": operator.gt,
    ">=": operator.ge,
}

FIELDS = ("stops", "cost")


def evaluate_condition(value: int, op: str, expected: int) -> bool:
    """Evaluate ``value <op> expected``.

    Raises:
        ValueError: If operator is unknown.
    """
    try:
        compare = OPERATORS[op]
    except KeyError:
        raise ValueError(f"Unknown operator: {op}") from None
    return compare(value, expected)


def make_predicate(
    conditions: Optional[Mapping[str, Mapping[str, Any]]],
) -> Optional[RoutePredicate]:
    """Build a route predicate from a condition mapping.

    Args:
        conditions: ``{field: {operator: value}}`` with fields ``stops`` and
            ``cost``.

    Returns:
        A predicate requiring every condition, or None when `conditions` is
        empty or None (accept every route).

    Raises:
        ValueError: On unknown fields, unknown operators, or non-integer values.
    """
    if not conditions:
        return None

    checks: List[Tuple[str, str, int]] = []
    for field, ops in conditions.items():
        if field not in FIELDS:
            raise ValueError(
                f"Unknown condition field '{field}'. Valid fields are: {', '.join(FIELDS)}"
            )
        if not isinstance(ops, Mapping) or not ops:
            raise ValueError(
                f"Condition for '{field}' must be a non-empty mapping of operator to value"
            )
        for op, expected in ops.items():
            if op not in OPERATORS:
                raise ValueError(f"Unknown operator: {op}")
            if isinstance(expected, bool) or not isinstance(expected, int):
                raise ValueError(
                    f"Condition '{field} {op}' requires an integer value, got {expected!r}"
                )
            checks.append((field, op, expected))

    def predicate(stops: int, cost: Cost) -> bool:
        values = {"stops": stops, "cost": cost}
        return all(
            evaluate_condition(values[field], op, expected)
            for field, op, expected in checks
        )

    return predicate
