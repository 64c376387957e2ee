"""Configuration classes for railgraph components."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class EnumerationConfig:
    """Cut-off settings for the cyclic route enumerator.

    The enumerator stops descending a branch once the trailing run of
    ``pattern_window`` nodes occurs more than ``max_pattern_repeats`` times in
    the route built so far. Every window is checked when it is formed, so each
    one is bounded and route length is finite on any finite graph.

    The number of routes explored is still exponential in that bound. On
    dense cyclic graphs (e.g. three nodes with edges both ways between every
    pair) the default repeat limit does not finish in practical time. Set
    ``max_stops`` to cap route length outright; branches are not extended past
    that many stops, whatever the predicate would accept.
    """

    # Number of trailing nodes compared when looking for a repeated cycle
    pattern_window: int = 3

    # Occurrences of the trailing window allowed before the branch is cut
    max_pattern_repeats: int = 3

    # Hard cap on route length in stops; None leaves it unbounded
    max_stops: Optional[int] = None

    def __post_init__(self) -> None:
        if self.pattern_window < 2:
            raise ValueError("pattern_window must be at least 2")
        if self.max_pattern_repeats < 1:
            raise ValueError("max_pattern_repeats must be at least 1")
        if self.max_stops is not None and self.max_stops < 1:
            raise ValueError("max_stops must be at least 1")


# Global configuration instance
ENUMERATION_CONFIG = EnumerationConfig()
