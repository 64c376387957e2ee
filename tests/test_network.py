"""End-to-end queries against the trains graph."""

import pytest

from railgraph.exceptions import MalformedEdgeToken
from railgraph.network import RailNetwork, RouteQuery
from railgraph.results import MultiRouteResult, SingleRouteResult

SUCCESS_MSG = "Completed Successfully!"
FAILURE_MSG = "NO SUCH ROUTE"


@pytest.mark.parametrize(
    "route, expected_cost",
    [
        ("A-B-C", 9),
        ("A-D", 5),
        ("A-D-C", 13),
        ("A-E-B-C-D", 22),
    ],
)
def test_route_cost(trains, route, expected_cost):
    actual = trains.route_cost(route)

    assert isinstance(actual, SingleRouteResult)
    assert actual.valid
    assert actual.message == SUCCESS_MSG
    assert actual.cost == expected_cost
    assert actual.output == route
    assert actual.stops == route.count("-")


def test_route_cost_no_such_route(trains):
    actual = trains.route_cost("A-E-D")

    assert not actual.valid
    assert actual.message == FAILURE_MSG
    assert actual.cost == 0


def test_route_cost_normalizes_input(trains):
    actual = trains.route_cost(" a - b-c ")

    assert actual.valid
    assert actual.cost == 9
    assert actual.output == "A-B-C"
    assert actual.input == " a - b-c "


def test_route_cost_too_few_nodes_is_distinct_from_no_route(trains):
    actual = trains.route_cost("A")

    assert not actual.valid
    assert actual.message != FAILURE_MSG
    assert "2 nodes" in actual.message


def test_routes_c_to_c_max_three_stops(trains):
    actual = trains.routes("C", "C", lambda stops, cost: stops <= 3)

    assert isinstance(actual, MultiRouteResult)
    assert actual.valid
    assert actual.message == SUCCESS_MSG
    assert actual.number_of_trips == 2
    assert actual.input == "Starting at C and ending at C"


def test_routes_a_to_c_exactly_four_stops(trains):
    actual = trains.find_routes(
        RouteQuery("A", "C", predicate=lambda stops, cost: stops == 4)
    )

    assert actual.valid
    assert actual.number_of_trips == 3
    assert actual.stops == (4, 4, 4)


def test_routes_c_to_c_cost_below_30(trains):
    actual = trains.routes("C", "C", lambda stops, cost: cost < 30)

    assert actual.valid
    assert actual.number_of_trips == 7
    assert all(cost < 30 for cost in actual.costs)
    assert len(actual.breakdown) == 7


def test_shortest_route_a_to_c(trains):
    actual = trains.routes("A", "C", shortest_route=True)

    assert isinstance(actual, SingleRouteResult)
    assert actual.valid
    assert actual.message == SUCCESS_MSG
    assert actual.output == "A-B-C"
    assert actual.stops == 2
    assert actual.cost == 9


def test_shortest_route_b_to_b(trains):
    actual = trains.routes("B", "B", shortest_route=True)

    assert actual.valid
    assert actual.output == "B-C-E-B"
    assert actual.stops == 3


def test_routes_lowercase_and_whitespace(trains):
    actual = trains.routes(" c", "c ", lambda stops, cost: stops <= 3)

    assert actual.valid
    assert actual.number_of_trips == 2


def test_same_node_without_predicate_is_invalid(trains):
    actual = trains.routes("C", "C")

    assert isinstance(actual, MultiRouteResult)
    assert not actual.valid
    assert actual.message != FAILURE_MSG
    assert "predicate" in actual.message


def test_unknown_start_node_is_invalid(trains):
    actual = trains.routes("Z", "C", lambda stops, cost: True)

    assert not actual.valid
    assert actual.message == "Z is not a node in the graph"


def test_missing_end_node_is_invalid(trains):
    actual = trains.routes("A", "", lambda stops, cost: True)

    assert not actual.valid
    assert "required" in actual.message


def test_unreachable_target_is_no_such_route(trains):
    actual = trains.routes("C", "A", lambda stops, cost: True)

    assert isinstance(actual, MultiRouteResult)
    assert not actual.valid
    assert actual.message == FAILURE_MSG


def test_no_accepted_route_is_no_such_route(trains):
    actual = trains.routes("A", "C", lambda stops, cost: cost < 3)

    assert not actual.valid
    assert actual.message == FAILURE_MSG
    assert actual.number_of_trips == 0


def test_shortest_route_unreachable(trains):
    actual = trains.routes("A", "A", shortest_route=True)

    assert isinstance(actual, SingleRouteResult)
    assert not actual.valid
    assert actual.message == FAILURE_MSG


def test_repeated_queries_are_identical(trains):
    first = trains.routes("C", "C", lambda stops, cost: cost < 30)
    second = trains.routes("C", "C", lambda stops, cost: cost < 30)
    assert first == second
    assert trains.route_cost("A-E-B-C-D") == trains.route_cost("A-E-B-C-D")


def test_from_edge_list_rejects_malformed_graph():
    with pytest.raises(MalformedEdgeToken):
        RailNetwork.from_edge_list("AB5, BC")
