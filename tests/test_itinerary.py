import pytest

from routeplanner.domain.errors import InvalidArgumentError
from routeplanner.domain.models import Duration, Itinerary, Price
from routeplanner.graph import build_graph, find_all_paths
from routeplanner.itinerary import (
    build_itinerary,
    compute_duration,
    compute_price,
    layover_minutes,
)


class TestComputeDuration:
    def test_single_connection(self, make_connection):
        duration = compute_duration([make_connection(departure="08:00", arrival="10:30")])

        assert duration == Duration(total_time=150, flight_time=150, wait_time=0)

    def test_overnight_connection(self, make_connection):
        duration = compute_duration([make_connection(departure="23:50", arrival="00:10")])

        assert duration.flight_time == 20

    def test_short_gap_waits_until_next_day(self, make_connection):
        path = [
            make_connection("A", "B", "08:00", "09:00"),
            make_connection("B", "C", "09:20", "10:00"),
        ]

        duration = compute_duration(path)

        assert duration.wait_time == 20 + 1440
        assert duration.flight_time == 100

    def test_long_enough_gap_is_kept(self, make_connection):
        path = [
            make_connection("A", "B", "08:00", "09:00"),
            make_connection("B", "C", "09:45", "10:00"),
        ]

        assert compute_duration(path).wait_time == 45

    def test_gap_of_exactly_thirty_minutes_waits_a_day(self, make_connection):
        previous = make_connection("A", "B", "08:00", "09:00")
        following = make_connection("B", "C", "09:30", "10:00")

        assert layover_minutes(previous, following) == 30 + 1440
        assert layover_minutes(previous, following, min_connection_minutes=29) == 30

    def test_gap_wrapping_past_midnight(self, make_connection):
        path = [
            make_connection("A", "B", "20:00", "23:30"),
            make_connection("B", "C", "01:00", "03:00"),
        ]

        duration = compute_duration(path)

        assert duration.wait_time == 90
        assert duration.flight_time == 210 + 120
        assert duration.total_time == 90 + 330

    def test_total_is_flight_plus_wait(self, make_connection):
        path = [
            make_connection("A", "B", "06:10", "07:40"),
            make_connection("B", "C", "07:55", "12:00"),
            make_connection("C", "D", "18:00", "02:15"),
        ]

        duration = compute_duration(path)

        assert duration.total_time == duration.flight_time + duration.wait_time
        assert duration.flight_time >= 0
        assert duration.wait_time >= 0

    def test_empty_path_is_zero(self):
        assert compute_duration([]) == Duration()

    @pytest.mark.parametrize("path", [None, 3, "AB", {"a": 1}])
    def test_rejects_non_sequence(self, path):
        with pytest.raises(InvalidArgumentError):
            compute_duration(path)

    def test_rejects_non_connection_items(self, make_connection):
        with pytest.raises(InvalidArgumentError):
            compute_duration([make_connection(), {"cost": 1}])


class TestComputePrice:
    def test_no_repeated_company_has_no_discount(self, make_connection):
        path = [
            make_connection("A", "B", cost=100, company="A"),
            make_connection("B", "C", cost=150, company="B"),
        ]

        price = compute_price(path)

        assert price.cumulative_price == 250
        assert price.number_of_stop_discounts == 0
        assert price.total_price == 250

    def test_one_repeated_company(self, make_connection):
        path = [
            make_connection("A", "B", cost=100, company="A"),
            make_connection("B", "C", cost=100, company="A"),
            make_connection("C", "D", cost=100, company="B"),
        ]

        price = compute_price(path)

        assert price.number_of_stop_discounts == 1
        assert price.stop_discounts == {"A": 2, "B": 1}
        assert price.total_price == pytest.approx(225)

    def test_discount_is_flat_per_repeated_company(self, make_connection):
        path = [
            make_connection("A", "B", cost=100, company="A"),
            make_connection("B", "C", cost=100, company="A"),
            make_connection("C", "D", cost=100, company="B"),
            make_connection("D", "E", cost=100, company="B"),
            make_connection("E", "F", cost=100, company="A"),
        ]

        price = compute_price(path)

        assert price.number_of_stop_discounts == 2
        assert price.total_price == pytest.approx(500 * 0.5)

    def test_discount_is_not_capped(self, make_connection):
        path = []
        for index, company in enumerate("AABBCCDD"):
            path.append(make_connection(f"L{index}", f"L{index + 1}", cost=10, company=company))

        price = compute_price(path)

        assert price.number_of_stop_discounts == 4
        assert price.total_price == pytest.approx(0)

    def test_custom_discount_rate(self, make_connection):
        path = [
            make_connection("A", "B", cost=200, company="A"),
            make_connection("B", "C", cost=200, company="A"),
        ]

        assert compute_price(path, discount_rate=0.1).total_price == pytest.approx(360)

    def test_empty_path_is_zero(self):
        price = compute_price([])

        assert price.total_price == 0
        assert price.cumulative_price == 0
        assert price.number_of_stop_discounts == 0

    @pytest.mark.parametrize("path", [None, 3, "AB"])
    def test_rejects_non_sequence(self, path):
        with pytest.raises(InvalidArgumentError):
            compute_price(path)


def test_build_itinerary_sets_duration_and_price(make_connection):
    path = (make_connection("A", "B", "08:00", "10:30", cost=300),)

    itinerary = build_itinerary("A", "B", path)

    assert isinstance(itinerary, Itinerary)
    assert itinerary.is_computed
    assert itinerary.connections == path
    assert itinerary.duration.total_time == 150
    assert itinerary.price.total_price == 300
    assert itinerary.stops == ("A", "B")


def test_itinerary_from_path_matches_build_itinerary(make_connection):
    path = (make_connection("A", "B"), make_connection("B", "C", "10:00", "11:00"))

    built = build_itinerary("A", "C", path)
    from_path = Itinerary.from_path("A", "C", path)

    assert from_path.duration == built.duration
    assert from_path.price == built.price


def test_itinerary_values_are_set_once(make_connection):
    itinerary = Itinerary(origin="A", destination="B", connections=(make_connection(),))
    assert not itinerary.is_computed
    assert itinerary.duration == Duration()

    itinerary.set_duration(Duration(total_time=60, flight_time=60))
    itinerary.set_price(Price(total_price=100, cumulative_price=100))

    with pytest.raises(InvalidArgumentError):
        itinerary.set_duration(Duration())
    with pytest.raises(InvalidArgumentError):
        itinerary.set_price(Price())
    assert itinerary.duration.total_time == 60
    assert itinerary.price.total_price == 100


def test_itinerary_setters_check_types(make_connection):
    itinerary = Itinerary(origin="A", destination="B", connections=[make_connection()])

    with pytest.raises(InvalidArgumentError):
        itinerary.set_duration({"total_time": 1})
    with pytest.raises(InvalidArgumentError):
        itinerary.set_price(100)


def test_end_to_end_two_legs_same_company(make_connection):
    ab = make_connection("A", "B", "08:00", "09:00", cost=100, company="X")
    bc = make_connection("B", "C", "09:10", "10:00", cost=100, company="X")
    graph = build_graph(["A", "B", "C"], [ab, bc])

    paths = find_all_paths(graph, "A", "C")
    assert paths == [(ab, bc)]

    itinerary = build_itinerary("A", "C", paths[0])
    assert itinerary.price.number_of_stop_discounts == 1
    assert itinerary.price.total_price == pytest.approx(150)
    # a 10 minute layover is below the minimum connection time
    assert itinerary.duration.flight_time == 110
    assert itinerary.duration.wait_time == 10 + 1440
    assert itinerary.duration.total_time == 110 + 1450

    relaxed = build_itinerary("A", "C", paths[0], min_connection_minutes=5)
    assert relaxed.duration.wait_time == 10
    assert relaxed.duration.total_time == 120
