"""Pick the best itinerary for a client preference."""

from __future__ import annotations

from typing import Callable, Dict, Iterable, Optional, Union

from .domain.models import Itinerary, Preference


def _first_minimum(
    itineraries: Iterable[Itinerary], key: Callable[[Itinerary], float]
) -> Optional[Itinerary]:
    best: Optional[Itinerary] = None
    for itinerary in itineraries:
        # strict comparison keeps the first itinerary on ties
        if best is None or key(itinerary) < key(best):
            best = itinerary
    return best


def select_cheapest(itineraries: Iterable[Itinerary]) -> Optional[Itinerary]:
    return _first_minimum(itineraries, lambda itinerary: itinerary.price.total_price)


def select_fastest(itineraries: Iterable[Itinerary]) -> Optional[Itinerary]:
    return _first_minimum(itineraries, lambda itinerary: itinerary.duration.total_time)


SELECTION_STRATEGIES: Dict[Preference, Callable[[Iterable[Itinerary]], Optional[Itinerary]]] = {
    Preference.COST: select_cheapest,
    Preference.TIME: select_fastest,
}


def select_best(
    itineraries: Iterable[Itinerary],
    preference: Union[Preference, str],
) -> Optional[Itinerary]:
    """Return the cheapest or fastest itinerary.

    ``preference`` must be a ``Preference`` or exactly ``"Cost"`` or
    ``"Time"``. Any other value, like an empty collection, yields None.
    """
    strategy = None
    if isinstance(preference, (Preference, str)):
        # Preference is a str subclass, so the plain value looks it up too
        strategy = SELECTION_STRATEGIES.get(preference)  # type: ignore[call-overload]
    if strategy is None:
        return None
    return strategy(itineraries)
