"""
Filter builder for ship list and count queries.

``build_filter`` turns the optional query criteria into a ``ShipFilter``: a
list of named predicates that are AND-combined when the filter is applied to
a ship. Criteria left as ``None`` add no predicate, so an empty criteria set
matches every ship.
"""

from dataclasses import dataclass, field
from typing import Callable, List, Optional

from spaceport.models import Ship, ShipType


@dataclass
class ShipCriteria:
    """Optional search criteria accepted by list and count."""

    name: Optional[str] = None
    planet: Optional[str] = None
    ship_type: Optional[ShipType] = None
    after: Optional[int] = None
    before: Optional[int] = None
    is_used: Optional[bool] = None
    min_speed: Optional[float] = None
    max_speed: Optional[float] = None
    min_crew_size: Optional[int] = None
    max_crew_size: Optional[int] = None
    min_rating: Optional[float] = None
    max_rating: Optional[float] = None


@dataclass
class NamedPredicate:
    name: str
    test: Callable[[Ship], bool]


@dataclass
class ShipFilter:
    """AND-combination of named predicates."""

    predicates: List[NamedPredicate] = field(default_factory=list)

    def __call__(self, ship: Ship) -> bool:
        return all(predicate.test(ship) for predicate in self.predicates)

    @property
    def names(self) -> List[str]:
        return [predicate.name for predicate in self.predicates]

    def and_(self, name: str, test: Callable[[Ship], bool]) -> "ShipFilter":
        self.predicates.append(NamedPredicate(name, test))
        return self

    def apply(self, ships: List[Ship]) -> List[Ship]:
        return [ship for ship in ships if self(ship)]


def build_filter(criteria: ShipCriteria) -> ShipFilter:
    """Build the predicate for the given criteria."""
    ship_filter = ShipFilter()
    c = criteria

    # Substring matches are case-sensitive
    if c.name is not None:
        ship_filter.and_("name", lambda ship: c.name in ship.name)
    if c.planet is not None:
        ship_filter.and_("planet", lambda ship: c.planet in ship.planet)
    if c.ship_type is not None:
        ship_filter.and_("shipType", lambda ship: ship.ship_type == c.ship_type)

    # Production date is the half-open interval [after, before)
    if c.after is not None:
        ship_filter.and_("after", lambda ship: ship.prod_date >= c.after)
    if c.before is not None:
        ship_filter.and_("before", lambda ship: ship.prod_date < c.before)

    if c.is_used is not None:
        ship_filter.and_("isUsed", lambda ship: ship.is_used == c.is_used)

    # Numeric ranges are inclusive on both ends
    if c.min_speed is not None:
        ship_filter.and_("minSpeed", lambda ship: ship.speed >= c.min_speed)
    if c.max_speed is not None:
        ship_filter.and_("maxSpeed", lambda ship: ship.speed <= c.max_speed)
    if c.min_crew_size is not None:
        ship_filter.and_("minCrewSize", lambda ship: ship.crew_size >= c.min_crew_size)
    if c.max_crew_size is not None:
        ship_filter.and_("maxCrewSize", lambda ship: ship.crew_size <= c.max_crew_size)
    if c.min_rating is not None:
        ship_filter.and_("minRating", lambda ship: ship.rating >= c.min_rating)
    if c.max_rating is not None:
        ship_filter.and_("maxRating", lambda ship: ship.rating <= c.max_rating)

    return ship_filter
