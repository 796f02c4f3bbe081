"""
Ship service module.

This module provides the ShipService class that implements the catalog
operations: list, count, create, get, edit and delete. It validates input,
keeps the derived rating consistent and delegates storage to the database
service.
"""

import logging
from typing import List, Optional

from spaceport.config import settings
from spaceport.database import DatabaseService, db_service
from spaceport.exceptions import BadRequestError, ShipNotFoundError
from spaceport.models import Ship, ShipOrder
from spaceport.schemas import ShipPayload
from spaceport.services.ship.filters import ShipCriteria, build_filter
from spaceport.services.ship.rating import compute_rating
from spaceport.services.ship.validation import validate_ship

logger = logging.getLogger(__name__)

# JSON field name -> Ship attribute, for ordering by plain field names
_ORDER_FIELDS = {
    "id": "id",
    "name": "name",
    "planet": "planet",
    "shipType": "ship_type",
    "prodDate": "prod_date",
    "speed": "speed",
    "crewSize": "crew_size",
    "isUsed": "is_used",
    "rating": "rating",
}

# Payload attributes copied onto the stored record when present
_MERGE_FIELDS = (
    "name",
    "planet",
    "ship_type",
    "prod_date",
    "speed",
    "crew_size",
    "is_used",
)


def resolve_order(order: Optional[str]) -> str:
    """
    Map an ``order`` query value to a Ship attribute name.

    Accepts the sort keys ``ID``, ``SPEED``, ``YEAR`` and ``RATING`` or any
    Ship JSON field name. ``None`` or an empty value sorts by id.
    """
    if not order:
        return ShipOrder.ID.value
    if order in ShipOrder.__members__:
        return ShipOrder[order].value
    if order in _ORDER_FIELDS:
        return _ORDER_FIELDS[order]
    raise BadRequestError(f"Unknown order field: {order}")


def merge_ship(ship: Ship, payload: ShipPayload) -> Ship:
    """Copy the non-null payload fields onto ``ship`` and return it."""
    for attr in _MERGE_FIELDS:
        value = getattr(payload, attr)
        if value is not None:
            setattr(ship, attr, value)
    return ship


def refresh_rating(ship: Ship) -> Ship:
    ship.rating = compute_rating(ship.speed, ship.is_used, ship.prod_date)
    return ship


class ShipService:
    """Service for the ship catalog operations."""

    def __init__(self, database: Optional[DatabaseService] = None):
        self._db = database or db_service

    async def list_ships(
        self,
        criteria: ShipCriteria,
        order: Optional[str] = None,
        page_number: int = 0,
        page_size: Optional[int] = None,
    ) -> List[Ship]:
        """Return one page of ships matching ``criteria``."""
        if page_size is None:
            page_size = settings.default_page_size
        if page_number < 0 or page_size < 1:
            raise BadRequestError("pageNumber must be >= 0 and pageSize >= 1")

        order_by = resolve_order(order)
        ship_filter = build_filter(criteria)
        logger.debug(
            f"Listing ships: filters={ship_filter.names} order={order_by} "
            f"page={page_number} size={page_size}"
        )
        return await self._db.find_ships(ship_filter, order_by, page_number, page_size)

    async def count_ships(self, criteria: ShipCriteria) -> int:
        """Count every ship matching ``criteria``."""
        ships = await self._db.find_all_ships(build_filter(criteria))
        return len(ships)

    async def create_ship(self, payload: ShipPayload) -> Ship:
        """Validate and store a new ship."""
        validate_ship(payload, partial=False)

        ship = Ship(
            name=payload.name,
            planet=payload.planet,
            ship_type=payload.ship_type,
            prod_date=payload.prod_date,
            speed=payload.speed,
            crew_size=payload.crew_size,
            is_used=payload.is_used if payload.is_used is not None else False,
        )
        refresh_rating(ship)

        ship = await self._db.create_ship(ship)
        logger.info(f"Created ship {ship.id} ({ship.name}), rating={ship.rating}")
        return ship

    async def get_ship(self, ship_id: int) -> Ship:
        """Get a ship or raise ShipNotFoundError."""
        ship = await self._db.get_ship(ship_id)
        if not ship:
            raise ShipNotFoundError(ship_id)
        return ship

    async def edit_ship(self, ship_id: int, payload: ShipPayload) -> Ship:
        """
        Apply a partial update to a stored ship.

        The payload is validated before the ship is looked up, so a bad
        payload is reported even when the id does not exist.
        """
        validate_ship(payload, partial=True)

        ship = await self.get_ship(ship_id)
        merge_ship(ship, payload)
        refresh_rating(ship)

        ship = await self._db.update_ship(ship)
        logger.info(f"Updated ship {ship.id}, rating={ship.rating}")
        return ship

    async def delete_ship(self, ship_id: int) -> None:
        """Permanently delete a ship or raise ShipNotFoundError."""
        deleted = await self._db.delete_ship(ship_id)
        if not deleted:
            raise ShipNotFoundError(ship_id)
        logger.info(f"Deleted ship {ship_id}")


ship_service = ShipService()
