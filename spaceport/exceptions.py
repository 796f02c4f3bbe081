"""
Domain exceptions raised by the ship service.

Routes translate these into HTTP responses: ``BadRequestError`` (and its
``ShipValidationError`` subclass) become 400, ``ShipNotFoundError`` becomes 404.
"""

from typing import Optional


class ShipServiceError(Exception):
    """Base class for ship catalog errors."""


class BadRequestError(ShipServiceError):
    """Raised for malformed input such as a bad ship id or sort key."""


class ShipValidationError(BadRequestError):
    """
    Raised when a ship field violates its constraints.

    ``field`` holds the offending JSON field name when a single field is at fault.
    """

    def __init__(self, message: str, field: Optional[str] = None):
        self.field = field
        super().__init__(message)


class ShipNotFoundError(ShipServiceError):
    """Raised when no ship exists for the requested id."""

    def __init__(self, ship_id: int):
        self.ship_id = ship_id
        super().__init__(f"Ship {ship_id} not found")
