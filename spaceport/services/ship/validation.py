"""
Validation of ship payloads and path identifiers.
"""

import re

from spaceport.exceptions import BadRequestError, ShipValidationError
from spaceport.schemas import ShipPayload
from spaceport.services.ship.rating import CURRENT_YEAR, prod_year

MIN_NAME_LENGTH = 1
MAX_NAME_LENGTH = 50
MIN_CREW_SIZE = 1
MAX_CREW_SIZE = 9999
MIN_SPEED = 0.01
MAX_SPEED = 0.99
MIN_PROD_YEAR = 2800
MAX_PROD_YEAR = CURRENT_YEAR

# Python attribute -> JSON field name, in the order they are reported
REQUIRED_FIELDS = {
    "name": "name",
    "planet": "planet",
    "ship_type": "shipType",
    "prod_date": "prodDate",
    "speed": "speed",
    "crew_size": "crewSize",
}

_ID_PATTERN = re.compile(r"\+?[0-9]+")
_MAX_ID = 2**63 - 1


def parse_ship_id(raw: str) -> int:
    """
    Parse a ship id taken from the request path.

    The id must be non-empty, not "0", not negative and a valid 64-bit
    integer. Anything else raises BadRequestError.
    """
    if not raw or raw == "0" or raw.startswith("-"):
        raise BadRequestError("Incorrect ID")
    if not _ID_PATTERN.fullmatch(raw):
        raise BadRequestError("ID is non digit")

    ship_id = int(raw)
    if ship_id > _MAX_ID:
        raise BadRequestError("ID is out of range")
    return ship_id


def _check_length(value: str, field: str) -> None:
    if not MIN_NAME_LENGTH <= len(value) <= MAX_NAME_LENGTH:
        raise ShipValidationError(
            f"{field} must be between {MIN_NAME_LENGTH} and {MAX_NAME_LENGTH} characters",
            field=field,
        )


def validate_ship(payload: ShipPayload, partial: bool = False) -> None:
    """
    Check a create/edit payload against the ship field constraints.

    On creation (``partial=False``) every required field must be present.
    On edit only the supplied fields are checked.

    Raises:
        ShipValidationError: naming the first offending field
    """
    if not partial:
        missing = [
            json_name
            for attr, json_name in REQUIRED_FIELDS.items()
            if getattr(payload, attr) is None
        ]
        if missing:
            raise ShipValidationError(
                f"Missing required fields: {', '.join(missing)}",
                field=missing[0],
            )

    if payload.name is not None:
        _check_length(payload.name, "name")

    if payload.planet is not None:
        _check_length(payload.planet, "planet")

    if payload.crew_size is not None and not (
        MIN_CREW_SIZE <= payload.crew_size <= MAX_CREW_SIZE
    ):
        raise ShipValidationError(
            f"crewSize must be in [{MIN_CREW_SIZE}; {MAX_CREW_SIZE}]", field="crewSize"
        )

    if payload.speed is not None and not (MIN_SPEED <= payload.speed <= MAX_SPEED):
        raise ShipValidationError(
            f"speed must be in [{MIN_SPEED}; {MAX_SPEED}]", field="speed"
        )

    if payload.prod_date is not None:
        try:
            year = prod_year(payload.prod_date)
        except OverflowError:
            raise ShipValidationError("prodDate is out of range", field="prodDate")
        if not MIN_PROD_YEAR <= year <= MAX_PROD_YEAR:
            raise ShipValidationError(
                f"prodDate year must be in [{MIN_PROD_YEAR}; {MAX_PROD_YEAR}], got {year}",
                field="prodDate",
            )
