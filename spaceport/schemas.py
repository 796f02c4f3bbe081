"""
API request/response models for the ship catalog.

Python attributes are snake_case; the wire format uses the camelCase names
clients already rely on (``shipType``, ``prodDate``, ``crewSize``, ``isUsed``).
"""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from spaceport.models import ShipType


class ShipPayload(BaseModel):
    """Body of create and edit requests.

    Every field is optional at the schema level; required-field and range
    checks are applied by the validation engine so that both operations
    report the same errors. ``id`` and ``rating`` sent by clients are dropped.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: Optional[str] = None
    planet: Optional[str] = None
    ship_type: Optional[ShipType] = Field(None, alias="shipType")
    prod_date: Optional[int] = Field(
        None, alias="prodDate", description="Epoch milliseconds"
    )
    speed: Optional[float] = None
    crew_size: Optional[int] = Field(None, alias="crewSize")
    is_used: Optional[bool] = Field(None, alias="isUsed")


class ShipResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    planet: str
    ship_type: ShipType = Field(serialization_alias="shipType")
    prod_date: int = Field(serialization_alias="prodDate")
    speed: float
    crew_size: int = Field(serialization_alias="crewSize")
    is_used: bool = Field(serialization_alias="isUsed")
    rating: float


class ErrorResponse(BaseModel):
    """Error body; malformed requests list the offending fields."""

    detail: Union[str, List[Dict[str, Any]]]
