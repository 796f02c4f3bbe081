import enum
from typing import Optional

from sqlalchemy import BigInteger
from sqlmodel import SQLModel, Field, Column


class ShipType(str, enum.Enum):
    """Fixed set of ship categories"""

    TRANSPORT = "TRANSPORT"
    MILITARY = "MILITARY"
    MERCANTILE = "MERCANTILE"


class ShipOrder(str, enum.Enum):
    """Sort keys accepted by the list endpoint"""

    ID = "id"
    SPEED = "speed"
    YEAR = "prod_date"
    RATING = "rating"


# Database Models
class ShipBase(SQLModel):
    name: str = Field(max_length=50, description="Ship name")
    planet: str = Field(max_length=50, description="Home planet")
    ship_type: ShipType = Field(description="Ship category")
    prod_date: int = Field(
        sa_column=Column(BigInteger, nullable=False),
        description="Production date as epoch milliseconds",
    )
    speed: float = Field(description="Speed in [0.01, 0.99]")
    crew_size: int = Field(description="Crew size in [1, 9999]")
    is_used: bool = Field(default=False, description="Whether the ship is second-hand")
    rating: float = Field(default=0.0, description="Derived rating, never set by clients")


class Ship(ShipBase, table=True):
    __tablename__ = "ships"  # type: ignore

    id: Optional[int] = Field(default=None, primary_key=True)
