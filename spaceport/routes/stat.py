"""Statistics and version information endpoints"""

from fastapi import APIRouter
from pydantic import BaseModel
import tomli
from pathlib import Path
from spaceport.database import db_service
from spaceport.models import ShipType

router = APIRouter()


def get_version() -> str:
    """Get version from pyproject.toml"""
    try:
        pyproject_path = Path(__file__).parent.parent.parent / "pyproject.toml"
        with open(pyproject_path, "rb") as f:
            data = tomli.load(f)
        return data.get("project", {}).get("version", "unknown")
    except (OSError, tomli.TOMLDecodeError):
        return "unknown"


class ShipStats(BaseModel):
    total: int
    used: int
    by_type: dict[str, int]


class OverviewResponse(BaseModel):
    service: str
    version: str
    status: str
    ships: ShipStats


@router.get("/stat")
async def get_stat():
    """Get service statistics and version information"""
    return {
        "service": "spaceport",
        "version": get_version(),
        "status": "running",
    }


@router.get("/stat/overview", response_model=OverviewResponse)
async def get_overview():
    """Get catalog overview statistics"""
    all_ships = await db_service.find_all_ships()

    by_type = {ship_type.value: 0 for ship_type in ShipType}
    for ship in all_ships:
        by_type[ShipType(ship.ship_type).value] += 1

    return OverviewResponse(
        service="spaceport",
        version=get_version(),
        status="running",
        ships=ShipStats(
            total=len(all_ships),
            used=len([s for s in all_ships if s.is_used]),
            by_type=by_type,
        ),
    )
