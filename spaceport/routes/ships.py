import logging
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, status, Query
from fastapi.responses import Response
from spaceport.config import settings
from spaceport.exceptions import BadRequestError, ShipNotFoundError
from spaceport.models import ShipType
from spaceport.schemas import ErrorResponse, ShipPayload, ShipResponse
from spaceport.services.ship import ship_service
from spaceport.services.ship.filters import ShipCriteria
from spaceport.services.ship.validation import parse_ship_id

logger = logging.getLogger(__name__)

router = APIRouter()

BAD_REQUEST = {status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}}
NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}


def ship_criteria(
    name: Optional[str] = Query(None),
    planet: Optional[str] = Query(None),
    ship_type: Optional[ShipType] = Query(None, alias="shipType"),
    after: Optional[int] = Query(None, description="Epoch millis, inclusive"),
    before: Optional[int] = Query(None, description="Epoch millis, exclusive"),
    is_used: Optional[bool] = Query(None, alias="isUsed"),
    min_speed: Optional[float] = Query(None, alias="minSpeed"),
    max_speed: Optional[float] = Query(None, alias="maxSpeed"),
    min_crew_size: Optional[int] = Query(None, alias="minCrewSize"),
    max_crew_size: Optional[int] = Query(None, alias="maxCrewSize"),
    min_rating: Optional[float] = Query(None, alias="minRating"),
    max_rating: Optional[float] = Query(None, alias="maxRating"),
) -> ShipCriteria:
    """Collect the list/count filter query parameters"""
    return ShipCriteria(
        name=name,
        planet=planet,
        ship_type=ship_type,
        after=after,
        before=before,
        is_used=is_used,
        min_speed=min_speed,
        max_speed=max_speed,
        min_crew_size=min_crew_size,
        max_crew_size=max_crew_size,
        min_rating=min_rating,
        max_rating=max_rating,
    )


def resolve_ship_id(ship_id: str) -> int:
    try:
        return parse_ship_id(ship_id)
    except BadRequestError as e:
        logger.warning(f"Rejected ship id {ship_id!r}: {e}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get("/ships", response_model=list[ShipResponse], responses=BAD_REQUEST)
async def list_ships(
    criteria: ShipCriteria = Depends(ship_criteria),
    order: Optional[str] = Query(None, description="ID, SPEED, YEAR, RATING or a field name"),
    page_number: int = Query(0, ge=0, alias="pageNumber"),
    page_size: int = Query(settings.default_page_size, ge=1, alias="pageSize"),
):
    """Get one page of ships matching the filters"""
    try:
        ships = await ship_service.list_ships(criteria, order, page_number, page_size)
        return [ShipResponse.model_validate(ship) for ship in ships]
    except BadRequestError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get("/ships/count", response_model=int)
async def count_ships(criteria: ShipCriteria = Depends(ship_criteria)):
    """Count all ships matching the filters"""
    return await ship_service.count_ships(criteria)


@router.post("/ships", response_model=ShipResponse, responses=BAD_REQUEST)
async def create_ship(payload: ShipPayload):
    """Create a new ship"""
    try:
        ship = await ship_service.create_ship(payload)
        return ShipResponse.model_validate(ship)
    except BadRequestError as e:
        logger.warning(f"Rejected ship creation: {e}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get(
    "/ships/{ship_id}", response_model=ShipResponse, responses={**BAD_REQUEST, **NOT_FOUND}
)
async def get_ship(ship_id: str):
    """Get ship information"""
    resolved_id = resolve_ship_id(ship_id)
    try:
        ship = await ship_service.get_ship(resolved_id)
    except ShipNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    return ShipResponse.model_validate(ship)


@router.post(
    "/ships/{ship_id}", response_model=ShipResponse, responses={**BAD_REQUEST, **NOT_FOUND}
)
async def edit_ship(ship_id: str, payload: ShipPayload):
    """Update the given fields of a ship"""
    resolved_id = resolve_ship_id(ship_id)
    try:
        ship = await ship_service.edit_ship(resolved_id, payload)
        return ShipResponse.model_validate(ship)
    except BadRequestError as e:
        logger.warning(f"Rejected edit of ship {resolved_id}: {e}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except ShipNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.delete(
    "/ships/{ship_id}", status_code=status.HTTP_200_OK, responses={**BAD_REQUEST, **NOT_FOUND}
)
async def delete_ship(ship_id: str):
    """Permanently delete a ship"""
    resolved_id = resolve_ship_id(ship_id)
    try:
        await ship_service.delete_ship(resolved_id)
    except ShipNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    return Response(status_code=status.HTTP_200_OK)
