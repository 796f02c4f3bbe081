from sqlmodel import SQLModel, select
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine, AsyncSession
from sqlalchemy.pool import StaticPool
from typing import TYPE_CHECKING, Optional, List
from spaceport.config import settings
from spaceport.models import Ship

if TYPE_CHECKING:
    from spaceport.services.ship.filters import ShipFilter


class DatabaseService:
    def __init__(self, database_url: Optional[str] = None):
        self.database_url = database_url or settings.database_url
        self.engine: Optional[AsyncEngine] = None

    async def initialize(self):
        """Initialize database connection"""
        self.engine = create_async_engine(
            self.database_url,
            echo=settings.debug,
            future=True,
            # SQLite specific settings
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )

    async def create_tables(self):
        """Create database tables"""
        if not self.engine:
            await self.initialize()

        async with self.engine.begin() as conn:  # type: ignore
            await conn.run_sync(SQLModel.metadata.create_all)

    async def close(self):
        """Dispose of the engine and its pooled connections"""
        if self.engine:
            await self.engine.dispose()
            self.engine = None

    def get_session(self) -> AsyncSession:
        """Get database session"""
        if not self.engine:
            raise RuntimeError("Database not initialized")

        return AsyncSession(self.engine, expire_on_commit=False)

    async def create_ship(self, ship: Ship) -> Ship:
        """Insert a new ship and return it with its assigned id"""
        session = self.get_session()
        try:
            session.add(ship)
            await session.commit()
            await session.refresh(ship)
            return ship
        finally:
            await session.close()

    async def get_ship(self, ship_id: int) -> Optional[Ship]:
        """Get ship by ID"""
        session = self.get_session()
        try:
            return await session.get(Ship, ship_id)
        finally:
            await session.close()

    async def ship_exists(self, ship_id: int) -> bool:
        """Check whether a ship with this ID is stored"""
        session = self.get_session()
        try:
            statement = select(Ship.id).where(Ship.id == ship_id)
            result = await session.execute(statement)
            return result.scalar_one_or_none() is not None
        finally:
            await session.close()

    async def update_ship(self, ship: Ship) -> Ship:
        """Update ship record"""
        session = self.get_session()
        try:
            # Use merge() instead of add() to handle detached objects
            merged_ship = await session.merge(ship)
            await session.commit()
            await session.refresh(merged_ship)
            return merged_ship
        finally:
            await session.close()

    async def delete_ship(self, ship_id: int) -> bool:
        """Delete ship by ID"""
        session = self.get_session()
        try:
            ship = await session.get(Ship, ship_id)

            if ship:
                await session.delete(ship)
                await session.commit()
                return True
            return False
        finally:
            await session.close()

    def _ordered(self, order_by: str):
        column = getattr(Ship, order_by)
        return select(Ship).order_by(column, Ship.id)

    async def find_all_ships(
        self, ship_filter: Optional["ShipFilter"] = None, order_by: str = "id"
    ) -> List[Ship]:
        """List every ship matching the filter, sorted ascending by ``order_by``"""
        session = self.get_session()
        try:
            result = await session.execute(self._ordered(order_by))
            ships = list(result.scalars().all())
        finally:
            await session.close()

        if ship_filter is None:
            return ships
        return ship_filter.apply(ships)

    async def find_ships(
        self,
        ship_filter: Optional["ShipFilter"],
        order_by: str,
        page_number: int,
        page_size: int,
    ) -> List[Ship]:
        """Return one page of matching ships"""
        start = page_number * page_size
        if ship_filter is not None and ship_filter.predicates:
            ships = await self.find_all_ships(ship_filter, order_by)
            return ships[start:start + page_size]

        # Nothing to test in Python, so the database pages the rows itself
        session = self.get_session()
        try:
            statement = self._ordered(order_by).offset(start).limit(page_size)
            result = await session.execute(statement)
            return list(result.scalars().all())
        finally:
            await session.close()


db_service = DatabaseService()
