"""
Seeding service.

Inserts the fixture rows in dependency order inside a single transaction
and checks referential integrity afterwards. Engine constraint failures
are re-raised as ConstraintViolationError; there is no retry.
"""

import logging
from typing import Dict, List, Sequence, Tuple, Type

from sqlalchemy import insert, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from shipment_tracker.app.core.exceptions import ConstraintViolationError
from shipment_tracker.app.db.schema_loader import load_schema
from shipment_tracker.app.db.seed_data import SEED_ROWS
from shipment_tracker.app.db.session import Base
from shipment_tracker.app.models.courier import Courier
from shipment_tracker.app.models.consignment import Consignment
from shipment_tracker.app.models.item import Item
from shipment_tracker.app.models.tracking_event import TrackingEvent

logger = logging.getLogger("shipment_tracker.seeding")


async def insert_rows(db: AsyncSession, model: Type[Base], rows: Sequence[dict]) -> int:
    """
    Insert a batch of literal rows into one table.
    
    Returns the number of rows inserted. Does not commit.
    
    Raises:
        ConstraintViolationError: the engine rejected a row (foreign key,
            duplicate key or missing required value).
    """
    if not rows:
        return 0
    try:
        await db.execute(insert(model), list(rows))
    except IntegrityError as exc:
        raise ConstraintViolationError.from_integrity_error(exc, model.__tablename__) from exc
    return len(rows)


async def seed_database(
    db: AsyncSession,
    seed_rows: Sequence[Tuple[Type[Base], Sequence[dict]]] = SEED_ROWS,
) -> Dict[str, int]:
    """
    Insert every table's fixture rows, parents first, and commit.
    
    On failure the whole seed is rolled back and the error propagates.
    """
    counts = {}
    try:
        for model, rows in seed_rows:
            counts[model.__tablename__] = await insert_rows(db, model, rows)
        await db.commit()
    except ConstraintViolationError as exc:
        await db.rollback()
        logger.error("Seeding halted", extra={"table": exc.table, "kind": exc.kind})
        raise
    except SQLAlchemyError as exc:
        await db.rollback()
        logger.error("Seeding halted", extra={"error": type(exc).__name__})
        raise
    logger.info("Seed data inserted", extra={"counts": counts})
    return counts


async def find_orphans(db: AsyncSession) -> Dict[str, List[int]]:
    """
    Return the keys of rows whose foreign key does not resolve.
    
    Keys of the result are table names; every list is empty when the data
    is referentially intact.
    """
    consignments = await db.execute(
        select(Consignment.consignment_no)
        .outerjoin(Courier, Consignment.courier_id == Courier.courier_id)
        .where(Courier.courier_id.is_(None))
        .order_by(Consignment.consignment_no)
    )
    items = await db.execute(
        select(Item.item_id)
        .outerjoin(Consignment, Item.consignment_no == Consignment.consignment_no)
        .where(Consignment.consignment_no.is_(None))
        .order_by(Item.item_id)
    )
    events = await db.execute(
        select(TrackingEvent.tracking_id)
        .outerjoin(Consignment, TrackingEvent.consignment_no == Consignment.consignment_no)
        .where(Consignment.consignment_no.is_(None))
        .order_by(TrackingEvent.tracking_id)
    )
    return {
        Consignment.__tablename__: list(consignments.scalars()),
        Item.__tablename__: list(items.scalars()),
        TrackingEvent.__tablename__: list(events.scalars()),
    }


async def load_database(engine: AsyncEngine, drop_existing: bool = True) -> Dict[str, int]:
    """Drop (optionally), create and seed the schema on the given engine."""
    await load_schema(engine, drop_existing=drop_existing)
    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as db:
        return await seed_database(db)
