"""
Schema loader.

Creates the four tables in dependency order so every foreign key resolves
against a table that already exists, and drops them in reverse order for
clean re-runs.
"""

import logging
from typing import Iterable, Sequence

from sqlalchemy import Table
from sqlalchemy.ext.asyncio import AsyncEngine

from shipment_tracker.app.core.exceptions import SchemaOrderError
from shipment_tracker.app.models.courier import Courier
from shipment_tracker.app.models.consignment import Consignment
from shipment_tracker.app.models.item import Item
from shipment_tracker.app.models.tracking_event import TrackingEvent

logger = logging.getLogger("shipment_tracker.schema")

# Parents before children
TABLE_LOAD_ORDER: Sequence[Table] = (
    Courier.__table__,
    Consignment.__table__,
    Item.__table__,
    TrackingEvent.__table__,
)


def check_load_order(tables: Iterable[Table]) -> None:
    """
    Verify that each table only references tables created before it.
    
    Raises:
        SchemaOrderError: naming the first table whose parent comes later
            in the sequence (or is missing from it).
    """
    created = set()
    for table in tables:
        for fk in table.foreign_keys:
            parent = fk.column.table.name
            if parent != table.name and parent not in created:
                raise SchemaOrderError(table=table.name, missing_parent=parent)
        created.add(table.name)


def _drop_tables(sync_conn, tables: Sequence[Table]) -> None:
    for table in reversed(tables):
        table.drop(sync_conn, checkfirst=True)
        logger.debug("Dropped table %s (if existed)", table.name)


def _create_tables(sync_conn, tables: Sequence[Table]) -> None:
    for table in tables:
        table.create(sync_conn)
        logger.debug("Created table %s", table.name)


async def drop_schema(engine: AsyncEngine, tables: Sequence[Table] = TABLE_LOAD_ORDER) -> None:
    """Drop the tables children-first, skipping any that do not exist."""
    async with engine.begin() as conn:
        await conn.run_sync(_drop_tables, tables)


async def create_schema(engine: AsyncEngine, tables: Sequence[Table] = TABLE_LOAD_ORDER) -> None:
    """Create the tables parents-first after checking the order."""
    check_load_order(tables)
    async with engine.begin() as conn:
        await conn.run_sync(_create_tables, tables)


async def load_schema(engine: AsyncEngine, drop_existing: bool = True) -> None:
    """
    Load the schema, optionally dropping pre-existing tables first.
    
    With drop_existing=False the tables must not exist yet; the engine
    rejects the CREATE otherwise.
    """
    if drop_existing:
        await drop_schema(engine)
    await create_schema(engine)
    logger.info(
        "Schema loaded",
        extra={"tables": [t.name for t in TABLE_LOAD_ORDER], "drop_existing": drop_existing},
    )
