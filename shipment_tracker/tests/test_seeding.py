"""
Seed data and referential integrity tests.

Covers the fixture counts, foreign key resolution and the constraint
failures the engine reports.
"""

import pytest
from datetime import date
from decimal import Decimal
from sqlalchemy import select, func, text
from sqlalchemy.exc import OperationalError

from shipment_tracker.app.core.exceptions import ConstraintViolationError
from shipment_tracker.app.db.schema_loader import create_schema
from shipment_tracker.app.db.seed_data import SEED_ROWS, COURIERS, CONSIGNMENTS
from shipment_tracker.app.models.courier import Courier
from shipment_tracker.app.models.consignment import Consignment
from shipment_tracker.app.models.consignment_enums import BookingMode
from shipment_tracker.app.models.item import Item
from shipment_tracker.app.models.tracking_event import TrackingEvent
from shipment_tracker.app.services.seeding import insert_rows, seed_database, find_orphans


def test_fixture_sizes():
    sizes = {model.__tablename__: len(rows) for model, rows in SEED_ROWS}
    assert sizes == {"Courier": 5, "Consignment": 10, "Item": 15, "TrackingEvents": 22}
    assert sum(sizes.values()) < 100


def test_fixture_keys_are_unique():
    for model, rows in SEED_ROWS:
        mapper = model.__mapper__
        key = mapper.get_property_by_column(mapper.primary_key[0]).key
        keys = [row[key] for row in rows]
        assert len(keys) == len(set(keys)), model.__tablename__


@pytest.mark.asyncio
async def test_seed_returns_counts(db_session):
    counts = await seed_database(db_session)
    
    assert counts == {"Courier": 5, "Consignment": 10, "Item": 15, "TrackingEvents": 22}


@pytest.mark.asyncio
async def test_seeded_counts_in_database(seeded_session):
    for model, expected in [(Courier, 5), (Consignment, 10), (Item, 15), (TrackingEvent, 22)]:
        count = await seeded_session.scalar(select(func.count()).select_from(model))
        assert count == expected


@pytest.mark.asyncio
async def test_no_orphans_after_seed(seeded_session):
    orphans = await find_orphans(seeded_session)
    
    assert orphans == {"Consignment": [], "Item": [], "TrackingEvents": []}


@pytest.mark.asyncio
async def test_orphans_are_reported_per_table(seeded_session):
    """Rows written with enforcement off show up under their own table."""
    await seeded_session.execute(text("PRAGMA foreign_keys=OFF"))
    await insert_rows(seeded_session, Consignment, [dict(CONSIGNMENTS[0], consignment_no=3001, courier_id=77)])
    await insert_rows(seeded_session, Item, [{"item_id": 99, "consignment_no": 5555, "item_name": "Stray"}])
    await insert_rows(seeded_session, TrackingEvent, [
        {"tracking_id": 98, "consignment_no": 5555, "tracking_status": "Picked Up"},
        {"tracking_id": 99, "consignment_no": 6666, "tracking_status": "In Transit"},
    ])
    
    orphans = await find_orphans(seeded_session)
    await seeded_session.rollback()
    
    assert orphans == {"Consignment": [3001], "Item": [99], "TrackingEvents": [98, 99]}


@pytest.mark.asyncio
async def test_every_child_references_existing_parent(seeded_session):
    """Items and tracking events point at consignments; consignments at couriers."""
    courier_ids = set((await seeded_session.scalars(select(Courier.courier_id))).all())
    consignment_nos = set((await seeded_session.scalars(select(Consignment.consignment_no))).all())
    
    consignment_couriers = (await seeded_session.scalars(select(Consignment.courier_id))).all()
    item_refs = (await seeded_session.scalars(select(Item.consignment_no))).all()
    event_refs = (await seeded_session.scalars(select(TrackingEvent.consignment_no))).all()
    
    assert set(consignment_couriers) <= courier_ids
    assert set(item_refs) <= consignment_nos
    assert set(event_refs) <= consignment_nos


@pytest.mark.asyncio
async def test_stored_values_round_trip(seeded_session):
    consignment = await seeded_session.get(Consignment, 1001)
    
    assert consignment.sender_city == "Mumbai"
    assert consignment.receiver_city == "Chennai"
    assert consignment.booking_mode == BookingMode.AIR
    assert consignment.date_of_booking == date(2017, 5, 20)
    assert consignment.charge_amount == Decimal("250.00")
    assert consignment.charge_weight == Decimal("2.0")
    assert consignment.shipment_type == "Documents"
    assert consignment.courier_id == 1


@pytest.mark.asyncio
async def test_dangling_courier_is_rejected(db_session):
    await insert_rows(db_session, Courier, COURIERS)
    bad = dict(CONSIGNMENTS[0], consignment_no=2001, courier_id=99)
    
    with pytest.raises(ConstraintViolationError) as exc_info:
        await insert_rows(db_session, Consignment, [bad])
    await db_session.rollback()
    
    assert exc_info.value.kind == "FOREIGN_KEY"
    assert exc_info.value.table == "Consignment"
    assert exc_info.value.error_code == "ERR_CONSTRAINT_FK"


@pytest.mark.asyncio
async def test_item_for_unknown_consignment_is_rejected(seeded_session):
    with pytest.raises(ConstraintViolationError) as exc_info:
        await insert_rows(seeded_session, Item, [
            {"item_id": 100, "consignment_no": 9999, "item_name": "Ghost"}
        ])
    await seeded_session.rollback()
    
    assert exc_info.value.kind == "FOREIGN_KEY"


@pytest.mark.asyncio
async def test_duplicate_key_is_rejected(seeded_session):
    with pytest.raises(ConstraintViolationError) as exc_info:
        await insert_rows(seeded_session, Courier, [{"courier_id": 1, "courier_name": "Other Ravi"}])
    await seeded_session.rollback()
    
    assert exc_info.value.kind == "UNIQUE"
    assert exc_info.value.status_code == 409


@pytest.mark.asyncio
async def test_missing_required_value_is_rejected(db_session):
    with pytest.raises(ConstraintViolationError) as exc_info:
        await insert_rows(db_session, Courier, [{"courier_id": 7, "courier_name": None}])
    await db_session.rollback()
    
    assert exc_info.value.kind == "NOT_NULL"
    assert exc_info.value.details["table"] == "Courier"


@pytest.mark.asyncio
async def test_failed_seed_rolls_back_everything(db_session):
    """A bad row halts the load and leaves no partial data behind."""
    broken = (
        (Courier, COURIERS),
        (Item, [{"item_id": 1, "consignment_no": 1001, "item_name": "Passport"}]),
    )
    
    with pytest.raises(ConstraintViolationError):
        await seed_database(db_session, broken)
    
    count = await db_session.scalar(select(func.count()).select_from(Courier))
    assert count == 0


@pytest.mark.asyncio
async def test_insert_rows_with_no_rows(db_session):
    assert await insert_rows(db_session, Item, []) == 0


@pytest.mark.asyncio
async def test_engine_error_rolls_back_and_logs(engine, session_factory, caplog):
    """A missing table halts the seed the same way a constraint failure does."""
    await create_schema(engine, tables=[Courier.__table__, Consignment.__table__])
    
    async with session_factory() as db:
        with pytest.raises(OperationalError):
            await seed_database(db)
        
        count = await db.scalar(select(func.count()).select_from(Courier))
    
    assert count == 0
    assert "Seeding halted" in caplog.text
