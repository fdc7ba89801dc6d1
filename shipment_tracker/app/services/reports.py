"""
Report Service.

The fixed verification reports over the loaded data.
Focused on READ-ONLY operations.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func, literal, union_all
from typing import List

from shipment_tracker.app.core.config import settings
from shipment_tracker.app.core.exceptions import ResourceNotFoundError
from shipment_tracker.app.db.schema_loader import TABLE_LOAD_ORDER
from shipment_tracker.app.models.courier import Courier
from shipment_tracker.app.models.consignment import Consignment
from shipment_tracker.app.models.item import Item
from shipment_tracker.app.models.tracking_event import TrackingEvent
from shipment_tracker.app.schemas.consignment import ConsignmentDetail
from shipment_tracker.app.schemas.reports import (
    TableRowCount, ShipmentListing, ConsignmentItem, TrackingHistoryEntry
)

class ReportService:

    @staticmethod
    async def row_count_summary(db: AsyncSession) -> List[TableRowCount]:
        """Row count of every table, one UNION ALL branch per table, in load order."""
        stmt = union_all(*[
            select(
                literal(table.name).label("table_name"),
                func.count().label("row_count"),
            ).select_from(table)
            for table in TABLE_LOAD_ORDER
        ])
        results = await db.execute(stmt)
        return [TableRowCount(table_name=row.table_name, row_count=row.row_count) for row in results]

    @staticmethod
    async def shipment_listing(db: AsyncSession) -> List[ShipmentListing]:
        """Every consignment with the name of its courier."""
        stmt = select(
            Consignment.consignment_no,
            Consignment.sender_city,
            Consignment.receiver_city,
            Consignment.booking_mode,
            Consignment.date_of_booking,
            Consignment.charge_amount,
            Courier.courier_name,
        ).join(Courier, Consignment.courier_id == Courier.courier_id)\
         .order_by(Consignment.consignment_no)
        
        results = await db.execute(stmt)
        return [ShipmentListing.model_validate(row) for row in results]

    @staticmethod
    async def consignment_items(
        db: AsyncSession, consignment_no: int = None
    ) -> List[ConsignmentItem]:
        """Items packed in one consignment."""
        if consignment_no is None:
            consignment_no = settings.sample_consignment_no
        stmt = select(
            Consignment.consignment_no,
            Item.item_name,
            Consignment.shipment_type,
        ).join(Item, Consignment.consignment_no == Item.consignment_no)\
         .where(Consignment.consignment_no == consignment_no)\
         .order_by(Item.item_id)
        
        results = await db.execute(stmt)
        return [ConsignmentItem.model_validate(row) for row in results]

    @staticmethod
    async def tracking_history(
        db: AsyncSession, consignment_no: int = None
    ) -> List[TrackingHistoryEntry]:
        """Tracking events of one consignment, oldest first (TrackingID order)."""
        if consignment_no is None:
            consignment_no = settings.sample_consignment_no
        stmt = select(
            Consignment.consignment_no,
            Consignment.sender_city,
            Consignment.receiver_city,
            TrackingEvent.tracking_status,
        ).join(TrackingEvent, Consignment.consignment_no == TrackingEvent.consignment_no)\
         .where(Consignment.consignment_no == consignment_no)\
         .order_by(TrackingEvent.tracking_id)
        
        results = await db.execute(stmt)
        return [TrackingHistoryEntry.model_validate(row) for row in results]

    @staticmethod
    async def get_consignment(db: AsyncSession, consignment_no: int) -> ConsignmentDetail:
        """
        Single consignment with its courier's name.
        
        Raises:
            ResourceNotFoundError: no consignment has this number.
        """
        stmt = select(
            Consignment.consignment_no,
            Consignment.sender_city,
            Consignment.receiver_city,
            Consignment.booking_mode,
            Consignment.date_of_booking,
            Consignment.charge_amount,
            Consignment.charge_weight,
            Consignment.shipment_type,
            Consignment.courier_id,
            Courier.courier_name,
        ).join(Courier, Consignment.courier_id == Courier.courier_id)\
         .where(Consignment.consignment_no == consignment_no)
        
        row = (await db.execute(stmt)).one_or_none()
        if row is None:
            raise ResourceNotFoundError("Consignment", consignment_no)
        return ConsignmentDetail.model_validate(row)

    @staticmethod
    async def ensure_consignment_exists(db: AsyncSession, consignment_no: int) -> None:
        """Raise ResourceNotFoundError unless the consignment exists."""
        found = await db.scalar(
            select(Consignment.consignment_no).where(Consignment.consignment_no == consignment_no)
        )
        if found is None:
            raise ResourceNotFoundError("Consignment", consignment_no)
