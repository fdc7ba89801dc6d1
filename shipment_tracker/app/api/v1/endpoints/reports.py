"""
Report API Endpoints.

Read-only views of the verification reports.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from shipment_tracker.app.db.session import get_db
from shipment_tracker.app.services.reports import ReportService
from shipment_tracker.app.schemas.reports import TableRowCount, ShipmentListing

router = APIRouter(prefix="/reports", tags=["Reports"])


@router.get("/row-counts", response_model=List[TableRowCount])
async def get_row_counts(db: AsyncSession = Depends(get_db)):
    """Row count of every table."""
    return await ReportService.row_count_summary(db)


@router.get("/shipments", response_model=List[ShipmentListing])
async def get_shipments(db: AsyncSession = Depends(get_db)):
    """All consignments with their courier, by consignment number."""
    return await ReportService.shipment_listing(db)
