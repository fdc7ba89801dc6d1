"""
Consignment API Endpoints.

Lookup of a single consignment, its items and its tracking history.
Unknown consignment numbers answer 404.
"""

from fastapi import APIRouter, Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from shipment_tracker.app.db.session import get_db
from shipment_tracker.app.services.reports import ReportService
from shipment_tracker.app.schemas.consignment import ConsignmentDetail
from shipment_tracker.app.schemas.reports import ConsignmentItem, TrackingHistoryEntry

router = APIRouter(prefix="/consignments", tags=["Consignments"])

# ConsignmentNo is a 32-bit INTEGER column
MAX_CONSIGNMENT_NO = 2**31 - 1


@router.get("/{consignment_no}", response_model=ConsignmentDetail)
async def get_consignment(
    consignment_no: int = Path(..., ge=1, le=MAX_CONSIGNMENT_NO, description="Consignment number"),
    db: AsyncSession = Depends(get_db)
):
    """Consignment record with courier name."""
    return await ReportService.get_consignment(db, consignment_no)


@router.get("/{consignment_no}/items", response_model=List[ConsignmentItem])
async def get_consignment_items(
    consignment_no: int = Path(..., ge=1, le=MAX_CONSIGNMENT_NO, description="Consignment number"),
    db: AsyncSession = Depends(get_db)
):
    """Items packed in the consignment."""
    await ReportService.ensure_consignment_exists(db, consignment_no)
    return await ReportService.consignment_items(db, consignment_no)


@router.get("/{consignment_no}/tracking", response_model=List[TrackingHistoryEntry])
async def get_tracking_history(
    consignment_no: int = Path(..., ge=1, le=MAX_CONSIGNMENT_NO, description="Consignment number"),
    db: AsyncSession = Depends(get_db)
):
    """Tracking history, oldest event first."""
    await ReportService.ensure_consignment_exists(db, consignment_no)
    return await ReportService.tracking_history(db, consignment_no)
