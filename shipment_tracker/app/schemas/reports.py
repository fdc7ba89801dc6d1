"""
Report Schemas.

Row shapes of the verification reports.
"""

from pydantic import BaseModel
from datetime import date
from decimal import Decimal

from shipment_tracker.app.models.consignment_enums import BookingMode, TrackingStatus


class TableRowCount(BaseModel):
    """One line of the row count summary."""
    table_name: str
    row_count: int


class ShipmentListing(BaseModel):
    """Consignment joined with its courier."""
    consignment_no: int
    sender_city: str
    receiver_city: str
    booking_mode: BookingMode
    date_of_booking: date
    charge_amount: Decimal
    courier_name: str

    class Config:
        from_attributes = True


class ConsignmentItem(BaseModel):
    """Item packed in a consignment."""
    consignment_no: int
    item_name: str
    shipment_type: str

    class Config:
        from_attributes = True


class TrackingHistoryEntry(BaseModel):
    """Tracking event of a consignment, in TrackingID order."""
    consignment_no: int
    sender_city: str
    receiver_city: str
    tracking_status: TrackingStatus

    class Config:
        from_attributes = True
