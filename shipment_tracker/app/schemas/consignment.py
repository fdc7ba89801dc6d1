"""
Consignment detail schema.
"""

from pydantic import BaseModel
from datetime import date
from decimal import Decimal

from shipment_tracker.app.models.consignment_enums import BookingMode


class ConsignmentDetail(BaseModel):
    """Full consignment record with the courier's name."""
    consignment_no: int
    sender_city: str
    receiver_city: str
    booking_mode: BookingMode
    date_of_booking: date
    charge_amount: Decimal
    charge_weight: Decimal
    shipment_type: str
    courier_id: int
    courier_name: str

    class Config:
        from_attributes = True
