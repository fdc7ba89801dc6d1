"""
Consignment database model.

Main transaction table: one row per shipment booking.
"""

from sqlalchemy import Column, Integer, String, Date, Numeric, Enum, ForeignKey
from sqlalchemy.orm import relationship
from shipment_tracker.app.db.session import Base
from shipment_tracker.app.models.consignment_enums import BookingMode, stored_values


class Consignment(Base):
    """
    Consignment model.
    
    Every column is required. The courier is referenced, not owned.
    Items and tracking events hang off ConsignmentNo.
    """
    __tablename__ = "Consignment"
    
    consignment_no = Column("ConsignmentNo", Integer, primary_key=True, autoincrement=False)
    
    # Route
    sender_city = Column("SenderCity", String(100), nullable=False)
    receiver_city = Column("ReceiverCity", String(100), nullable=False)
    
    # Booking
    booking_mode = Column(
        "BookingMode",
        Enum(BookingMode, native_enum=False, length=50, values_callable=stored_values),
        nullable=False,
    )
    date_of_booking = Column("DateOfBooking", Date, nullable=False)
    charge_amount = Column("ChargeAmount", Numeric(10, 2), nullable=False)
    charge_weight = Column("ChargeWeight", Numeric(5, 2), nullable=False)
    shipment_type = Column("ShipmentType", String(50), nullable=False)
    
    # Ownership - handled by one courier
    courier_id = Column("CourierID", Integer, ForeignKey("Courier.CourierID"), nullable=False)
    
    courier = relationship("Courier", back_populates="consignments")
    items = relationship("Item", back_populates="consignment", order_by="Item.item_id")
    tracking_events = relationship(
        "TrackingEvent", back_populates="consignment", order_by="TrackingEvent.tracking_id"
    )
    
    def __repr__(self):
        return (
            f"<Consignment(no={self.consignment_no}, {self.sender_city}->{self.receiver_city}, "
            f"courier_id={self.courier_id})>"
        )
