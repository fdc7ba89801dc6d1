"""
Tracking event database model.

Status updates recorded against a consignment. There is no timestamp column:
TrackingID order is the chronological order of the events.
"""

from sqlalchemy import Column, Integer, Enum, ForeignKey
from sqlalchemy.orm import relationship
from shipment_tracker.app.db.session import Base
from shipment_tracker.app.models.consignment_enums import TrackingStatus, stored_values


class TrackingEvent(Base):
    __tablename__ = "TrackingEvents"
    
    tracking_id = Column("TrackingID", Integer, primary_key=True, autoincrement=False)
    consignment_no = Column("ConsignmentNo", Integer, ForeignKey("Consignment.ConsignmentNo"), nullable=False)
    tracking_status = Column(
        "TrackingStatus",
        Enum(TrackingStatus, native_enum=False, length=50, values_callable=stored_values),
        nullable=False,
    )
    
    consignment = relationship("Consignment", back_populates="tracking_events")
    
    def __repr__(self):
        return (
            f"<TrackingEvent(id={self.tracking_id}, consignment_no={self.consignment_no}, "
            f"status='{self.tracking_status.value}')>"
        )
