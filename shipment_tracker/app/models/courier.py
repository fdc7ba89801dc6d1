"""
Courier database model.

Master data for the couriers who handle consignments.
"""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from shipment_tracker.app.db.session import Base


class Courier(Base):
    """
    Courier model.
    
    Leaf table: referenced by Consignment, references nothing.
    CourierID is supplied by the caller and never changes.
    """
    __tablename__ = "Courier"
    
    courier_id = Column("CourierID", Integer, primary_key=True, autoincrement=False)
    courier_name = Column("CourierName", String(100), nullable=False)
    
    consignments = relationship("Consignment", back_populates="courier")
    
    def __repr__(self):
        return f"<Courier(id={self.courier_id}, name='{self.courier_name}')>"
