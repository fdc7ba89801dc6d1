"""
Item database model.

Items packed inside a consignment.
"""

from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from shipment_tracker.app.db.session import Base


class Item(Base):
    __tablename__ = "Item"
    
    item_id = Column("ItemID", Integer, primary_key=True, autoincrement=False)
    consignment_no = Column("ConsignmentNo", Integer, ForeignKey("Consignment.ConsignmentNo"), nullable=False)
    item_name = Column("ItemName", String(100), nullable=False)
    
    consignment = relationship("Consignment", back_populates="items")
    
    def __repr__(self):
        return f"<Item(id={self.item_id}, consignment_no={self.consignment_no}, name='{self.item_name}')>"
