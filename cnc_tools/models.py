from sqlalchemy import Column, Integer, String, DateTime, Text, JSON, Float
from datetime import datetime
from .database import Base


class SavedCalculation(Base):
    """A finished BOM kept for later retrieval. Deleting only sets deleted_at."""
    __tablename__ = "saved_calculations"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    notes = Column(Text, nullable=True)
    request_json = Column(JSON, nullable=False)  # BOMRequest snapshot
    result_json = Column(JSON, nullable=False)  # BillOfMaterialsResult snapshot
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
    deleted_at = Column(DateTime, nullable=True)

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None


class ShippingItem(Base):
    """A product kept on hand for the box shipping calculator."""
    __tablename__ = "shipping_items"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    sku = Column(String, default="")
    length = Column(Float, nullable=False)  # mm
    width = Column(Float, nullable=False)
    height = Column(Float, nullable=False)
    weight = Column(Float, nullable=False)  # grams
    quantity = Column(Integer, default=1)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
    deleted_at = Column(DateTime, nullable=True)
