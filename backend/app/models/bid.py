from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, Float
from sqlalchemy.sql import func

from app.models.base import Base


class BidStatus:
    PENDING = "pending"
    EVALUATED = "evaluated"


class Bid(Base):
    __tablename__ = "bids"

    id = Column(Integer, primary_key=True, index=True)
    rfp_id = Column(Integer, ForeignKey("rfps.id"), index=True)
    supplier_id = Column(Integer, ForeignKey("suppliers.id"), index=True)
    amount = Column(Float)
    documents = Column(Text)  # opaque reference, never parsed
    status = Column(String(50), default=BidStatus.PENDING, server_default=BidStatus.PENDING)
    created_at = Column(DateTime, server_default=func.now())
