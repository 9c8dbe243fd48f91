from datetime import datetime
from typing import Optional

from app.schemas.base import CamelModel, MessageResponse


class BidCreate(CamelModel):
    rfp_id: Optional[int] = None
    supplier_id: Optional[int] = None
    amount: Optional[float] = None
    documents: Optional[str] = None


class BidEvaluate(CamelModel):
    rfp_id: Optional[int] = None


class BidResponse(CamelModel):
    id: int
    rfp_id: Optional[int] = None
    supplier_id: Optional[int] = None
    amount: Optional[float] = None
    documents: Optional[str] = None
    status: Optional[str] = None
    created_at: Optional[datetime] = None


class BidIdResponse(MessageResponse):
    bid_id: int


class BidEvaluationResponse(MessageResponse):
    evaluated_bids_count: int


class WinningBidResponse(CamelModel):
    winning_bid: BidResponse
