from datetime import datetime
from typing import Optional

from app.schemas.base import CamelModel, MessageResponse


class RFPCreate(CamelModel):
    title: Optional[str] = None
    description: Optional[str] = None


class RFPResponse(CamelModel):
    id: int
    title: Optional[str] = None
    description: Optional[str] = None
    created_at: Optional[datetime] = None


class RFPIdResponse(MessageResponse):
    rfp_id: int
