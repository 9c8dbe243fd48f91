from typing import Optional

from app.schemas.base import CamelModel, MessageResponse


class SupplierOnboard(CamelModel):
    name: Optional[str] = None
    registration_number: Optional[str] = None
    address: Optional[str] = None


class SupplierIdResponse(MessageResponse):
    supplier_id: int
