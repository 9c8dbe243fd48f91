from fastapi import APIRouter, Depends

from app.database import Store, get_store
from app.schemas.supplier import SupplierOnboard, SupplierIdResponse

router = APIRouter(prefix="/api/suppliers", tags=["suppliers"])


@router.post("/onboard", response_model=SupplierIdResponse, status_code=201)
def onboard_supplier(payload: SupplierOnboard, store: Store = Depends(get_store)):
    supplier_id = store.execute(
        "INSERT INTO suppliers (name, registration_number, address) "
        "VALUES (:name, :registration_number, :address) RETURNING id",
        {
            "name": payload.name,
            "registration_number": payload.registration_number,
            "address": payload.address,
        },
    )
    store.commit()
    return SupplierIdResponse(message="Supplier onboarded successfully", supplier_id=supplier_id)
