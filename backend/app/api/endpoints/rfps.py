from fastapi import APIRouter, Depends

from app.database import Store, get_store
from app.schemas.rfp import RFPCreate, RFPResponse, RFPIdResponse

router = APIRouter(prefix="/api/rfps", tags=["rfps"])


@router.post("", response_model=RFPIdResponse, status_code=201)
def create_rfp(payload: RFPCreate, store: Store = Depends(get_store)):
    rfp_id = store.execute(
        "INSERT INTO rfps (title, description) VALUES (:title, :description) RETURNING id",
        {"title": payload.title, "description": payload.description},
    )
    store.commit()
    return RFPIdResponse(message="RFP created successfully", rfp_id=rfp_id)


@router.get("", response_model=list[RFPResponse])
def list_rfps(store: Store = Depends(get_store)):
    """Every RFP in insertion order. No filtering or pagination."""
    return store.fetch_all("SELECT id, title, description, created_at FROM rfps ORDER BY id")
