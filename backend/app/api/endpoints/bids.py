import logging

from fastapi import APIRouter, Depends, HTTPException

from app.database import Store, get_store
from app.models.bid import BidStatus
from app.schemas.bid import (
    BidCreate,
    BidEvaluate,
    BidIdResponse,
    BidEvaluationResponse,
    WinningBidResponse,
)

router = APIRouter(prefix="/api/bids", tags=["bids"])
logger = logging.getLogger(__name__)

BID_COLUMNS = "id, rfp_id, supplier_id, amount, documents, status, created_at"


@router.post("", response_model=BidIdResponse, status_code=201)
def submit_bid(payload: BidCreate, store: Store = Depends(get_store)):
    """Insert a pending bid. RFP and supplier ids are not looked up first; the store's foreign keys decide."""
    bid_id = store.execute(
        "INSERT INTO bids (rfp_id, supplier_id, amount, documents, status) "
        "VALUES (:rfp_id, :supplier_id, :amount, :documents, :status) RETURNING id",
        {
            "rfp_id": payload.rfp_id,
            "supplier_id": payload.supplier_id,
            "amount": payload.amount,
            "documents": payload.documents,
            "status": BidStatus.PENDING,
        },
    )
    store.commit()
    return BidIdResponse(message="Bid submitted successfully", bid_id=bid_id)


@router.post("/evaluate", response_model=BidEvaluationResponse)
def evaluate_bids(payload: BidEvaluate, store: Store = Depends(get_store)):
    """
    Mark every bid of an RFP as evaluated, whatever its amount or prior status.
    Does not rank bids; see get_winning_bid for that. Re-running reports the same count.
    """
    bids = store.fetch_all("SELECT id FROM bids WHERE rfp_id = :rfp_id", {"rfp_id": payload.rfp_id})
    store.execute(
        "UPDATE bids SET status = :status WHERE rfp_id = :rfp_id",
        {"status": BidStatus.EVALUATED, "rfp_id": payload.rfp_id},
    )
    store.commit()
    logger.info("evaluate: rfp_id=%s, %s bids evaluated", payload.rfp_id, len(bids))
    return BidEvaluationResponse(message="Bids evaluated successfully", evaluated_bids_count=len(bids))


@router.get("/winning/{rfp_id}", response_model=WinningBidResponse)
def get_winning_bid(rfp_id: int, store: Store = Depends(get_store)):
    """Lowest amount wins, earliest submission on ties. Status is not checked."""
    bid = store.fetch_one(
        f"SELECT {BID_COLUMNS} FROM bids WHERE rfp_id = :rfp_id ORDER BY amount ASC, id ASC LIMIT 1",
        {"rfp_id": rfp_id},
    )
    if not bid:
        raise HTTPException(status_code=404, detail="No bids found for this RFP")
    return WinningBidResponse(winning_bid=bid)
