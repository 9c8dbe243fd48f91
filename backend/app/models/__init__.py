from app.models.user import User
from app.models.supplier import Supplier
from app.models.rfp import RFP
from app.models.bid import Bid, BidStatus

__all__ = ["User", "Supplier", "RFP", "Bid", "BidStatus"]
