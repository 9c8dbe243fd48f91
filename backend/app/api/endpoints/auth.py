import logging

from fastapi import APIRouter, Depends, HTTPException

from app.database import Store, get_store
from app.schemas.auth import RegisterRequest, LoginRequest, UserIdResponse
from app.services.password_service import hash_password, verify_password

router = APIRouter(prefix="/api/auth", tags=["auth"])
logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"


@router.post("/register", response_model=UserIdResponse, status_code=201)
def register(payload: RegisterRequest, store: Store = Depends(get_store)):
    hashed = hash_password(payload.password)
    user_id = store.execute(
        "INSERT INTO users (name, email, password) VALUES (:name, :email, :password) RETURNING id",
        {"name": payload.name, "email": payload.email, "password": hashed},
    )
    store.commit()
    return UserIdResponse(message="User registered successfully", user_id=user_id)


@router.post("/login", response_model=UserIdResponse)
def login(payload: LoginRequest, store: Store = Depends(get_store)):
    """Credential check only; no session or token is issued. Unknown email and wrong password look the same."""
    user = store.fetch_one("SELECT * FROM users WHERE email = :email", {"email": payload.email})
    if not user or not verify_password(payload.password, user["password"]):
        logger.info("login: rejected credentials for email=%s", payload.email)
        raise HTTPException(status_code=401, detail=INVALID_CREDENTIALS)
    return UserIdResponse(message="Login successful", user_id=user["id"])
