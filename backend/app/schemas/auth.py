from typing import Optional

from app.schemas.base import CamelModel, MessageResponse


class RegisterRequest(CamelModel):
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class LoginRequest(CamelModel):
    email: Optional[str] = None
    password: Optional[str] = None


class UserIdResponse(MessageResponse):
    user_id: int
