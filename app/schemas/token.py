from pydantic import BaseModel,EmailStr
from typing import Optional
from app.schemas.user import UserOut


class AuthResponse(BaseModel):
    user: UserOut
    token: str


class TokenData(BaseModel):
    email: Optional[EmailStr] = None
    jti: Optional[str] = None
