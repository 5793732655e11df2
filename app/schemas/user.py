from pydantic import BaseModel, EmailStr, Field
from typing import Optional

class UserBase(BaseModel):
    firstname: str = Field(..., min_length=1, max_length=255)
    lastname: str = Field(..., min_length=1, max_length=255)
    email: EmailStr

class UserCreate(UserBase):
    password: str = Field(..., min_length=6)
    password_confirmation: Optional[str] = None

class UserUpdate(BaseModel):
    firstname: Optional[str] = Field(None, min_length=1, max_length=255)
    lastname: Optional[str] = Field(None, min_length=1, max_length=255)
    email: Optional[EmailStr] = None
    password: Optional[str] = Field(None, min_length=6)

class UserLogin(BaseModel):
    email: EmailStr
    password: str


class UserOut(BaseModel):
    id: int
    firstname: str
    lastname: str
    email: EmailStr

    class Config:
        from_attributes = True
