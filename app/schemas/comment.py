from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional
from app.schemas.user import UserOut

class CommentCreate(BaseModel):
    user_id: int
    text: str = Field(..., min_length=1, max_length=255)

    class Config:
        str_strip_whitespace = True

class CommentOut(BaseModel):
    id: int
    post_id: int
    user_id: int
    text: str
    created_at: Optional[datetime] = None
    user: UserOut

    class Config:
        from_attributes = True

class CommentResponse(BaseModel):
    comment: CommentOut
