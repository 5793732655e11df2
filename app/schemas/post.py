from pydantic import BaseModel
from datetime import datetime
from typing import List, Optional
from app.schemas.user import UserOut
from app.schemas.comment import CommentOut
from app.schemas.like import LikeOut
from app.schemas.content import ContentOut

class PostBase(BaseModel):
    body: Optional[str] = None
    content_id: Optional[int] = None

class PostCreate(PostBase):
    pass

class PostUpdate(PostBase):
    pass

class PostOut(PostBase):
    id: int
    user_id: int
    created_at: Optional[datetime] = None
    user: UserOut
    comments: List[CommentOut] = []
    likes: List[LikeOut] = []
    content: Optional[ContentOut] = None

    class Config:
        from_attributes = True

class PostListResult(BaseModel):
    data: List[PostOut]

class PostListResponse(BaseModel):
    status: int = 200
    result: PostListResult
