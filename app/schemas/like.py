from pydantic import BaseModel
from datetime import datetime
from typing import Optional

class LikeOut(BaseModel):
    id: int
    post_id: int
    user_id: int
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True

class LikeResponse(BaseModel):
    like: LikeOut
