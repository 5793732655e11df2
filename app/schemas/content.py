from pydantic import BaseModel, Field
from datetime import datetime
from typing import List, Optional

class ContentCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None

class ContentUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None

class ContentOut(BaseModel):
    id: int
    user_id: int
    title: str
    description: Optional[str] = None
    image: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True

class ContentPage(BaseModel):
    data: List[ContentOut]
    current_page: int
    last_page: int
    per_page: int
    total: int
