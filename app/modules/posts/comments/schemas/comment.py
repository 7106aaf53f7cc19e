from typing import Optional
from datetime import datetime
from pydantic import BaseModel, ConfigDict

class CommentBase(BaseModel):
    text: str

class CommentCreate(CommentBase):
    post_id: str

class CommentInDBBase(CommentBase):
    id: str
    post_id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)

class Comment(CommentInDBBase):
    """Comment model returned to client"""
    pass
