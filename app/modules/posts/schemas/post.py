from typing import Any, Optional
from datetime import datetime
from pydantic import BaseModel, ConfigDict, field_validator

class PostBase(BaseModel):
    title: str
    contents: str

class PostWrite(PostBase):
    """
    Body accepted by create and full update.
    Only title and contents are kept; anything else in the body is ignored.
    """
    model_config = ConfigDict(extra="ignore")

    @field_validator("title", "contents", mode="before")
    @classmethod
    def require_text(cls, v: Any) -> str:
        # Numbers, booleans and null are rejected rather than coerced
        if not isinstance(v, str) or not v.strip():
            raise ValueError("must be a non-empty string")
        try:
            v.encode("utf-8")
        except UnicodeEncodeError:
            # Lone surrogates from JSON \u escapes cannot be stored
            raise ValueError("must be valid UTF-8 text")
        return v

class PostInDBBase(PostBase):
    id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)

class Post(PostInDBBase):
    """Post model returned to client"""
    pass
