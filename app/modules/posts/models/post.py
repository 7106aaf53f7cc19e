from sqlalchemy import Column, String, DateTime, Text
from sqlalchemy.sql import func

from app.db.session import Base

class Post(Base):
    __tablename__ = "posts"

    id = Column(String, primary_key=True, index=True)
    title = Column(Text, nullable=False)
    contents = Column(Text, nullable=False)
    created_at = Column(DateTime, default=func.now())
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now())

    # Comments reference posts by post_id; the relationship lives in the comments module
