from typing import List
import uuid
from sqlalchemy.orm import Session

from app.modules.posts.comments.models.comment import Comment
from app.modules.posts.comments.schemas.comment import CommentCreate

def get_comments_by_post(db: Session, post_id: str) -> List[Comment]:
    """Get comments by post ID, oldest first"""
    return (
        db.query(Comment)
        .filter(Comment.post_id == post_id)
        .order_by(Comment.created_at.asc(), Comment.id.asc())
        .all()
    )

def create_comment(db: Session, comment_in: CommentCreate) -> Comment:
    """Create new comment"""
    comment = Comment(
        id=str(uuid.uuid4()),
        **comment_in.model_dump(),
    )
    db.add(comment)
    db.commit()
    db.refresh(comment)
    return comment
