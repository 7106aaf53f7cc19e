from typing import List, Optional
import uuid
from sqlalchemy.orm import Session
import logging

from app.modules.posts.models.post import Post
from app.modules.posts.schemas.post import PostWrite
from app.modules.posts.comments.models.comment import Comment

def get_post(db: Session, post_id: str) -> Optional[Post]:
    """Get post by ID"""
    logging.info(f"Getting post with ID: {post_id}")
    return db.query(Post).filter(Post.id == post_id).first()

def get_posts(db: Session) -> List[Post]:
    """Get list of posts"""
    logging.info("Getting all posts")
    return db.query(Post).order_by(Post.created_at.asc(), Post.id.asc()).all()

def create_post(db: Session, post_in: PostWrite) -> Post:
    """Create new post"""
    post = Post(
        id=str(uuid.uuid4()),
        title=post_in.title,
        contents=post_in.contents,
    )
    logging.info(f"Creating post with ID: {post.id}")
    db.add(post)
    db.commit()
    db.refresh(post)
    return post

def update_post(db: Session, post_id: str, post_in: PostWrite) -> Optional[Post]:
    """Replace title and contents of a post, or return None if it does not exist"""
    logging.info(f"Updating post with ID: {post_id}")
    db_post = get_post(db, post_id)
    if not db_post:
        return None

    db_post.title = post_in.title
    db_post.contents = post_in.contents

    db.commit()
    db.refresh(db_post)

    return db_post

def delete_post(db: Session, post_id: str) -> Optional[Post]:
    """
    Delete post and all associated comments.
    Returns the removed post, or None if it does not exist.
    """
    logging.info(f"Deleting post with ID: {post_id}")
    post = get_post(db, post_id)
    if not post:
        return None

    # Delete associated comments first to maintain referential integrity
    db.query(Comment).filter(Comment.post_id == post.id).delete()

    db.delete(post)
    db.commit()
    return post
