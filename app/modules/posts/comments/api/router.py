from typing import Any, List
import logging

from fastapi import APIRouter, HTTPException, Path, status

from app.modules.posts import messages
from app.modules.posts.comments.schemas.comment import Comment as CommentSchema
from app.modules.posts.services.repository import PostRepository

logger = logging.getLogger("app")

def create_comments_router(repository: PostRepository) -> APIRouter:
    """Build the read-only /posts/{post_id}/comments router"""
    router = APIRouter()

    @router.get("", response_model=List[CommentSchema])
    async def read_comments_by_post_id(
        post_id: str = Path(..., description="The ID of the post to get comments for"),
    ) -> Any:
        """Get comments by post ID. A post without comments yields an empty list."""
        try:
            comments = await repository.find_comments(post_id)
        except Exception as e:
            logger.error(f"Error retrieving comments for post {post_id}: {str(e)}")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=messages.COMMENTS_RETRIEVE_FAILED,
            )

        if comments is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=messages.POST_NOT_FOUND,
            )
        return comments

    return router
