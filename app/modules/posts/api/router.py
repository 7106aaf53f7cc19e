from typing import Any, List
import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status

from app.deps import get_post_write
from app.modules.posts import messages
from app.modules.posts.schemas.post import Post as PostSchema, PostWrite
from app.modules.posts.services.repository import PostRepository

logger = logging.getLogger(__name__)

def _post_not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=messages.POST_NOT_FOUND,
    )

def _storage_failure(message: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=message,
    )

def create_posts_router(repository: PostRepository) -> APIRouter:
    """
    Build the /posts router around the given repository.
    Each route makes at most one repository call.
    """
    router = APIRouter()

    @router.get("/", response_model=List[PostSchema])
    @router.get("", response_model=List[PostSchema], include_in_schema=False)
    async def read_posts() -> Any:
        """
        Retrieve all posts.
        """
        try:
            return await repository.find_all()
        except Exception as e:
            logger.error(f"Error retrieving posts: {str(e)}")
            raise _storage_failure(messages.POSTS_RETRIEVE_FAILED)

    @router.post("/", response_model=PostSchema, status_code=status.HTTP_201_CREATED)
    @router.post("", response_model=PostSchema, status_code=status.HTTP_201_CREATED, include_in_schema=False)
    async def create_new_post(post_in: PostWrite = Depends(get_post_write)) -> Any:
        """
        Create new post.
        """
        try:
            return await repository.insert(post_in)
        except Exception as e:
            logger.error(f"Error creating post: {str(e)}")
            raise _storage_failure(messages.POST_SAVE_FAILED)

    @router.get("/{post_id}", response_model=PostSchema)
    async def read_post_by_id(post_id: str) -> Any:
        """
        Get post by ID.
        """
        try:
            post = await repository.find_by_id(post_id)
        except Exception as e:
            logger.error(f"Error retrieving post {post_id}: {str(e)}")
            raise _storage_failure(messages.POST_RETRIEVE_FAILED)
        if not post:
            raise _post_not_found()
        return post

    @router.put("/{post_id}", response_model=PostSchema)
    async def update_post_by_id(post_id: str, post_in: PostWrite = Depends(get_post_write)) -> Any:
        """
        Replace the title and contents of a post.
        The body is validated before the post is looked up.
        """
        try:
            post = await repository.update(post_id, post_in)
        except Exception as e:
            logger.error(f"Error updating post {post_id}: {str(e)}")
            raise _storage_failure(messages.POST_UPDATE_FAILED)
        if not post:
            raise _post_not_found()
        return post

    @router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
    async def delete_post_by_id(post_id: str) -> Response:
        """
        Delete a post together with its comments.
        """
        try:
            deleted = await repository.remove(post_id)
        except Exception as e:
            logger.error(f"Error deleting post {post_id}: {str(e)}")
            raise _storage_failure(messages.POST_REMOVE_FAILED)
        if not deleted:
            raise _post_not_found()
        logger.info(f"Deleted post {deleted.id}")
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router
