from fastapi import HTTPException, Request, status
from pydantic import ValidationError

from app.modules.posts import messages
from app.modules.posts.schemas.post import PostWrite

async def get_post_write(request: Request) -> PostWrite:
    """
    Dependency for reading and validating a post body.
    Runs before the route body, so the repository is never reached on a bad body.
    """
    try:
        payload = await request.json()
    except (ValueError, RecursionError):
        # Malformed or too deeply nested to parse
        payload = None

    if not isinstance(payload, dict):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=messages.POST_FIELDS_REQUIRED,
        )

    try:
        return PostWrite(title=payload.get("title"), contents=payload.get("contents"))
    except ValidationError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=messages.POST_FIELDS_REQUIRED,
        )
