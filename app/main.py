from typing import Optional
import logging

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import settings
from app.core.errors import http_exception_handler, request_validation_exception_handler
from app.db.init_db import create_all_tables
from app.middleware.request_logging import RequestLoggingMiddleware
from app.modules.posts.api.router import create_posts_router
from app.modules.posts.comments.api.router import create_comments_router
from app.modules.posts.services.repository import PostRepository, SQLAlchemyPostRepository

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger("app")


def create_app(repository: Optional[PostRepository] = None) -> FastAPI:
    """
    Build the application around a post repository.
    Without one, the SQLAlchemy repository on the configured database is used
    and its tables are created on startup.
    """
    app = FastAPI(
        title=settings.PROJECT_NAME,
        openapi_url=f"{settings.API_PREFIX}/openapi.json",
        exception_handlers={
            RequestValidationError: request_validation_exception_handler,
            StarletteHTTPException: http_exception_handler,
        },
        debug=settings.DEBUG,
        description="CRUD API for posts and their comments",
        version=settings.VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    if repository is None:
        repository = SQLAlchemyPostRepository()

        @app.on_event("startup")
        async def startup_event():
            logger.info(f"Starting server in {settings.ENVIRONMENT} mode")
            create_all_tables()

    # Add middleware
    app.add_middleware(RequestLoggingMiddleware)

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register API routers
    app.include_router(
        create_posts_router(repository),
        prefix=f"{settings.API_PREFIX}/posts",
        tags=["posts"],
    )
    app.include_router(
        create_comments_router(repository),
        prefix=f"{settings.API_PREFIX}/posts/{{post_id}}/comments",
        tags=["comments"],
    )

    @app.get("/")
    async def root():
        return {
            "message": f"Welcome to {settings.PROJECT_NAME}",
            "version": settings.VERSION,
            "environment": settings.ENVIRONMENT,
            "documentation": "/docs" if settings.DEBUG else None,
        }

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host="0.0.0.0", port=8000, reload=True)
