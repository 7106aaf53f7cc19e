# Import all models here so Alembic can detect them
from app.db.session import Base

from app.modules.posts.models.post import Post
from app.modules.posts.comments.models.comment import Comment
