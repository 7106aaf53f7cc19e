import logging
from sqlalchemy import inspect
from sqlalchemy.orm import Session

from alembic.config import Config
from alembic import command

# Registers every model on Base.metadata
from app.db.base import Base
from app.db.session import engine
from app.modules.posts.schemas.post import PostWrite
from app.modules.posts.services.post import create_post, get_posts
from app.modules.posts.comments.schemas.comment import CommentCreate
from app.modules.posts.comments.services.comment import create_comment

logger = logging.getLogger(__name__)

SAMPLE_POSTS = [
    {
        "title": "I wish the ring had never come to me.",
        "contents": "So do all who live to see such times, but that is not for them to decide.",
        "comments": [
            "All we have to decide is what to do with the time that is given us.",
            "Even the smallest person can change the course of the future.",
        ],
    },
    {
        "title": "Not all those who wander are lost.",
        "contents": "The old that is strong does not wither, deep roots are not reached by the frost.",
        "comments": [
            "From the ashes a fire shall be woken.",
        ],
    },
    {
        "title": "It's a dangerous business, going out your door.",
        "contents": "You step onto the road, and if you don't keep your feet, there's no knowing where you might be swept off to.",
        "comments": [],
    },
]

def init_db() -> None:
    """
    Initialize the database by running Alembic migrations.
    """
    try:
        alembic_cfg = Config("alembic.ini")
        command.upgrade(alembic_cfg, "head")
        logger.info("Database migrations applied successfully")
    except Exception as e:
        logger.error(f"Error applying database migrations: {e}")
        raise


def create_all_tables(bind=None) -> bool:
    bind = bind if bind is not None else engine
    try:
        inspector = inspect(bind)
        existing_tables = inspector.get_table_names()

        Base.metadata.create_all(bind=bind)

        new_tables = set(inspect(bind).get_table_names()) - set(existing_tables)
        if new_tables:
            logger.info(f"Created new tables: {new_tables}")

        return True
    except Exception as e:
        logger.error(f"Error creating database tables: {e}")
        return False


def seed_sample_data(db: Session) -> int:
    """
    Insert the sample posts and their comments into an empty database.
    Returns the number of posts created; nothing is inserted if posts already exist.
    """
    if get_posts(db):
        logger.info("Posts already present, skipping seed")
        return 0

    for sample in SAMPLE_POSTS:
        post = create_post(db, PostWrite(title=sample["title"], contents=sample["contents"]))
        for text in sample["comments"]:
            create_comment(db, CommentCreate(text=text, post_id=post.id))

    logger.info(f"Seeded {len(SAMPLE_POSTS)} posts")
    return len(SAMPLE_POSTS)
