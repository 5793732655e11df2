# Every model must be imported before mappers are configured
from app.db.base import Base
from app.db.models.user import User  # noqa: F401
from app.db.models.post import Post  # noqa: F401
from app.db.models.comment import Comment  # noqa: F401
from app.db.models.like import Like  # noqa: F401
from app.db.models.content import Content  # noqa: F401
from app.db.models.revoked_token import RevokedToken  # noqa: F401


def init_db(engine):
    Base.metadata.create_all(bind=engine)
