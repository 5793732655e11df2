"""Per-request bindings of services to their repositories."""

from fastapi import Depends
from sqlalchemy.orm import Session
from app.db.session import get_db
from app.repositories.comment import CommentRepository
from app.repositories.content import ContentRepository
from app.repositories.like import LikeRepository
from app.repositories.post import PostRepository
from app.repositories.user import UserRepository
from app.services.base import BaseService
from app.services.content import ContentService


def get_user_repository(db: Session = Depends(get_db)) -> UserRepository:
    return UserRepository(db)


def get_user_service(repository: UserRepository = Depends(get_user_repository)) -> BaseService:
    return BaseService(repository)


def get_post_service(db: Session = Depends(get_db)) -> BaseService:
    return BaseService(PostRepository(db))


def get_comment_service(db: Session = Depends(get_db)) -> BaseService:
    return BaseService(CommentRepository(db))


def get_like_repository(db: Session = Depends(get_db)) -> LikeRepository:
    return LikeRepository(db)


def get_content_service(db: Session = Depends(get_db)) -> ContentService:
    return ContentService(ContentRepository(db))
