import logging
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from app.api.deps import get_post_service, get_content_service
from app.core.errors import ValidationFailed
from app.core.security import get_current_user
from app.db.models.user import User
from app.schemas.message import Message
from app.schemas.post import PostCreate, PostOut, PostUpdate, PostListResponse
from app.services.base import BaseService
from app.services.content import ContentService

logger = logging.getLogger(__name__)

router = APIRouter()


def _check_content(content_id, contents: ContentService):
    if content_id is not None and contents.find(content_id) is None:
        raise ValidationFailed({"content_id": ["The selected content id is invalid."]})


@router.get("", response_model=PostListResponse)
def index(
    posts: BaseService = Depends(get_post_service),
    current_user: User = Depends(get_current_user)
):
    return {"status": 200, "result": {"data": posts.all()}}


@router.post("", response_model=PostOut, status_code=status.HTTP_201_CREATED)
def store(
    post_in: PostCreate,
    posts: BaseService = Depends(get_post_service),
    contents: ContentService = Depends(get_content_service),
    current_user: User = Depends(get_current_user)
):
    _check_content(post_in.content_id, contents)
    try:
        post = posts.create({"user_id": current_user.id, **post_in.model_dump()})
    except SQLAlchemyError as e:
        posts.repository.db.rollback()
        logger.error(f"Database error: {str(e)}")
        raise HTTPException(500, "Failed to create post")
    return posts.find(post.id)


@router.get("/{post_id}", response_model=PostOut)
def show(
    post_id: int,
    posts: BaseService = Depends(get_post_service),
    current_user: User = Depends(get_current_user)
):
    return posts.find_or_fail(post_id)


@router.api_route("/{post_id}", methods=["PUT", "PATCH"], response_model=PostOut)
def update(
    post_id: int,
    post_in: PostUpdate,
    posts: BaseService = Depends(get_post_service),
    contents: ContentService = Depends(get_content_service),
    current_user: User = Depends(get_current_user)
):
    post = posts.find_or_fail(post_id)
    if post.user_id != current_user.id:
        raise HTTPException(status_code=403, detail="Not authorized to update this post")

    attributes = post_in.model_dump(exclude_unset=True)
    _check_content(attributes.get("content_id"), contents)
    posts.update(post, attributes)
    return posts.find(post_id)


@router.delete("/{post_id}", response_model=Message)
def destroy(
    post_id: int,
    posts: BaseService = Depends(get_post_service),
    current_user: User = Depends(get_current_user)
):
    post = posts.find_or_fail(post_id)
    if post.user_id != current_user.id:
        raise HTTPException(status_code=403, detail="Not authorized to delete this post")

    posts.delete(post)
    return {"message": "Post deleted successfully"}
