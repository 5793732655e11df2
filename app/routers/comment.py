import logging
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from app.api.deps import get_comment_service, get_post_service, get_user_service
from app.core.errors import ValidationFailed
from app.core.security import get_current_user
from app.schemas.comment import CommentCreate, CommentResponse
from app.services.base import BaseService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/{post_id}/comments",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
)
def store(
    post_id: int,
    comment_in: CommentCreate,
    comments: BaseService = Depends(get_comment_service),
    posts: BaseService = Depends(get_post_service),
    users: BaseService = Depends(get_user_service),
    current_user=Depends(get_current_user)
):
    if users.find(comment_in.user_id) is None:
        raise ValidationFailed({"user_id": ["The selected user id is invalid."]})
    posts.find_or_fail(post_id)

    try:
        comment = comments.create({
            "post_id": post_id,
            "user_id": comment_in.user_id,
            "text": comment_in.text,
        })
    except SQLAlchemyError as e:
        comments.repository.db.rollback()
        logger.error(f"Database error: {str(e)}")
        raise HTTPException(500, "Failed to create comment")

    comments.repository.db.refresh(comment, attribute_names=["user"])
    return {"comment": comment}
