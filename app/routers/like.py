import logging
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError
from app.api.deps import get_like_repository, get_post_service
from app.core.security import get_current_user
from app.repositories.like import LikeRepository
from app.schemas.like import LikeResponse
from app.schemas.message import Message
from app.services.base import BaseService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/{post_id}/likes", response_model=LikeResponse, status_code=status.HTTP_201_CREATED)
def store(
    post_id: int,
    likes: LikeRepository = Depends(get_like_repository),
    posts: BaseService = Depends(get_post_service),
    current_user=Depends(get_current_user)
):
    posts.find_or_fail(post_id)

    if likes.find_for(post_id, current_user.id):
        raise HTTPException(status_code=400, detail="Post already liked")

    try:
        like = likes.create({"user_id": current_user.id, "post_id": post_id})
    except IntegrityError as e:
        likes.db.rollback()
        logger.warning(f"Duplicate like on post {post_id}: {str(e)}")
        raise HTTPException(status_code=400, detail="Post already liked")
    return {"like": like}


@router.delete("/{post_id}/likes", response_model=Message)
def destroy(
    post_id: int,
    likes: LikeRepository = Depends(get_like_repository),
    posts: BaseService = Depends(get_post_service),
    current_user=Depends(get_current_user)
):
    posts.find_or_fail(post_id)

    existing_like = likes.find_for(post_id, current_user.id)
    if not existing_like:
        raise HTTPException(status_code=404, detail="Like not found")

    likes.delete(existing_like)
    return {"message": "Like removed"}
