import logging
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from app.api.deps import get_content_service, get_user_repository, get_user_service
from app.core.errors import ValidationFailed
from app.core.security import get_current_user, hash_password
from app.db.models.user import User
from app.repositories.user import UserRepository
from app.schemas.message import Message
from app.schemas.user import UserCreate, UserOut, UserUpdate
from app.services.base import BaseService
from app.services.content import ContentService

logger = logging.getLogger(__name__)

router = APIRouter()


def _ensure_owner(user: User, current_user: User):
    if user.id != current_user.id:
        raise HTTPException(status_code=403, detail="You can only modify your own account")


@router.get("", response_model=List[UserOut])
def index(
    users: BaseService = Depends(get_user_service),
    current_user: User = Depends(get_current_user)
):
    return users.all()


@router.post("", response_model=UserOut, status_code=status.HTTP_201_CREATED)
def store(
    user_in: UserCreate,
    users: BaseService = Depends(get_user_service),
    repository: UserRepository = Depends(get_user_repository),
    current_user: User = Depends(get_current_user)
):
    if repository.find_by_email(user_in.email):
        raise ValidationFailed({"email": ["The email has already been taken."]})
    attributes = user_in.model_dump(exclude={"password_confirmation"})
    attributes["password"] = hash_password(user_in.password)
    return users.create(attributes)


@router.get("/{user_id}", response_model=UserOut)
def show(
    user_id: int,
    users: BaseService = Depends(get_user_service),
    current_user: User = Depends(get_current_user)
):
    return users.find_or_fail(user_id)


@router.api_route("/{user_id}", methods=["PUT", "PATCH"], response_model=UserOut)
def update(
    user_id: int,
    user_in: UserUpdate,
    users: BaseService = Depends(get_user_service),
    repository: UserRepository = Depends(get_user_repository),
    current_user: User = Depends(get_current_user)
):
    user = users.find_or_fail(user_id)
    _ensure_owner(user, current_user)

    attributes = user_in.model_dump(exclude_unset=True, exclude_none=True)
    if "email" in attributes and attributes["email"] != user.email:
        if repository.find_by_email(attributes["email"]):
            raise ValidationFailed({"email": ["The email has already been taken."]})
    if "password" in attributes:
        attributes["password"] = hash_password(attributes["password"])

    try:
        return users.update(user, attributes)
    except SQLAlchemyError as e:
        repository.db.rollback()
        logger.error(f"Database error: {str(e)}")
        raise HTTPException(500, "Failed to update user")


@router.delete("/{user_id}", response_model=Message)
def destroy(
    user_id: int,
    users: BaseService = Depends(get_user_service),
    contents: ContentService = Depends(get_content_service),
    current_user: User = Depends(get_current_user)
):
    user = users.find_or_fail(user_id)
    _ensure_owner(user, current_user)
    # cascaded contents bypass ContentService.delete
    public_ids = [c.image_public_id for c in user.contents if c.image_public_id]
    users.delete(user)
    contents.destroy_images(public_ids)
    return {"message": "User deleted successfully"}
