import logging
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from starlette.datastructures import UploadFile
from app.api.deps import get_content_service
from app.core.errors import ValidationFailed, from_pydantic
from app.core.security import get_current_user
from app.db.models.user import User
from app.schemas.content import ContentCreate, ContentOut, ContentPage, ContentUpdate
from app.schemas.message import Message
from app.services.content import ContentService

logger = logging.getLogger(__name__)

router = APIRouter()


async def read_payload(request: Request):
    """Return (fields, image) from a JSON or multipart/form body.

    Any `image` field that is not an uploaded file is discarded.
    """
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        try:
            payload = await request.json()
        except ValueError:
            raise ValidationFailed({"body": ["Invalid JSON body."]})
        if not isinstance(payload, dict):
            payload = {}
        return payload, None

    form = await request.form()
    image = form.get("image")
    fields = {key: value for key, value in form.items() if key != "image"}
    if not isinstance(image, UploadFile) or not image.filename:
        image = None
    return fields, image


def _ensure_owner(content, current_user: User):
    if content.user_id != current_user.id:
        raise HTTPException(status_code=403, detail="Not authorized to modify this content")


@router.get("", response_model=ContentPage)
def index(
    page: int = Query(1, ge=1),
    per_page: int = Query(15, ge=1, le=100),
    search: Optional[str] = None,
    user_id: Optional[int] = None,
    contents: ContentService = Depends(get_content_service),
    current_user: User = Depends(get_current_user)
):
    return contents.paginate(page=page, per_page=per_page, search=search, user_id=user_id)


@router.post("", response_model=ContentOut, status_code=status.HTTP_201_CREATED)
async def store(
    request: Request,
    contents: ContentService = Depends(get_content_service),
    current_user: User = Depends(get_current_user)
):
    fields, image = await read_payload(request)
    try:
        content_in = ContentCreate(**fields)
    except ValidationError as e:
        raise from_pydantic(e)

    try:
        return await contents.save({"user_id": current_user.id, **content_in.model_dump()}, image)
    except SQLAlchemyError as e:
        contents.repository.db.rollback()
        logger.error(f"Database error: {str(e)}")
        raise HTTPException(500, "Failed to create content")


@router.get("/{content_id}", response_model=ContentOut)
def show(
    content_id: int,
    contents: ContentService = Depends(get_content_service),
    current_user: User = Depends(get_current_user)
):
    return contents.find_or_fail(content_id)


@router.api_route("/{content_id}", methods=["PUT", "PATCH"], response_model=ContentOut)
async def update(
    content_id: int,
    request: Request,
    contents: ContentService = Depends(get_content_service),
    current_user: User = Depends(get_current_user)
):
    content = contents.find_or_fail(content_id)
    _ensure_owner(content, current_user)

    fields, image = await read_payload(request)
    try:
        content_in = ContentUpdate(**fields)
    except ValidationError as e:
        raise from_pydantic(e)

    try:
        return await contents.update_with_image(content, content_in.model_dump(exclude_unset=True), image)
    except SQLAlchemyError as e:
        contents.repository.db.rollback()
        logger.error(f"Database error: {str(e)}")
        raise HTTPException(500, "Failed to update content")


@router.delete("/{content_id}", response_model=Message)
def destroy(
    content_id: int,
    contents: ContentService = Depends(get_content_service),
    current_user: User = Depends(get_current_user)
):
    content = contents.find_or_fail(content_id)
    _ensure_owner(content, current_user)
    contents.delete(content)
    return {"message": "Content deleted successfully"}
