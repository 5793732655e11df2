import time
import logging
from typing import Optional
from cloudinary import uploader
from cloudinary.exceptions import Error as CloudinaryError
from fastapi import HTTPException, UploadFile
from app.repositories.content import ContentRepository
from app.services.base import BaseService

logger = logging.getLogger(__name__)

IMAGE_FOLDER = "content_images"


class ContentService(BaseService):
    repository: ContentRepository

    def __init__(self, repository: ContentRepository):
        super().__init__(repository)

    def paginate(self, page=1, per_page=15, search=None, user_id=None):
        query = self.repository.search(search=search, user_id=user_id)
        return self.repository.paginate(query, page=page, per_page=per_page)

    async def save(self, attributes: dict, image: Optional[UploadFile] = None):
        attributes = {k: v for k, v in attributes.items() if k != "image"}
        if image is not None:
            attributes.update(await self._store_image(image, attributes.get("user_id")))
        return self.create(attributes)

    async def update_with_image(self, content, attributes: dict, image: Optional[UploadFile] = None):
        attributes = {k: v for k, v in attributes.items() if k != "image"}
        old_public_id = None
        if image is not None:
            old_public_id = content.image_public_id
            attributes.update(await self._store_image(image, content.user_id))
        content = self.update(content, attributes)
        if old_public_id:
            self._destroy_image(old_public_id)
        return content

    def delete(self, content):
        public_id = content.image_public_id
        super().delete(content)
        if public_id:
            self._destroy_image(public_id)

    async def _store_image(self, image: UploadFile, owner_id):
        try:
            upload_result = uploader.upload(
                await image.read(),
                folder=IMAGE_FOLDER,
                public_id=f"content_{owner_id}_{int(time.time())}",
                resource_type="image",
                overwrite=True,
            )
        except CloudinaryError as e:
            logger.error(f"Cloudinary Error: {str(e)}")
            raise HTTPException(500, f"Image upload failed: {e}")
        return {
            "image": upload_result["secure_url"],
            "image_public_id": upload_result["public_id"],
        }

    def destroy_images(self, public_ids):
        for public_id in public_ids:
            self._destroy_image(public_id)

    def _destroy_image(self, public_id):
        try:
            uploader.destroy(public_id)
        except CloudinaryError as ce:
            logger.error(f"Cloudinary cleanup error: {str(ce)}")
