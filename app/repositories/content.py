from app.db.models.content import Content
from app.repositories.base import BaseRepository


class ContentRepository(BaseRepository):
    model = Content

    def search(self, search=None, user_id=None):
        query = self.query()
        if search:
            query = query.filter(Content.title.ilike(f"%{search}%"))
        if user_id is not None:
            query = query.filter(Content.user_id == user_id)
        return query
