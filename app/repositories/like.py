from app.db.models.like import Like
from app.repositories.base import BaseRepository


class LikeRepository(BaseRepository):
    model = Like

    def find_for(self, post_id, user_id):
        return self.query().filter(Like.post_id == post_id, Like.user_id == user_id).first()
