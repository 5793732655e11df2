from sqlalchemy.orm import joinedload, selectinload
from app.db.models.post import Post
from app.db.models.comment import Comment
from app.repositories.base import BaseRepository


class PostRepository(BaseRepository):
    model = Post

    def with_relations(self):
        # Posts are never exposed with lazily loaded relations
        return self.query().options(
            joinedload(Post.user),
            selectinload(Post.comments).joinedload(Comment.user),
            selectinload(Post.likes),
            joinedload(Post.content),
        )

    def all(self):
        return self.with_relations().order_by(Post.id).all()

    def find(self, id):
        return self.with_relations().filter(Post.id == id).first()
