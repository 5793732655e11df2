from app.db.models.user import User
from app.repositories.base import BaseRepository


class UserRepository(BaseRepository):
    model = User

    def find_by_email(self, email):
        return self.query().filter(User.email == email).first()
