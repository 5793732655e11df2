import math
from fastapi import HTTPException, status
from sqlalchemy.orm import Session


class BaseRepository:
    """Thin wrapper around a SQLAlchemy session bound to one model."""

    model = None

    def __init__(self, db: Session, model=None):
        self.db = db
        if model is not None:
            self.model = model

    def query(self):
        return self.db.query(self.model)

    def all(self):
        return self.query().order_by(self.model.id).all()

    def find(self, id):
        return self.db.get(self.model, id)

    def find_or_fail(self, id):
        record = self.find(id)
        if record is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"{self.model.__name__} not found",
            )
        return record

    def create(self, attributes: dict):
        record = self.model(**attributes)
        return self.save(record)

    def update(self, record, attributes: dict):
        for key, value in attributes.items():
            setattr(record, key, value)
        return self.save(record)

    def save(self, record):
        self.db.add(record)
        self.db.commit()
        self.db.refresh(record)
        return record

    def delete(self, record):
        self.db.delete(record)
        self.db.commit()

    def paginate(self, query=None, page: int = 1, per_page: int = 15):
        query = query if query is not None else self.query()
        total = query.count()
        items = (
            query.order_by(self.model.id)
            .offset((page - 1) * per_page)
            .limit(per_page)
            .all()
        )
        return {
            "data": items,
            "current_page": page,
            "last_page": max(math.ceil(total / per_page), 1),
            "per_page": per_page,
            "total": total,
        }
