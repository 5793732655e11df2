from sqlalchemy import Column, Integer, String, DateTime
from datetime import datetime
from app.db.base import Base


class RevokedToken(Base):
    __tablename__ = "revoked_tokens"
    id = Column(Integer, primary_key=True)
    jti = Column(String(64), unique=True, index=True, nullable=False)
    revoked_at = Column(DateTime, default=datetime.utcnow)
