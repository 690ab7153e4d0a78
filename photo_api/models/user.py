# photo_api/models/user.py
from sqlalchemy import Column, String, DateTime
from sqlalchemy.sql import func
from photo_api.database import Base
import uuid

class User(Base):
    """유저 모델 (사진 소유자)"""
    __tablename__ = "users"

    # 기본 필드
    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    email = Column(String, unique=True, index=True, nullable=False)

    # 타임스탬프
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self):
        return f"<User {self.email}>"
