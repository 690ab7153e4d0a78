# photo_api/models/category.py
from sqlalchemy import Column, String, DateTime
from photo_api.database import Base
from datetime import datetime, timezone
import uuid

class Category(Base):
    """카테고리 모델"""
    __tablename__ = "categories"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String, nullable=False)

    registered_date = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    def __repr__(self):
        return f"<Category {self.name}>"
