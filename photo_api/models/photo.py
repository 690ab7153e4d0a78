# photo_api/models/photo.py
from sqlalchemy import Column, String, Boolean, Integer, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from photo_api.database import Base
from datetime import datetime, timezone
import uuid

class Photo(Base):
    """사진 모델"""
    __tablename__ = "photos"

    # 기본 필드
    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    category_id = Column(String, ForeignKey("categories.id"), nullable=False)

    # 사진 정보 (path는 외부 저장소 참조, 형식 검증 없음)
    path = Column(String, nullable=False)
    title = Column(String, nullable=False)
    desc = Column(String, nullable=True)
    is_public = Column(Boolean, nullable=False, default=False, index=True)

    # 내부 메타데이터 (응답에 노출 안 함)
    registered_date = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    version = Column(Integer, nullable=False, default=0)

    # 관계
    user = relationship("User", backref="photos")
    category = relationship("Category")

    def __repr__(self):
        return f"<Photo {self.title}>"
