# photo_api/services/photo_store.py
from typing import Any
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, joinedload

from photo_api.models.photo import Photo


class PhotoStore:
    """
    사진 문서 저장소
    - find: 필터 조회 + user/category 참조 확장
    - insert / update_by_id / delete_by_id: 1회 왕복
    - 동시 수정은 마지막 쓰기가 이김 (버전 체크 없음)
    """

    def __init__(self, db: Session):
        self.db = db

    def find(self, **filters: Any) -> list[Photo]:
        """필터 조회 (user, category 함께 로드)"""
        return self.db.query(Photo)\
            .options(joinedload(Photo.user), joinedload(Photo.category))\
            .filter_by(**filters)\
            .order_by(Photo.registered_date)\
            .all()

    def insert(self, fields: dict) -> Photo:
        photo = Photo(**fields)
        try:
            self.db.add(photo)
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
        self.db.refresh(photo)
        return photo

    def update_by_id(self, photo_id: str, fields: dict) -> Photo | None:
        """해당 id 사진의 필드 교체, 없으면 None"""
        try:
            photo = self.db.query(Photo).filter(Photo.id == photo_id).first()
            if photo is None:
                return None

            for key, value in fields.items():
                setattr(photo, key, value)
            photo.version = (photo.version or 0) + 1

            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
        self.db.refresh(photo)
        return photo

    def delete_by_id(self, photo_id: str) -> Photo | None:
        """해당 id 사진 삭제, 삭제된 레코드 반환"""
        try:
            photo = self.db.query(Photo).filter(Photo.id == photo_id).first()
            if photo is None:
                return None

            # 커밋 후에는 삭제된 인스턴스 속성을 읽을 수 없으므로 미리 복사
            snapshot = {c.key: getattr(photo, c.key) for c in Photo.__table__.columns}

            self.db.delete(photo)
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
        return Photo(**snapshot)
