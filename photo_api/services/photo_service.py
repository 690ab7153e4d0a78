# photo_api/services/photo_service.py
from photo_api.core.errors import bad_request
from photo_api.schemas.photo import PhotoCreate, PhotoUpdate

# 필수값 검사 순서: path -> category -> title
PHOTO_REQUIRED = "Photo is required"
CATEGORY_REQUIRED = "Category is required"
TITLE_REQUIRED = "Title is required"

def validate_required(path: str | None, category: str | None, title: str | None) -> None:
    """빈 값/누락 시 첫 번째 실패 항목으로 400"""
    if not path:
        raise bad_request(PHOTO_REQUIRED)
    if not category:
        raise bad_request(CATEGORY_REQUIRED)
    if not title:
        raise bad_request(TITLE_REQUIRED)

def build_new_photo(data: PhotoCreate) -> dict:
    """
    생성할 사진 문서
    NOTE: 소유자는 토큰이 아니라 바디의 userId를 그대로 사용 (기존 클라이언트 호환)
    """
    validate_required(data.path, data.categoryId, data.title)

    return {
        "category_id": data.categoryId,
        "path": data.path,
        "title": data.title,
        "desc": data.desc,
        "user_id": data.userId,
        "is_public": bool(data.is_public),
    }

def build_photo_changes(data: PhotoUpdate) -> dict:
    """수정할 필드 (다섯 필드 모두 교체, 빠진 desc/is_public은 비움)"""
    validate_required(data.path, data.category, data.title)

    return {
        "category_id": data.category,
        "path": data.path,
        "title": data.title,
        "desc": data.desc,
        "is_public": bool(data.is_public),
    }
