# photo_api/api/routes/photos.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import SQLAlchemyError

from photo_api.api.deps import get_current_user_id, get_photo_store
from photo_api.core.errors import ApiError, NOT_FOUND_OR_UNAUTHORISED, internal_error
from photo_api.core.logger import logger
from photo_api.schemas.photo import (
    PhotoCreate,
    PhotoUpdate,
    PhotoResponse,
    PhotoSummary,
    PhotoRecord,
    PhotoListResponse,
    PhotoMutationResponse,
    PhotoDeleteResponse,
)
from photo_api.services.photo_service import build_new_photo, build_photo_changes
from photo_api.services.photo_store import PhotoStore

router = APIRouter(prefix="/api/photo", tags=["사진"])

def _list_photos(store: PhotoStore, **filters) -> PhotoListResponse:
    """조회 + 참조 확장 + 내부 필드 제거"""
    try:
        photos = store.find(**filters)
        return PhotoListResponse(
            photos=[PhotoResponse.model_validate(photo) for photo in photos]
        )
    except SQLAlchemyError:
        logger.exception(f"사진 조회 실패 (filter={filters})")
        raise internal_error()

@router.get("/", response_model=PhotoListResponse)
def get_all_photos(
    user_id: str = Depends(get_current_user_id),
    store: PhotoStore = Depends(get_photo_store)
):
    """전체 사진 목록"""
    return _list_photos(store)

@router.get("/public", response_model=PhotoListResponse)
def get_public_photos(store: PhotoStore = Depends(get_photo_store)):
    """공개 사진 목록 (인증 불필요)"""
    return _list_photos(store, is_public=True)

@router.get("/user", response_model=PhotoListResponse)
def get_my_photos(
    user_id: str = Depends(get_current_user_id),
    store: PhotoStore = Depends(get_photo_store)
):
    """내 사진 목록"""
    return _list_photos(store, user_id=user_id)

@router.post("/", response_model=PhotoMutationResponse)
def create_photo(
    data: PhotoCreate | None = None,
    user_id: str = Depends(get_current_user_id),
    store: PhotoStore = Depends(get_photo_store)
):
    """사진 등록"""

    # 검증 (저장소 접근 전)
    # 바디 없이 온 요청도 필드 누락과 같은 메시지로 응답
    fields = build_new_photo(data or PhotoCreate())

    try:
        photo = store.insert(fields)
        response = PhotoMutationResponse(
            message="Add photo success!",
            photo=PhotoSummary.model_validate(photo)
        )
    except SQLAlchemyError:
        logger.exception(f"사진 등록 실패 (요청 유저: {user_id})")
        raise internal_error()

    logger.info(f"사진 등록: {photo.id} (owner={photo.user_id}, 요청 유저={user_id})")
    return response

@router.put("/{photo_id}", response_model=PhotoMutationResponse)
def update_photo(
    photo_id: str,
    data: PhotoUpdate | None = None,
    user_id: str = Depends(get_current_user_id),
    store: PhotoStore = Depends(get_photo_store)
):
    """사진 수정 (소유자 확인 없음, id로만 조회)"""

    changes = build_photo_changes(data or PhotoUpdate())

    try:
        photo = store.update_by_id(photo_id, changes)
        if photo is not None:
            summary = PhotoSummary.model_validate(photo)
    except SQLAlchemyError:
        logger.exception(f"사진 수정 실패: {photo_id}")
        raise internal_error()

    # 없는 사진 / 권한 없음은 구분하지 않음
    if photo is None:
        raise ApiError(status.HTTP_401_UNAUTHORIZED, NOT_FOUND_OR_UNAUTHORISED)

    logger.info(f"사진 수정: {photo_id} (요청 유저={user_id})")
    return PhotoMutationResponse(message="Update photo success!", photo=summary)

@router.delete("/{photo_id}", response_model=PhotoDeleteResponse)
def delete_photo(
    photo_id: str,
    user_id: str = Depends(get_current_user_id),
    store: PhotoStore = Depends(get_photo_store)
):
    """사진 삭제 (소유자 확인 없음, id로만 조회)"""

    try:
        photo = store.delete_by_id(photo_id)
    except SQLAlchemyError:
        logger.exception(f"사진 삭제 실패: {photo_id}")
        raise internal_error()

    if photo is None:
        raise ApiError(status.HTTP_401_UNAUTHORIZED, NOT_FOUND_OR_UNAUTHORISED)

    logger.info(f"사진 삭제: {photo_id} (요청 유저={user_id})")
    return PhotoDeleteResponse(photo=PhotoRecord.from_photo(photo))
