# photo_api/api/deps.py
from fastapi import Depends, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from photo_api.core.errors import ApiError
from photo_api.core.logger import logger
from photo_api.core.security import decode_access_token
from photo_api.database import get_db
from photo_api.services.photo_store import PhotoStore

# JWT Bearer 토큰 스킴 (헤더 없을 때 직접 401 응답)
security = HTTPBearer(auto_error=False)

def get_current_user_id(
    token: HTTPAuthorizationCredentials | None = Depends(security)
) -> str:
    """JWT 토큰으로 현재 유저 id 가져오기"""
    if token is None:
        raise ApiError(status.HTTP_401_UNAUTHORIZED, "Access token not found")

    # 토큰 디코드
    payload = decode_access_token(token.credentials)
    if payload is None:
        logger.warning("토큰 검증 실패")
        raise ApiError(status.HTTP_403_FORBIDDEN, "Invalid token")

    user_id = payload.get("user_id")
    if not user_id:
        logger.warning("토큰에 user_id 클레임 없음")
        raise ApiError(status.HTTP_403_FORBIDDEN, "Invalid token")

    return str(user_id)

def get_photo_store(db: Session = Depends(get_db)) -> PhotoStore:
    """요청 단위 사진 저장소"""
    return PhotoStore(db)
