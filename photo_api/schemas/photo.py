# photo_api/schemas/photo.py
from pydantic import BaseModel

# ===== 요청 바디 =====
# 필수값 검사는 필드별 메시지/순서가 정해져 있어 서비스에서 직접 수행

class PhotoCreate(BaseModel):
    """사진 생성 요청"""
    categoryId: str | None = None
    path: str | None = None
    title: str | None = None
    desc: str | None = None
    userId: str | None = None
    is_public: bool | None = None

class PhotoUpdate(BaseModel):
    """사진 수정 요청"""
    category: str | None = None
    path: str | None = None
    title: str | None = None
    desc: str | None = None
    is_public: bool | None = None


# ===== 읽기 프로젝션 =====

class UserRef(BaseModel):
    """소유자 확장 (email만)"""
    email: str

    class Config:
        from_attributes = True

class CategoryRef(BaseModel):
    """카테고리 확장"""
    id: str
    name: str

    class Config:
        from_attributes = True

class PhotoResponse(BaseModel):
    """목록 조회용 사진 (참조 확장, 내부 필드 제외)"""
    id: str
    category: CategoryRef | None
    path: str
    title: str
    desc: str | None
    user: UserRef | None
    is_public: bool

    class Config:
        from_attributes = True

class PhotoSummary(BaseModel):
    """생성/수정 응답용 축소 프로젝션"""
    id: str
    path: str
    title: str
    desc: str | None
    is_public: bool

    class Config:
        from_attributes = True

class PhotoRecord(BaseModel):
    """삭제 응답용 레코드 (참조는 id 그대로)"""
    id: str
    category: str
    user: str
    path: str
    title: str
    desc: str | None
    is_public: bool

    @classmethod
    def from_photo(cls, photo) -> "PhotoRecord":
        return cls(
            id=photo.id,
            category=photo.category_id,
            user=photo.user_id,
            path=photo.path,
            title=photo.title,
            desc=photo.desc,
            is_public=bool(photo.is_public),
        )


# ===== 응답 =====

class PhotoListResponse(BaseModel):
    success: bool = True
    photos: list[PhotoResponse]

class PhotoMutationResponse(BaseModel):
    success: bool = True
    message: str
    photo: PhotoSummary

class PhotoDeleteResponse(BaseModel):
    success: bool = True
    photo: PhotoRecord
