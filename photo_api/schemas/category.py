# photo_api/schemas/category.py
from pydantic import BaseModel
from photo_api.schemas.photo import CategoryRef

class CategoryCreate(BaseModel):
    """카테고리 생성 요청"""
    name: str | None = None

class CategoryListResponse(BaseModel):
    success: bool = True
    categories: list[CategoryRef]

class CategoryCreateResponse(BaseModel):
    success: bool = True
    message: str
    category: CategoryRef
