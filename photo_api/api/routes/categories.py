# photo_api/api/routes/categories.py
from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from photo_api.api.deps import get_current_user_id
from photo_api.core.errors import bad_request, internal_error
from photo_api.core.logger import logger
from photo_api.database import get_db
from photo_api.models.category import Category
from photo_api.schemas.category import CategoryCreate, CategoryListResponse, CategoryCreateResponse
from photo_api.schemas.photo import CategoryRef

router = APIRouter(prefix="/api/category", tags=["카테고리"])

@router.get("/", response_model=CategoryListResponse)
def get_categories(db: Session = Depends(get_db)):
    """카테고리 목록"""
    try:
        categories = db.query(Category).order_by(Category.registered_date).all()
        return CategoryListResponse(
            categories=[CategoryRef.model_validate(c) for c in categories]
        )
    except SQLAlchemyError:
        logger.exception("카테고리 조회 실패")
        raise internal_error()

@router.post("/", response_model=CategoryCreateResponse)
def create_category(
    data: CategoryCreate,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """카테고리 생성"""
    if not data.name:
        raise bad_request("Name is required")

    category = Category(name=data.name)
    try:
        db.add(category)
        db.commit()
        db.refresh(category)
    except SQLAlchemyError:
        db.rollback()
        logger.exception(f"카테고리 생성 실패 (요청 유저: {user_id})")
        raise internal_error()

    logger.info(f"카테고리 생성: {category.id} ({category.name})")
    return CategoryCreateResponse(
        message="Add category success!",
        category=CategoryRef.model_validate(category)
    )
