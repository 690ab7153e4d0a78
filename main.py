# main.py
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from photo_api.config import settings
from photo_api.database import Base, engine
from photo_api.api.routes import photos, categories
from photo_api.core.errors import (
    ApiError,
    api_error_handler,
    validation_error_handler,
    unhandled_error_handler,
    error_response,
)
from photo_api.core.logging_middleware import log_requests
from photo_api.core.logger import logger

# 테이블 메타데이터 등록용
from photo_api.models import user, category, photo  # noqa: F401

app = FastAPI(
    title=settings.app_name,
    debug=settings.debug
)

# ===== 에러 응답 포맷 통일 {success: false, message} =====
app.add_exception_handler(ApiError, api_error_handler)
app.add_exception_handler(RequestValidationError, validation_error_handler)
app.add_exception_handler(Exception, unhandled_error_handler)

# ===== 로깅 미들웨어 추가 (가장 먼저) =====
@app.middleware("http")
async def logging_middleware(request: Request, call_next):
    return await log_requests(request, call_next)
# ==========================================

# 요청 크기 제한 미들웨어
@app.middleware("http")
async def limit_request_size(request: Request, call_next):
    """요청 크기 제한"""
    if request.method in ["POST", "PUT", "PATCH"]:
        content_length = request.headers.get("content-length")
        if content_length and content_length.isdigit() and int(content_length) > settings.max_request_size:
            return error_response(
                413,
                f"Request body too large. Max: {settings.max_request_size // 1024}KB"
            )
    return await call_next(request)

# CORS 설정
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# 라우터 등록
app.include_router(photos.router)
app.include_router(categories.router)

# ===== 시작/종료 로그 =====
@app.on_event("startup")
async def startup_event():
    Base.metadata.create_all(bind=engine)
    logger.info(f"{settings.app_name} 서버 시작")

@app.on_event("shutdown")
async def shutdown_event():
    logger.info(f"{settings.app_name} 서버 종료")
# ==========================

@app.get("/health")
def health_check():
    """헬스체크"""
    return {
        "status": "healthy",
        "service": settings.app_name
    }
