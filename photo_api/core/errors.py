# photo_api/core/errors.py
from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from photo_api.core.logger import logger

INTERNAL_ERROR_MESSAGE = "Internal server error"
NOT_FOUND_OR_UNAUTHORISED = "Photo not found or user not authorised"


class ApiError(Exception):
    """{success: false, message} 형태로 응답되는 예외"""

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message


def bad_request(message: str) -> ApiError:
    return ApiError(status.HTTP_400_BAD_REQUEST, message)


def internal_error() -> ApiError:
    # 내부 상세 정보는 클라이언트에 노출하지 않음
    return ApiError(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)


def error_response(status_code: int, message: str, headers: dict | None = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "message": message},
        headers=headers
    )


# ===== 예외 핸들러 (main.py에서 등록) =====

async def api_error_handler(request: Request, exc: ApiError):
    headers = None
    if exc.status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}
    return error_response(exc.status_code, exc.message, headers)


async def validation_error_handler(request: Request, exc: RequestValidationError):
    """바디 형식 오류 (JSON 파싱 실패, 타입 불일치)"""
    errors = exc.errors()
    logger.warning(f"요청 검증 실패: {request.method} {request.url.path} - {errors}")

    message = "Invalid request body"
    if errors and errors[0].get("type") != "json_invalid":
        loc = ".".join(str(part) for part in errors[0].get("loc", ()) if part != "body")
        if loc:
            message = f"Invalid value for {loc}"
    return error_response(status.HTTP_400_BAD_REQUEST, message)


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.opt(exception=exc).error(f"처리되지 않은 예외: {request.method} {request.url.path}")
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)
