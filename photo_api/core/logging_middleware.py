# photo_api/core/logging_middleware.py
from fastapi import Request
from photo_api.core.logger import logger
import time

async def log_requests(request: Request, call_next):
    """모든 요청/응답 로깅"""

    start_time = time.perf_counter()
    client = request.client.host if request.client else "-"

    logger.info(f"-> {request.method} {request.url.path} (client: {client})")

    try:
        response = await call_next(request)
    except Exception as e:
        process_time = (time.perf_counter() - start_time) * 1000

        # 핸들러 밖으로 새어 나온 예외만 여기 도달
        logger.error(
            f"!! {request.method} {request.url.path} "
            f"- Error: {e!r} "
            f"- Time: {process_time:.2f}ms"
        )
        logger.exception("Exception details:")
        raise

    process_time = (time.perf_counter() - start_time) * 1000  # ms

    # 4xx/5xx는 WARNING으로 남김
    level = "WARNING" if response.status_code >= 400 else "INFO"
    logger.log(
        level,
        f"<- {request.method} {request.url.path} "
        f"- Status: {response.status_code} "
        f"- Time: {process_time:.2f}ms"
    )

    return response
