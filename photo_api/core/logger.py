# photo_api/core/logger.py
import logging
import os
import sys

from loguru import logger

from photo_api.config import settings

# uvicorn / sqlalchemy 표준 logging 로거
STD_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access", "sqlalchemy.engine", "alembic")

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"


class InterceptHandler(logging.Handler):
    """표준 logging 레코드를 loguru로 전달"""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # logging 모듈 내부 프레임은 건너뛰고 실제 호출 위치 표시
        frame, depth = logging.currentframe(), 2
        while frame is not None and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def setup_logging() -> None:
    """콘솔 + 파일 sink 구성, 표준 logging 흡수"""
    os.makedirs(settings.log_dir, exist_ok=True)

    logger.remove()

    # 콘솔 (debug 모드면 DEBUG까지)
    logger.add(
        sys.stdout,
        colorize=True,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>",
        level="DEBUG" if settings.debug else settings.log_level
    )

    # 전체 로그 (요청 로그 포함)
    logger.add(
        os.path.join(settings.log_dir, "photo_api.log"),
        rotation="10 MB",
        retention=settings.log_retention,
        compression="zip",
        format=FILE_FORMAT,
        level="DEBUG"
    )

    # 저장소 실패 등 에러만
    logger.add(
        os.path.join(settings.log_dir, "error.log"),
        rotation="10 MB",
        retention=settings.log_retention,
        compression="zip",
        format=FILE_FORMAT,
        level="ERROR",
        backtrace=True
    )

    for name in STD_LOGGERS:
        std_logger = logging.getLogger(name)
        std_logger.handlers = [InterceptHandler()]
        std_logger.propagate = False


setup_logging()
