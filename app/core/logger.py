# app/core/logger.py
import sys
from loguru import logger
from app.core.config import settings

LOG_DIR = settings.log_dir_path
LOG_FILE = LOG_DIR / "dashboard.log"


def setup_logging() -> str:
    """
    Loguru 로그 설정 초기화.
    - Console: settings.LOG_LEVEL 이상
    - File: DEBUG 이상 (dashboard.log)
    """
    LOG_DIR.mkdir(parents=True, exist_ok=True)

    # 기존 핸들러 제거 (중복 방지)
    logger.remove()

    logger.add(
        sys.stderr,
        level=settings.LOG_LEVEL,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"
    )

    # 매일 자정 회전, 10일 보관, zip 압축
    logger.add(
        str(LOG_FILE),
        rotation="00:00",
        retention="10 days",
        compression="zip",
        level="DEBUG",
        enqueue=True,
        encoding="utf-8",
        format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{line} - {message}"
    )

    return str(LOG_FILE)
