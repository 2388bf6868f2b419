# app/core/logger.py
import sys
from pathlib import Path

from loguru import logger

from app.config import settings

CONSOLE_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"

def is_audit_record(record) -> bool:
    """관리자 작업/투표 기록 여부 (logger.bind(audit=True))"""
    return bool(record["extra"].get("audit"))

def setup_logging(level: str | None = None, log_dir: str | None = None, to_file: bool | None = None):
    """
    로거 구성
    - 콘솔: LOG_LEVEL
    - hoopers.log: 전체 DEBUG, 매일 회전
    - audit.log: 투표/관리자 작업만 (오래 보관)
    """
    level = (level or settings.log_level).upper()
    log_dir = Path(log_dir or settings.log_dir)
    to_file = settings.log_to_file if to_file is None else to_file

    logger.remove()
    logger.add(sys.stdout, format=CONSOLE_FORMAT, level=level, colorize=True)

    if to_file:
        log_dir.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_dir / "hoopers.log",
            format=FILE_FORMAT,
            level="DEBUG",
            rotation="00:00",
            retention=f"{settings.log_retention_days} days",
            compression="gz",
        )
        logger.add(
            log_dir / "audit.log",
            format="{time:YYYY-MM-DD HH:mm:ss} | {message}",
            level="INFO",
            filter=is_audit_record,
            rotation="50 MB",
            retention=f"{settings.audit_retention_days} days",
        )

    return logger

setup_logging()

# 투표/관리자 작업 기록용
audit_logger = logger.bind(audit=True)
