"""日志工具"""
import logging
import sys
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import List, Optional

from app.config import Settings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATEFMT = '%Y-%m-%d %H:%M:%S'

# 第三方库的请求日志过于频繁，只保留警告以上
NOISY_LOGGERS = ("httpx", "httpcore")


def _file_handler(settings: Settings) -> TimedRotatingFileHandler:
    """按天轮转的文件日志，后缀如 app.log.2025-01-15"""
    log_dir = Path(settings.log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    handler = TimedRotatingFileHandler(
        log_dir / settings.log_file,
        when='midnight',
        backupCount=settings.log_backup_count,
        encoding='utf-8'
    )
    handler.suffix = '%Y-%m-%d'
    return handler


def setup_logging(settings: Settings) -> Optional[Path]:
    """
    按配置初始化根日志记录器

    Args:
        settings: 应用配置

    Returns:
        Optional[Path]: 日志文件路径，未启用文件日志时为None
    """
    level = getattr(logging, settings.log_level.upper(), logging.INFO)

    handlers: List[logging.Handler] = []
    if settings.log_enable_console:
        handlers.append(logging.StreamHandler(sys.stdout))
    if settings.log_enable_file:
        handlers.append(_file_handler(settings))

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT)
    for handler in handlers:
        handler.setFormatter(formatter)
        handler.setLevel(level)

    logging.basicConfig(level=level, handlers=handlers, force=True)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    if not settings.log_enable_file:
        return None
    return Path(settings.log_dir) / settings.log_file
