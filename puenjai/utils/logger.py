# puenjai/utils/logger.py
import logging
from typing import Optional

from puenjai.config import settings

LOGGER_NAME = "puen_jai"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - [%(module)s] %(message)s'


def setup_logger(level: Optional[str] = None) -> logging.Logger:
    """puen_jai 로거 설정 - level 미지정시 settings.log_level 사용"""
    level_name = (level or settings.log_level).upper()
    log_level = getattr(logging, level_name, logging.INFO)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(log_level)
    # uvicorn 루트 로거로 중복 출력 방지
    logger.propagate = False

    if logger.handlers:
        # 이미 설정된 경우 레벨만 갱신
        for handler in logger.handlers:
            handler.setLevel(log_level)
        return logger

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(console_handler)

    return logger


# 전역 로거 인스턴스
logger = setup_logger()
