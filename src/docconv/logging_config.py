"""
로깅 설정
"""

import logging
import os
import sys
from typing import Optional

from . import config as app_config

LOG_FORMAT = '%(asctime)s | %(levelname)-8s | %(name)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logging(level: Optional[str] = None, log_to_file: bool = True):
    """패키지 로거 설정 (stderr + 설정 폴더의 convert.log)

    Args:
        level: 로그 레벨 (기본: DOCCONV_LOG_LEVEL 환경변수 또는 INFO)
        log_to_file: 로그 파일 기록 여부
    """
    level = (level or os.getenv('DOCCONV_LOG_LEVEL', 'INFO')).upper()

    logger = logging.getLogger('docconv')
    logger.setLevel(getattr(logging, level, logging.INFO))
    logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_to_file:
        file_handler = logging.FileHandler(app_config.get_log_path(), encoding='utf-8')
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
