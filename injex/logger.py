"""
日志配置
Logger Setup

作者: mrkingu
日期: 2025-06-24
描述: injex日志器的控制台输出配置
"""

import logging
from typing import Optional

from .config import RegistrySettings, get_settings

ROOT_LOGGER_NAME = "injex"

DEFAULT_FORMAT = "[{asctime}] {levelname:8} [INJEX] {message}"


def setup_logging(
    settings: Optional[RegistrySettings] = None,
    handler: Optional[logging.Handler] = None
) -> logging.Logger:
    """
    配置injex日志器

    Args:
        settings: 配置，默认使用get_settings()
        handler: 自定义处理器，默认输出到控制台

    Returns:
        injex根日志器
    """
    settings = settings or get_settings()
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(settings.log_level)

    if handler is None:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(DEFAULT_FORMAT, style="{"))

    # 避免重复添加
    for existing in list(logger.handlers):
        if getattr(existing, "_injex_handler", False):
            logger.removeHandler(existing)
    handler._injex_handler = True
    logger.addHandler(handler)

    return logger
