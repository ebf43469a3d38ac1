"""
注册表配置
Registry Configuration

作者: mrkingu
日期: 2025-06-24
描述: 注册表与日志的配置模型，支持环境变量覆盖
"""

import logging
import os
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


_LEVEL_NAMES = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class BaseConfig(BaseModel):
    """配置基类"""

    model_config = ConfigDict(
        # 禁止额外字段
        extra="forbid",
        # 允许属性验证
        validate_assignment=True
    )


class RegistrySettings(BaseConfig):
    """注册表配置"""
    log_level: str = Field(default="WARNING", description="injex日志器级别")
    deprecation_log_level: str = Field(default="WARNING", description="弃用依赖提示的日志级别")

    @field_validator("log_level", "deprecation_log_level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        value = value.upper()
        if value not in _LEVEL_NAMES:
            raise ValueError(f"Unknown log level: {value}")
        return value

    @property
    def deprecation_level_no(self) -> int:
        """弃用提示级别对应的数值"""
        return getattr(logging, self.deprecation_log_level)


_settings: Optional[RegistrySettings] = None


def load_settings_from_env() -> RegistrySettings:
    """从环境变量构建配置"""
    overrides = {}

    log_level = os.getenv("INJEX_LOG_LEVEL")
    if log_level:
        overrides["log_level"] = log_level

    deprecation_level = os.getenv("INJEX_DEPRECATION_LOG_LEVEL")
    if deprecation_level:
        overrides["deprecation_log_level"] = deprecation_level

    return RegistrySettings(**overrides)


def get_settings() -> RegistrySettings:
    """
    获取当前配置

    首次调用时从环境变量加载
    """
    global _settings
    if _settings is None:
        _settings = load_settings_from_env()
    return _settings


def set_settings(settings: Optional[RegistrySettings]) -> None:
    """替换当前配置，传入None则下次调用时重新加载"""
    global _settings
    _settings = settings
