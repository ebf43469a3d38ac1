"""
配置与日志测试
Configuration and Logging Tests

作者: mrkingu
日期: 2025-06-24
描述: 测试RegistrySettings校验、环境变量覆盖和日志器配置
"""

import logging

import pytest
from pydantic import ValidationError

from injex import RegistrySettings, get_settings, set_settings, setup_logging
from injex.config import load_settings_from_env
from injex.logger import ROOT_LOGGER_NAME


class TestRegistrySettings:
    """配置模型测试"""

    def test_defaults(self):
        """测试默认配置"""
        settings = RegistrySettings()
        assert settings.log_level == "WARNING"
        assert settings.deprecation_log_level == "WARNING"
        assert settings.deprecation_level_no == logging.WARNING

    def test_level_normalized(self):
        """测试级别名称统一为大写"""
        settings = RegistrySettings(log_level="debug")
        assert settings.log_level == "DEBUG"

    def test_invalid_level_rejected(self):
        """测试无效级别"""
        with pytest.raises(ValidationError):
            RegistrySettings(log_level="LOUD")

    def test_extra_fields_forbidden(self):
        """测试禁止额外字段"""
        with pytest.raises(ValidationError):
            RegistrySettings(strict=True)

    def test_assignment_validated(self):
        """测试赋值时校验"""
        settings = RegistrySettings()
        with pytest.raises(ValidationError):
            settings.deprecation_log_level = "nope"


class TestEnvironmentOverrides:
    """环境变量覆盖测试"""

    def test_env_overrides(self, monkeypatch):
        """测试从环境变量读取配置"""
        monkeypatch.setenv("INJEX_LOG_LEVEL", "info")
        monkeypatch.setenv("INJEX_DEPRECATION_LOG_LEVEL", "error")

        settings = load_settings_from_env()
        assert settings.log_level == "INFO"
        assert settings.deprecation_log_level == "ERROR"

    def test_get_settings_cached(self, monkeypatch):
        """测试配置只加载一次，直到被替换"""
        monkeypatch.delenv("INJEX_LOG_LEVEL", raising=False)
        first = get_settings()
        assert get_settings() is first

        replacement = RegistrySettings(log_level="ERROR")
        set_settings(replacement)
        assert get_settings() is replacement


class TestSetupLogging:
    """日志器配置测试"""

    def test_setup_logging_attaches_single_handler(self):
        """测试重复配置不会重复添加处理器"""
        logger = logging.getLogger(ROOT_LOGGER_NAME)
        try:
            setup_logging(RegistrySettings(log_level="DEBUG"))
            setup_logging(RegistrySettings(log_level="INFO"))

            injex_handlers = [h for h in logger.handlers if getattr(h, "_injex_handler", False)]
            assert len(injex_handlers) == 1
            assert logger.level == logging.INFO
        finally:
            for handler in list(logger.handlers):
                if getattr(handler, "_injex_handler", False):
                    logger.removeHandler(handler)
            logger.setLevel(logging.NOTSET)
