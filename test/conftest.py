"""
测试配置文件
Test Configuration File

作者: mrkingu
日期: 2025-06-24
描述: pytest fixtures，每个测试使用全新的共享注册表和默认配置
"""

import logging
import os
import sys

import pytest

# 添加项目根目录到路径
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from injex import Registry, set_settings


@pytest.fixture(autouse=True)
def fresh_registry():
    """每个测试前后重置共享注册表与配置"""
    Registry.reset()
    set_settings(None)
    yield Registry.get_instance()
    Registry.reset()
    set_settings(None)


@pytest.fixture
def registry():
    """独立的注册表实例（不影响共享注册表）"""
    return Registry()


@pytest.fixture
def deprecation_log(caplog):
    """捕获injex输出的弃用警告"""
    caplog.set_level(logging.DEBUG, logger="injex")

    def records():
        return [
            record for record in caplog.records
            if record.name.startswith("injex") and record.getMessage().endswith("is deprecated")
        ]

    return records


class Counter:
    """记录构造次数的辅助类"""

    created = 0

    def __init__(self):
        type(self).created += 1
        self.value = "counter"


@pytest.fixture
def counter_class():
    """每个测试独立的计数类"""
    return type("CounterService", (Counter,), {"created": 0})
