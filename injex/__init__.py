"""
依赖注入注册表
Dependency Injection Registry

作者: mrkingu
日期: 2025-06-24
描述: 标识符到依赖的注册表，提供属性注入、类注册与延迟实例注册
"""

from .registry import Registry, DependencyEntry, get_registry
from .decorators import inject, register_class, register_instance, InjectedAttribute, scan_injections
from .functions import initialize, register, register_factory, resolve, has, clear
from .lazy import LazyCell
from .types import Identifier, InitDelegate, Symbol
from .config import RegistrySettings, get_settings, set_settings
from .logger import setup_logging
from .exceptions import (
    RegistryError, DependencyResolutionError, IdentifierRequiredError,
    NoInstantiationMethodError, InitializationError, InjectorError
)

__version__ = "1.0.0"

__all__ = [
    # 装饰器
    'inject',
    'register_class',
    'register_instance',

    # 函数
    'initialize',
    'register',
    'register_factory',
    'resolve',
    'has',
    'clear',

    # 核心类
    'Registry',
    'DependencyEntry',
    'InjectedAttribute',
    'LazyCell',
    'Symbol',
    'Identifier',
    'InitDelegate',
    'get_registry',
    'scan_injections',

    # 配置与日志
    'RegistrySettings',
    'get_settings',
    'set_settings',
    'setup_logging',

    # 异常
    'RegistryError',
    'DependencyResolutionError',
    'IdentifierRequiredError',
    'NoInstantiationMethodError',
    'InitializationError',
    'InjectorError',
]
