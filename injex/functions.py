"""
注册表函数接口
Registry Function Interface

作者: mrkingu
日期: 2025-06-24
描述: 以函数形式注册和解析依赖，默认作用于共享注册表
"""

import logging
from typing import Any, Callable, Hashable, Optional

from .registry import Registry, get_registry

logger = logging.getLogger(__name__)


def initialize(registry: Optional[Registry] = None) -> Registry:
    """
    初始化共享注册表

    在应用启动时调用，显式确定之后装饰器和函数使用的注册表

    Args:
        registry: 要安装的注册表，如果不提供则创建新的空注册表

    Returns:
        当前共享注册表
    """
    registry = registry if registry is not None else Registry()
    Registry.set_instance(registry)
    logger.info(f"Shared registry initialized with {len(registry)} dependencies")
    return registry


def register(
    identifier: Hashable,
    dependency: Any,
    deprecated: bool = False,
    registry: Optional[Registry] = None
) -> None:
    """注册依赖（类、实例或任意值）"""
    get_registry(registry).register(identifier, dependency, deprecated)


def register_factory(
    identifier: Hashable,
    factory: Callable[[], Any],
    deprecated: bool = False,
    registry: Optional[Registry] = None
) -> None:
    """注册延迟构造的依赖，首次解析时调用factory"""
    get_registry(registry).register_factory(identifier, factory, deprecated)


def resolve(
    identifier: Hashable,
    necessary: bool = True,
    registry: Optional[Registry] = None
) -> Any:
    """
    解析依赖

    Args:
        identifier: 依赖标识符
        necessary: 为True时依赖不存在会抛出DependencyResolutionError
        registry: 使用的注册表，默认使用共享注册表

    Returns:
        依赖，不存在且非必需时返回None
    """
    return get_registry(registry).resolve(identifier, necessary)


def has(identifier: Hashable, registry: Optional[Registry] = None) -> bool:
    return get_registry(registry).has(identifier)


def clear(registry: Optional[Registry] = None) -> None:
    """清空注册表（主要用于测试）"""
    get_registry(registry).clear()
