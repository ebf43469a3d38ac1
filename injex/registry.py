"""
依赖注册表
Dependency Registry

作者: mrkingu
日期: 2025-06-24
描述: 标识符到依赖的映射表，负责依赖的注册与解析
"""

import logging
import threading
from typing import Any, Callable, Dict, Hashable, List, Optional

from .config import RegistrySettings, get_settings
from .exceptions import DependencyResolutionError, describe_identifier

logger = logging.getLogger(__name__)


class DependencyEntry:
    """
    依赖条目

    保存注册的值和一次性的弃用标记。
    工厂条目在首次解析时调用factory，之后保存其产物。
    """

    __slots__ = ("value", "deprecated", "factory", "lock")

    def __init__(
        self,
        value: Any = None,
        deprecated: bool = False,
        factory: Optional[Callable[[], Any]] = None
    ):
        self.value = value
        self.deprecated = deprecated
        self.factory = factory
        self.lock = threading.RLock()

    @property
    def is_factory(self) -> bool:
        return self.factory is not None

    def __repr__(self) -> str:
        if self.is_factory:
            return f"DependencyEntry(factory={self.factory!r}, deprecated={self.deprecated})"
        return f"DependencyEntry(value={self.value!r}, deprecated={self.deprecated})"


class Registry:
    """
    依赖注册表

    可以显式创建并传递给需要它的组件，
    也可以通过get_instance()使用进程内共享的实例
    """

    _instance: Optional["Registry"] = None
    _instance_lock = threading.Lock()

    def __init__(self, settings: Optional[RegistrySettings] = None):
        self._dependencies: Dict[Hashable, DependencyEntry] = {}
        self._lock = threading.RLock()
        self._settings = settings

    @classmethod
    def get_instance(cls) -> "Registry":
        """
        获取共享的注册表实例，首次调用时创建

        Returns:
            共享注册表
        """
        if cls._instance is None:
            with cls._instance_lock:
                if cls._instance is None:
                    cls._instance = cls()
                    logger.debug("Created shared registry")
        return cls._instance

    @classmethod
    def set_instance(cls, registry: Optional["Registry"]) -> None:
        """替换共享实例，None表示下次访问时重新创建"""
        with cls._instance_lock:
            cls._instance = registry

    @classmethod
    def reset(cls) -> None:
        """丢弃共享实例（主要用于测试）"""
        cls.set_instance(None)

    @property
    def settings(self) -> RegistrySettings:
        return self._settings or get_settings()

    def register(self, identifier: Hashable, value: Any, deprecated: bool = False) -> None:
        """
        注册依赖，已存在的同名依赖会被覆盖

        Args:
            identifier: 依赖标识符
            value: 依赖（类、实例或任意数据）
            deprecated: 是否已弃用，弃用的依赖在首次解析时输出一次警告
        """
        with self._lock:
            self._dependencies[identifier] = DependencyEntry(value, bool(deprecated))
        logger.debug(f"Registered dependency: {describe_identifier(identifier)}")

    def register_factory(
        self,
        identifier: Hashable,
        factory: Callable[[], Any],
        deprecated: bool = False
    ) -> None:
        """
        注册延迟构造的依赖

        首次解析时调用factory一次，之后直接返回其结果

        Args:
            identifier: 依赖标识符
            factory: 无参工厂函数
            deprecated: 是否已弃用
        """
        if not callable(factory):
            raise TypeError(f"factory must be callable, got {type(factory).__name__}")

        with self._lock:
            self._dependencies[identifier] = DependencyEntry(
                deprecated=bool(deprecated), factory=factory
            )
        logger.debug(f"Registered dependency factory: {describe_identifier(identifier)}")

    def resolve(self, identifier: Hashable, necessary: bool = True) -> Any:
        """
        解析依赖

        Args:
            identifier: 依赖标识符
            necessary: 为True时依赖不存在会抛出异常，否则返回None

        Returns:
            注册的依赖，不存在且非必需时返回None

        Raises:
            DependencyResolutionError: 依赖不存在且为必需
        """
        entry = self._dependencies.get(identifier)

        if entry is None:
            if necessary:
                raise DependencyResolutionError(identifier)
            return None

        if entry.is_factory:
            value = self._construct(identifier, entry)
        else:
            value = entry.value

        if entry.deprecated:
            self._warn_deprecated(identifier, entry)

        return value

    def has(self, identifier: Hashable) -> bool:
        """检查标识符是否已注册"""
        return identifier in self._dependencies

    def identifiers(self) -> List[Hashable]:
        """获取所有已注册的标识符"""
        with self._lock:
            return list(self._dependencies.keys())

    def clear(self) -> None:
        """清空注册表（主要用于测试）"""
        with self._lock:
            self._dependencies.clear()
        logger.debug("Registry cleared")

    def get_registry_info(self) -> dict:
        """
        获取注册表信息

        Returns:
            注册表状态信息
        """
        with self._lock:
            entries = list(self._dependencies.items())

        return {
            'total_dependencies': len(entries),
            'dependencies': {
                describe_identifier(identifier): {
                    'type': 'factory' if entry.is_factory else type(entry.value).__name__,
                    'deprecated': entry.deprecated,
                    'constructed': not entry.is_factory
                }
                for identifier, entry in entries
            }
        }

    def _construct(self, identifier: Hashable, entry: DependencyEntry) -> Any:
        """调用工厂条目的factory，每个条目只执行一次"""
        with entry.lock:
            if entry.factory is not None:
                logger.debug(f"Constructing lazy dependency: {describe_identifier(identifier)}")
                entry.value = entry.factory()
                entry.factory = None
            return entry.value

    def _warn_deprecated(self, identifier: Hashable, entry: DependencyEntry) -> None:
        with entry.lock:
            if not entry.deprecated:
                return
            # 只提示一次
            entry.deprecated = False

        logger.log(
            self.settings.deprecation_level_no,
            f"Dependency {describe_identifier(identifier)} is deprecated"
        )

    def __len__(self) -> int:
        return len(self._dependencies)

    def __contains__(self, identifier: Hashable) -> bool:
        return self.has(identifier)


def get_registry(registry: Optional[Registry] = None) -> Registry:
    """返回传入的注册表，未传入时返回共享注册表"""
    if registry is not None:
        return registry
    return Registry.get_instance()
