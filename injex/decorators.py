"""
注入装饰器实现
Injection Decorators Implementation

作者: mrkingu
日期: 2025-06-24
描述: 提供inject属性注入、register_class类注册、register_instance延迟实例注册
"""

import inspect
from typing import Any, Callable, Hashable, List, Optional, Type, Union

from .exceptions import (
    DependencyResolutionError, InitializationError, InjectorError,
    NoInstantiationMethodError, RegistryError, IdentifierRequiredError
)
from .lazy import LazyCell
from .registry import Registry, get_registry
from .types import InitDelegate, infer_identifier


class InjectedAttribute:
    """
    注入属性描述符

    第一次读取时从注册表解析依赖（可选地经过初始化函数转换或实例化），
    结果保存在实例自身的LazyCell中，之后的读取直接返回该值。
    属性只读，赋值会抛出AttributeError。
    """

    def __init__(
        self,
        identifier: Optional[Hashable] = None,
        init: Union[InitDelegate, bool, None] = None,
        necessary: bool = True,
        registry: Optional[Registry] = None
    ):
        if init is not None and not isinstance(init, bool) and not callable(init):
            raise TypeError(f"init must be callable or True, got {type(init).__name__}")

        self.identifier = identifier
        self.init = None if init is False else init
        self.necessary = necessary
        self.registry = registry
        self.name: Optional[str] = None
        self._cell_key = f"__injex_cell_{id(self)}"

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name
        self._cell_key = f"__injex_cell_{name}"

    def __get__(self, instance: Any, owner: Optional[type] = None) -> Any:
        if instance is None:
            return self

        cell = vars(instance).get(self._cell_key)
        if cell is None:
            cell = vars(instance).setdefault(self._cell_key, LazyCell())
        return cell.get(self._evaluate)

    def __set__(self, instance: Any, value: Any) -> None:
        raise AttributeError(f"Injected attribute '{self.name}' is read-only")

    def __delete__(self, instance: Any) -> None:
        raise AttributeError(f"Injected attribute '{self.name}' cannot be deleted")

    def resolve_identifier(self) -> Hashable:
        """
        获取依赖标识符，未显式指定时使用属性名

        Raises:
            IdentifierRequiredError: 既没有标识符也没有属性名
        """
        if self.identifier is not None:
            return self.identifier
        if not self.name:
            raise IdentifierRequiredError()
        return self.name

    def _evaluate(self) -> Any:
        try:
            identifier = self.resolve_identifier()
        except IdentifierRequiredError:
            if self.necessary:
                raise
            return None

        # 延迟实例的构造异常原样抛给首次访问者，不受necessary影响
        dependency = get_registry(self.registry).resolve(identifier, self.necessary)
        return self._apply(identifier, dependency)

    def _apply(self, identifier: Hashable, dependency: Any) -> Any:
        try:
            if dependency is None:
                if self.necessary:
                    raise DependencyResolutionError(identifier)
                return None

            if self.init is None:
                return dependency

            if self.init is True:
                if not inspect.isclass(dependency):
                    raise NoInstantiationMethodError(identifier)
                return dependency()

            try:
                return self.init(dependency)
            except Exception as e:
                raise InitializationError(identifier, e) from e

        except RegistryError:
            if self.necessary:
                raise
            return None
        except Exception as e:
            if self.necessary:
                raise InjectorError(identifier, e) from e
            return None

    def __repr__(self) -> str:
        return (f"InjectedAttribute(name={self.name!r}, identifier={self.identifier!r}, "
                f"necessary={self.necessary})")


def inject(
    identifier: Optional[Hashable] = None,
    init: Union[InitDelegate, bool, None] = None,
    necessary: bool = True,
    registry: Optional[Registry] = None
) -> InjectedAttribute:
    """
    属性注入 - 延迟从注册表获取依赖

    Args:
        identifier: 依赖标识符，如果不提供则使用属性名
        init: 初始化函数（接收依赖，返回属性值），或True表示无参实例化依赖
        necessary: 是否必需依赖，默认True；非必需依赖的任何失败都得到None
        registry: 使用的注册表，默认使用共享注册表

    Returns:
        属性描述符

    使用示例:
        class PlayerService:
            repository = inject("IPlayerRepository")
            logger = inject("ILoggerFactory", lambda f: f.get_logger("player"), necessary=False)
            cache = inject("CacheClass", init=True)
    """
    return InjectedAttribute(identifier, init, necessary, registry)


def register_class(
    identifier: Optional[Hashable] = None,
    deprecated: bool = False,
    registry: Optional[Registry] = None
) -> Callable[[Type], Type]:
    """
    类注册装饰器 - 将类本身（而非实例）注册到注册表

    Args:
        identifier: 标识符，如果不提供则使用类名
        deprecated: 是否已弃用
        registry: 使用的注册表，默认使用共享注册表

    使用示例:
        @register_class("IPlayerRepository")
        class PlayerRepository:
            pass
    """
    def decorator(cls: Type) -> Type:
        name = infer_identifier(identifier, cls)
        get_registry(registry).register(name, cls, deprecated)
        return cls

    return decorator


def register_instance(
    identifier: Optional[Hashable] = None,
    init: Optional[Callable[[Type], Any]] = None,
    registry: Optional[Registry] = None
) -> Callable[[Type], Type]:
    """
    实例注册装饰器 - 注册类的单例实例，首次解析时才创建

    Args:
        identifier: 标识符，如果不提供则使用类名
        init: 初始化函数，接收类并返回实例，默认无参构造
        registry: 使用的注册表，默认使用共享注册表

    使用示例:
        @register_instance("IConfigService", lambda cls: cls.from_env())
        class ConfigService:
            pass
    """
    def decorator(cls: Type) -> Type:
        name = infer_identifier(identifier, cls)

        def factory() -> Any:
            if init is not None:
                return init(cls)
            return cls()

        get_registry(registry).register_factory(name, factory)
        return cls

    return decorator


def scan_injections(cls: Type) -> List[dict]:
    """
    扫描类中的注入属性

    Args:
        cls: 要扫描的类

    Returns:
        注入属性信息列表
    """
    injections = []

    for klass in reversed(cls.__mro__):
        for attr_name, attr in vars(klass).items():
            if not isinstance(attr, InjectedAttribute):
                continue
            injections = [item for item in injections if item['property_name'] != attr_name]
            injections.append({
                'identifier': attr.identifier if attr.identifier is not None else attr.name,
                'necessary': attr.necessary,
                'init': attr.init,
                'property_name': attr_name
            })

    return injections
