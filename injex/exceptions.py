"""
注册表异常定义
Registry Exception Definitions

作者: mrkingu
日期: 2025-06-24
描述: 定义依赖注册、解析与注入过程中使用的异常类
"""

from typing import Any, Hashable, Optional


def describe_identifier(identifier: Any) -> str:
    if isinstance(identifier, str):
        return identifier
    return repr(identifier)


class RegistryError(Exception):
    """注册表基础异常"""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class DependencyResolutionError(RegistryError):
    """依赖未找到异常"""

    def __init__(self, identifier: Hashable):
        self.identifier = identifier
        super().__init__(f"Dependency {describe_identifier(identifier)} not found.")


class IdentifierRequiredError(RegistryError):
    """无法推断标识符异常（匿名类或匿名属性）"""

    def __init__(self):
        self.identifier = None
        super().__init__(
            "An identifier is required: the target has no name to infer it from."
        )


class NoInstantiationMethodError(RegistryError):
    """依赖不可实例化异常"""

    def __init__(self, identifier: Hashable):
        self.identifier = identifier
        super().__init__(
            f"Dependency {describe_identifier(identifier)} has no constructor and cannot be instantiated."
        )


class InitializationError(RegistryError):
    """初始化函数执行失败异常"""

    def __init__(self, identifier: Hashable, cause: Optional[BaseException] = None):
        self.identifier = identifier
        self.cause = cause
        message = f"Initializer for dependency {describe_identifier(identifier)} failed"
        if cause is not None:
            message += f": {cause}"
        super().__init__(message)
        self.__cause__ = cause


class InjectorError(RegistryError):
    """注入过程中的其他异常"""

    def __init__(self, identifier: Hashable, cause: Optional[BaseException] = None):
        self.identifier = identifier
        self.cause = cause
        message = f"Injection of dependency {describe_identifier(identifier)} failed"
        if cause is not None:
            message += f": {cause}"
        super().__init__(message)
        self.__cause__ = cause
