"""
依赖标识符
Dependency Identifiers

作者: mrkingu
日期: 2025-06-24
描述: 标识符类型定义，以及从类名/属性名推断标识符的辅助函数
"""

from typing import Any, Callable, Hashable, Optional

from .exceptions import IdentifierRequiredError

# 标识符可以是任意可哈希值，通常为字符串或Symbol
Identifier = Hashable

# 初始化函数：接收解析出的依赖，返回注入值
InitDelegate = Callable[[Any], Any]


class Symbol:
    """
    唯一标识符

    与字符串不同，两个描述相同的Symbol互不相等，只与自身相等
    """

    __slots__ = ("description",)

    def __init__(self, description: str = ""):
        self.description = description

    def __repr__(self) -> str:
        return f"Symbol({self.description})"

    def __str__(self) -> str:
        return self.__repr__()


def infer_identifier(identifier: Optional[Identifier], target: Any) -> Identifier:
    """
    确定最终使用的标识符

    Args:
        identifier: 显式给出的标识符，可以为None
        target: 被装饰的类或函数，用于推断名称

    Returns:
        标识符

    Raises:
        IdentifierRequiredError: 未给出标识符且目标没有可用名称
    """
    if identifier is not None:
        return identifier

    name = getattr(target, "__name__", None)
    if not isinstance(name, str) or not name or name == "<lambda>":
        raise IdentifierRequiredError()
    return name

