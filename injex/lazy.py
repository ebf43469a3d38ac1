"""
延迟值单元
Lazy Value Cell

作者: mrkingu
日期: 2025-06-24
描述: 首次读取时计算、之后永久固定的值单元
"""

import threading
from typing import Any, Callable

_EMPTY = object()


class LazyCell:
    """
    延迟值单元

    为空直到第一次成功计算，之后值固定不变。
    计算抛出异常时保持为空，下次读取会重新计算。
    """

    __slots__ = ("_value", "_lock")

    def __init__(self):
        self._value = _EMPTY
        self._lock = threading.RLock()

    @property
    def is_set(self) -> bool:
        return self._value is not _EMPTY

    def get(self, compute: Callable[[], Any]) -> Any:
        """
        获取值，首次调用时执行compute

        Args:
            compute: 无参计算函数

        Returns:
            固定的值
        """
        value = self._value
        if value is not _EMPTY:
            return value

        with self._lock:
            if self._value is _EMPTY:
                self._value = compute()
            return self._value

    def __repr__(self) -> str:
        if self.is_set:
            return f"LazyCell({self._value!r})"
        return "LazyCell(<empty>)"
