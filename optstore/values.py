"""存储值的类型分类。

配置值是动态类型的（来自 JSON 解码或进程内直接写入）。这里把它们归为有限的几类，
类型化读取只需要比较 ValueKind，不需要在各处重复 isinstance 判断。

注意 bool 是 int 的子类，分类时必须先判断 bool。
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ValueKind(str, Enum):
    NULL = "null"
    BOOL = "bool"
    INT = "int"
    FLOAT = "float"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"
    OTHER = "other"


def kind_of(value: Any) -> ValueKind:
    """返回 value 所属的 ValueKind。"""
    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOL
    if isinstance(value, int):
        return ValueKind.INT
    if isinstance(value, float):
        return ValueKind.FLOAT
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, (list, tuple)):
        return ValueKind.ARRAY
    if isinstance(value, dict):
        return ValueKind.OBJECT
    return ValueKind.OTHER


def deep_equal(expected: Any, actual: Any) -> bool:
    """按结构递归比较，每一层的类型分类都必须一致。

    与 ``==`` 的区别：``True`` 与 ``1``、``1`` 与 ``1.0`` 不视为相等。
    OTHER 类型的值退回到普通的 ``==`` 比较。
    """
    kind = kind_of(expected)
    if kind is not kind_of(actual):
        return False

    if kind is ValueKind.OBJECT:
        if set(expected) != set(actual):
            return False
        return all(deep_equal(expected[key], actual[key]) for key in expected)

    if kind is ValueKind.ARRAY:
        if len(expected) != len(actual):
            return False
        return all(deep_equal(e, a) for e, a in zip(expected, actual))

    return expected == actual


__all__ = ["ValueKind", "kind_of", "deep_equal"]
