"""配置存储的异常层次。

所有异常都继承自 ConfigError，同时继承对应的内置异常，
调用方既可以统一捕获 ConfigError，也可以按 OSError / ValueError / TypeError 分别处理。
"""

from __future__ import annotations

from typing import Optional

from optstore.values import ValueKind


class ConfigError(Exception):
    """optstore 所有异常的基类。"""


class ConfigIOError(ConfigError, OSError):
    """配置文件无法读取或写入（不存在、无权限、是目录等）。"""

    def __init__(self, path: str, message: str) -> None:
        super().__init__(f"{message}: {path}")
        self.path = path


class ConfigDecodeError(ConfigError, ValueError):
    """JSON 格式错误、编码错误，或顶层不是对象。"""

    def __init__(self, path: str, message: str) -> None:
        super().__init__(f"{message}: {path}")
        self.path = path


class TypeMismatchError(ConfigError, TypeError):
    """类型化读取时 key 不存在或存储值类型不匹配。

    actual 为 None 表示 key 不存在。
    """

    def __init__(self, key: str, expected: ValueKind, actual: Optional[ValueKind]) -> None:
        if actual is None:
            message = f"配置项 {key!r} 不存在，期望类型 {expected.value}"
        else:
            message = f"配置项 {key!r} 类型为 {actual.value}，期望类型 {expected.value}"
        super().__init__(message)
        self.key = key
        self.expected = expected
        self.actual = actual


__all__ = [
    "ConfigError",
    "ConfigIOError",
    "ConfigDecodeError",
    "TypeMismatchError",
]
