"""进程级配置存储：以 JSON 文件为来源。

要求：
1. load_file 只做合并（同名 key 覆盖，其余 key 保留），不会整体替换现有配置。
2. 解码完全成功后才写入映射；读取或解码失败时现有配置保持不变。
3. 类型化读取（get_int / get_bool / get_string / get_float）在 key 不存在或类型不符时
   统一抛出 TypeMismatchError，带默认值的版本只在 key 不存在时返回默认值。

不支持环境变量覆盖、多来源分层或热加载。

既可以直接使用模块级函数（操作进程内唯一的 default_store），
也可以自行构造 ConfigStore 并显式传递给调用方。
"""

from __future__ import annotations

import contextlib
import copy
import json
import logging
import os
import tempfile
import threading
from typing import Any, Dict, Iterator, Optional, Tuple, Union

from optstore.errors import ConfigDecodeError, ConfigIOError, TypeMismatchError
from optstore.values import ValueKind, kind_of

logger = logging.getLogger(__name__)

PathType = Union[str, "os.PathLike[str]"]


def _read_file(path: str) -> Dict[str, Any]:
    """读取并完整解码配置文件，顶层必须是 JSON 对象。"""
    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except UnicodeDecodeError as e:
        raise ConfigDecodeError(path, "配置文件不是合法的 UTF-8") from e
    except OSError as e:
        raise ConfigIOError(path, f"无法读取配置文件 ({e.strerror or e})") from e

    try:
        data = json.loads(text)
    except (ValueError, RecursionError) as e:
        raise ConfigDecodeError(path, f"配置文件不是合法的 JSON ({e})") from e

    if not isinstance(data, dict):
        raise ConfigDecodeError(path, f"配置文件顶层必须是对象，实际为 {kind_of(data).value}")
    return data


class ConfigStore:
    """带类型化读取的键值配置映射。

    所有读写都在同一把锁内完成；文件读取与 JSON 解码在锁外进行。
    """

    def __init__(self, initial: Optional[Dict[str, Any]] = None) -> None:
        self._lock = threading.RLock()
        self._options: Dict[str, Any] = copy.deepcopy(initial) if initial else {}

    # --- loading ---
    def load_file(self, path: PathType) -> None:
        """读取 JSON 文件并把顶层 key 合并进当前配置。"""
        path = os.fspath(path)
        try:
            data = _read_file(path)
        except (ConfigIOError, ConfigDecodeError) as e:
            logger.error("加载配置失败: %s", e)
            raise

        with self._lock:
            self._options.update(data)
        logger.info("已加载配置文件 %s (%d 项)", path, len(data))

    def save_file(self, path: PathType) -> None:
        """把当前配置写成 JSON 文件（先写临时文件再替换）。"""
        path = os.fspath(path)
        # 浅拷贝：值可能无法 deepcopy（如锁对象）
        with self._lock:
            contents = dict(self._options)
            try:
                text = json.dumps(contents, ensure_ascii=False, indent=2)
            except (TypeError, ValueError, RecursionError) as e:
                logger.error("配置无法序列化为 JSON: %s", e)
                raise ConfigDecodeError(path, f"配置无法序列化为 JSON ({e})") from e

        tmp = None
        try:
            fd, tmp = tempfile.mkstemp(
                dir=os.path.dirname(os.path.abspath(path)),
                prefix=os.path.basename(path) + ".",
                suffix=".tmp",
            )
            with open(fd, "w", encoding="utf-8") as f:
                f.write(text)
            os.replace(tmp, path)
        except OSError as e:
            if tmp is not None:
                with contextlib.suppress(OSError):
                    os.remove(tmp)
            logger.error("写入配置文件失败 %s: %s", path, e)
            raise ConfigIOError(path, f"无法写入配置文件 ({e.strerror or e})") from e
        logger.info("已保存配置文件 %s (%d 项)", path, len(contents))

    def reset(self) -> None:
        with self._lock:
            self._options.clear()
        logger.debug("配置已清空")

    # --- untyped access ---
    def get(self, key: str) -> Tuple[Any, bool]:
        """返回 (value, found)，不做任何类型转换。"""
        with self._lock:
            if key in self._options:
                return self._options[key], True
            return None, False

    def get_default(self, key: str, default: Any = None) -> Any:
        with self._lock:
            return self._options.get(key, default)

    def has(self, key: str) -> bool:
        with self._lock:
            return key in self._options

    def set_value(self, key: str, value: Any) -> None:
        """动态设置（仅进程内，不会写回文件）。"""
        with self._lock:
            self._options[key] = value

    def snapshot(self) -> Dict[str, Any]:
        """当前配置的深拷贝。"""
        with self._lock:
            return copy.deepcopy(self._options)

    # --- typed access ---
    def _typed(self, key: str, expected: ValueKind, *accepted: ValueKind) -> Any:
        with self._lock:
            if key not in self._options:
                raise TypeMismatchError(key, expected, None)
            value = self._options[key]
        actual = kind_of(value)
        if actual is not expected and actual not in accepted:
            raise TypeMismatchError(key, expected, actual)
        return value

    def _typed_default(self, key: str, default: Any, expected: ValueKind, *accepted: ValueKind) -> Any:
        with self._lock:
            if not self.has(key):
                return default
            return self._typed(key, expected, *accepted)

    def get_int(self, key: str) -> int:
        return self._typed(key, ValueKind.INT)

    def get_int_default(self, key: str, default: int) -> int:
        return self._typed_default(key, default, ValueKind.INT)

    def get_bool(self, key: str) -> bool:
        return self._typed(key, ValueKind.BOOL)

    def get_bool_default(self, key: str, default: bool) -> bool:
        return self._typed_default(key, default, ValueKind.BOOL)

    def get_string(self, key: str) -> str:
        return self._typed(key, ValueKind.STRING)

    def get_string_default(self, key: str, default: str) -> str:
        return self._typed_default(key, default, ValueKind.STRING)

    def get_float(self, key: str) -> float:
        # JSON 写入方不区分 1 与 1.0，整数也接受
        value = self._typed(key, ValueKind.FLOAT, ValueKind.INT)
        try:
            return float(value)
        except OverflowError:
            # 超出 float 范围的大整数
            raise TypeMismatchError(key, ValueKind.FLOAT, ValueKind.INT) from None

    def get_float_default(self, key: str, default: float) -> float:
        with self._lock:
            if not self.has(key):
                return default
            return self.get_float(key)

    # --- container protocol ---
    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._options

    def __len__(self) -> int:
        with self._lock:
            return len(self._options)

    def __iter__(self) -> Iterator[str]:
        with self._lock:
            return iter(list(self._options))

    def __getitem__(self, key: str) -> Any:
        with self._lock:
            return self._options[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self.set_value(key, value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({len(self)} keys)"


# 进程内唯一的默认实例
default_store = ConfigStore()


def load_file(path: PathType) -> None:
    default_store.load_file(path)


def save_file(path: PathType) -> None:
    default_store.save_file(path)


def reset() -> None:
    default_store.reset()


def get(key: str) -> Tuple[Any, bool]:
    return default_store.get(key)


def get_default(key: str, default: Any = None) -> Any:
    return default_store.get_default(key, default)


def has(key: str) -> bool:
    return default_store.has(key)


def set_value(key: str, value: Any) -> None:
    default_store.set_value(key, value)


def snapshot() -> Dict[str, Any]:
    return default_store.snapshot()


def get_int(key: str) -> int:
    return default_store.get_int(key)


def get_int_default(key: str, default: int) -> int:
    return default_store.get_int_default(key, default)


def get_bool(key: str) -> bool:
    return default_store.get_bool(key)


def get_bool_default(key: str, default: bool) -> bool:
    return default_store.get_bool_default(key, default)


def get_string(key: str) -> str:
    return default_store.get_string(key)


def get_string_default(key: str, default: str) -> str:
    return default_store.get_string_default(key, default)


def get_float(key: str) -> float:
    return default_store.get_float(key)


def get_float_default(key: str, default: float) -> float:
    return default_store.get_float_default(key, default)


__all__ = [
    "ConfigStore",
    "default_store",
    "load_file",
    "save_file",
    "reset",
    "get",
    "get_default",
    "has",
    "set_value",
    "snapshot",
    "get_int",
    "get_int_default",
    "get_bool",
    "get_bool_default",
    "get_string",
    "get_string_default",
    "get_float",
    "get_float_default",
]
