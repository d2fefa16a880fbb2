"""optstore: process-wide JSON configuration store with typed accessors."""

from optstore.config import (
    ConfigStore,
    default_store,
    get,
    get_bool,
    get_bool_default,
    get_default,
    get_float,
    get_float_default,
    get_int,
    get_int_default,
    get_string,
    get_string_default,
    has,
    load_file,
    reset,
    save_file,
    set_value,
    snapshot,
)
from optstore.errors import ConfigDecodeError, ConfigError, ConfigIOError, TypeMismatchError
from optstore.logging_config import setup_logging
from optstore.values import ValueKind, deep_equal, kind_of

__version__ = "0.1.0"

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
    "ConfigError",
    "ConfigIOError",
    "ConfigDecodeError",
    "TypeMismatchError",
    "ValueKind",
    "kind_of",
    "deep_equal",
    "setup_logging",
]
