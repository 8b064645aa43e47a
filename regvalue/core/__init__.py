# regvalue/core/__init__.py
from .exceptions import (
    AccessDenied,
    ConfigError,
    KeyStoreError,
    MalformedValue,
    RegValueError,
    TypeMismatch,
    UnsupportedType,
    UsageError,
    ValueNotFound,
)

__all__ = [
    "RegValueError",
    "UnsupportedType",
    "MalformedValue",
    "TypeMismatch",
    "KeyStoreError",
    "ValueNotFound",
    "AccessDenied",
    "ConfigError",
    "UsageError",
]
