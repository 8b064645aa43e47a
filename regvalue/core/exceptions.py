# SPDX-License-Identifier: LGPL-3.0-or-later
# regvalue/core/exceptions.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


def _safe_int(x: Any, default: int = 1) -> int:
    try:
        return int(x)
    except Exception:
        return default


def _clamp_exit_code(code: int) -> int:
    # Exit codes are 0..255.
    if code < 0:
        return 1
    if code > 255:
        return 255
    return code


def _one_line(s: str, limit: int = 600) -> str:
    s = (s or "").strip().replace("\r", " ").replace("\n", " ")
    s = " ".join(s.split())
    return s if len(s) <= limit else (s[: limit - 3] + "...")


def _format_context_compact(ctx: Dict[str, Any]) -> str:
    return ", ".join(f"{k}={ctx.get(k)!r}" for k in sorted(ctx.keys()))


@dataclass(eq=False)
class RegValueError(Exception):
    """
    Base project error with:
      - stable fields for reporting/JSON
      - readable __str__ (what users see)
      - an exit code the CLI can honor
    """
    code: int = 1
    msg: str = "error"
    cause: Optional[BaseException] = None
    context: Optional[Dict[str, Any]] = None

    def __post_init__(self) -> None:
        self.code = _clamp_exit_code(_safe_int(self.code, default=1))
        self.msg = _one_line(self.msg) or self.__class__.__name__
        if self.context is None:
            self.context = {}
        super().__init__(self.msg)
        self.args = (self.msg,)

    def with_context(self, **ctx: Any) -> "RegValueError":
        if self.context is None:
            self.context = {}
        self.context.update(ctx)
        return self

    def user_message(self, *, include_context: bool = False, include_cause: bool = False) -> str:
        """
        Human-friendly message for CLI output/logs.
        """
        parts = [self.msg or self.__class__.__name__]

        if include_context and self.context:
            parts.append(f"[{_one_line(_format_context_compact(self.context))}]")

        if include_cause and self.cause is not None:
            parts.append(f"(cause: {type(self.cause).__name__}: {_one_line(str(self.cause))})")

        return " ".join(parts)

    def __str__(self) -> str:
        return self.user_message(include_context=False, include_cause=False)

    def to_dict(self, *, include_cause: bool = False) -> Dict[str, Any]:
        d: Dict[str, Any] = {
            "type": self.__class__.__name__,
            "code": self.code,
            "message": self.msg,
            "context": self.context or {},
        }
        if include_cause and self.cause is not None:
            d["cause"] = {"type": type(self.cause).__name__, "message": _one_line(str(self.cause))}
        return d


# ---------------------------------------------------------------------------
# Codec errors
# ---------------------------------------------------------------------------


class UnsupportedType(RegValueError):
    """A type tag (or type name) has no known variant mapping."""

    def __init__(self, msg: str = "unsupported registry type", **kw: Any) -> None:
        kw.setdefault("code", 3)
        super().__init__(msg=msg, **kw)


class MalformedValue(RegValueError):
    """Payload is inconsistent with what its type tag requires."""

    def __init__(self, msg: str = "malformed registry value", **kw: Any) -> None:
        kw.setdefault("code", 4)
        super().__init__(msg=msg, **kw)


class TypeMismatch(RegValueError):
    """An adapter was asked to project a value into an incompatible type."""

    def __init__(self, msg: str = "registry type mismatch", **kw: Any) -> None:
        kw.setdefault("code", 5)
        super().__init__(msg=msg, **kw)


# ---------------------------------------------------------------------------
# Key-store boundary errors
# ---------------------------------------------------------------------------


class KeyStoreError(RegValueError):
    """
    Key-store operation failed.
    `os_code` carries the platform error number when one is known.
    """

    def __init__(self, msg: str = "key-store error", os_code: Optional[int] = None, **kw: Any) -> None:
        kw.setdefault("code", 10)
        super().__init__(msg=msg, **kw)
        self.os_code = os_code
        if os_code is not None:
            self.with_context(os_code=os_code)


class ValueNotFound(KeyStoreError):
    def __init__(self, msg: str = "registry value not found", **kw: Any) -> None:
        kw.setdefault("code", 11)
        # ERROR_FILE_NOT_FOUND
        kw.setdefault("os_code", 2)
        super().__init__(msg=msg, **kw)


class AccessDenied(KeyStoreError):
    def __init__(self, msg: str = "access denied", **kw: Any) -> None:
        kw.setdefault("code", 12)
        # ERROR_ACCESS_DENIED
        kw.setdefault("os_code", 5)
        super().__init__(msg=msg, **kw)


class ConfigError(RegValueError):
    """Configuration file could not be loaded."""

    def __init__(self, msg: str = "invalid configuration", **kw: Any) -> None:
        kw.setdefault("code", 2)
        super().__init__(msg=msg, **kw)


class UsageError(RegValueError):
    """Command line arguments that parse but cannot be acted on."""

    def __init__(self, msg: str = "invalid usage", **kw: Any) -> None:
        kw.setdefault("code", 2)
        super().__init__(msg=msg, **kw)


def format_exception_for_cli(e: BaseException, *, verbose: int = 0) -> str:
    """
    One-liner output for CLI.

    verbose=0: just message
    verbose=1: message + compact context (if any)
    verbose>=2: message + context + cause
    """
    if isinstance(e, RegValueError):
        return e.user_message(
            include_context=(verbose >= 1),
            include_cause=(verbose >= 2),
        )

    if verbose >= 2:
        return f"{type(e).__name__}: {_one_line(str(e))}"
    return _one_line(str(e)) or type(e).__name__
