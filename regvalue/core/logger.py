# SPDX-License-Identifier: LGPL-3.0-or-later
# regvalue/core/logger.py
"""
Logging for regvalue.

One named logger ("regvalue") with either an emoji line formatter or NDJSON.
Structured fields travel on the record as `ctx` and are rendered as k=v pairs
(or a nested JSON object). Stores and the codec bind their own fields with
Log.bind(), so every line says which store, key and value it is about.

Verbosity:
  (default) WARNING   -v INFO   -vv DEBUG   -vvv TRACE   -q ERROR
"""
from __future__ import annotations

import datetime as _dt
import json
import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Mapping, MutableMapping, Optional, TextIO, Tuple

from termcolor import colored as _colored

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

# levelname -> (emoji, color)
_LEVELS: Dict[str, Tuple[str, str]] = {
    "TRACE": ("🧬", "cyan"),
    "DEBUG": ("🔍", "blue"),
    "INFO": ("✅", "green"),
    "WARNING": ("⚠️", "yellow"),
    "ERROR": ("💥", "red"),
    "CRITICAL": ("🧨", "red"),
}

Ctx = Mapping[str, Any]


def c(
    text: str,
    color: Optional[str] = None,
    attrs: Optional[List[str]] = None,
    *,
    enable: bool = True,
) -> str:
    """Colorize text when enabled."""
    if not enable or not color:
        return text
    return _colored(text, color=color, attrs=attrs or [])


def _stream_caps(stream: TextIO) -> Tuple[bool, bool]:
    """(is a tty, can print emoji) for an output stream."""
    isatty = getattr(stream, "isatty", None)
    tty = bool(isatty()) if callable(isatty) else False
    try:
        "✅".encode(getattr(stream, "encoding", None) or "utf-8")
        emoji = True
    except (LookupError, UnicodeEncodeError):
        emoji = False
    return tty, emoji


def _field(v: Any, limit: int = 160) -> str:
    if isinstance(v, (bytes, bytearray)):
        s = bytes(v).hex()
    else:
        s = str(v)
    s = s.replace("\n", "\\n")
    return s if len(s) <= limit else s[: limit - 1] + "…"


class ContextLoggerAdapter(logging.LoggerAdapter):
    """
    Logger that stamps a fixed set of fields onto every record.

    Per-call fields go in `extra={"ctx": {...}}` and win over bound ones.
    """

    def __init__(self, logger: logging.Logger, ctx: Optional[Ctx] = None):
        super().__init__(logger, {"ctx": dict(ctx or {})})

    @property
    def ctx(self) -> Dict[str, Any]:
        return self.extra["ctx"]  # type: ignore[index]

    def process(self, msg: Any, kwargs: MutableMapping[str, Any]) -> Tuple[Any, MutableMapping[str, Any]]:
        extra = dict(kwargs.get("extra") or {})
        extra["ctx"] = {**self.ctx, **(extra.get("ctx") or {})}
        kwargs["extra"] = extra
        return msg, kwargs

    def bind(self, **ctx: Any) -> "ContextLoggerAdapter":
        return ContextLoggerAdapter(self.logger, {**self.ctx, **ctx})


@dataclass(frozen=True)
class LogStyle:
    color: bool = True
    unicode: bool = True
    # milliseconds, logger name and module:line
    detail: bool = False
    utc: bool = False


class EmojiFormatter(logging.Formatter):
    """`12:00:01 ✅ INFO     message key=value ...` lines for humans."""

    def __init__(self, style: LogStyle):
        super().__init__()
        self.style = style

    def _clock(self, created: float) -> str:
        tz = _dt.timezone.utc if self.style.utc else None
        ts = _dt.datetime.fromtimestamp(created, tz=tz)
        return ts.strftime("%H:%M:%S.%f")[:-3] if self.style.detail else ts.strftime("%H:%M:%S")

    def format(self, record: logging.LogRecord) -> str:
        emoji, color = _LEVELS.get(record.levelname, ("•", "white"))
        if not self.style.unicode:
            emoji = "·"
        on = self.style.color

        msg = record.getMessage()
        if record.levelno >= logging.WARNING:
            msg = c(msg, color, ["bold"], enable=on)
        level = c(f"{record.levelname:<8}", color, enable=on)

        where = f" [{record.name} {record.module}:{record.lineno}]" if self.style.detail else ""
        ctx = getattr(record, "ctx", None) or {}
        fields = "".join(f" {k}={_field(v)}" for k, v in sorted(ctx.items()))

        line = f"{self._clock(record.created)} {emoji} {level}{where} {msg}{fields}"
        if record.exc_info:
            tb = "\n".join("  " + ln for ln in self.formatException(record.exc_info).splitlines())
            line += "\n" + c(tb, "red", enable=on)
        return line


class JsonFormatter(logging.Formatter):
    """One JSON object per line."""

    def __init__(self, *, utc: bool = True):
        super().__init__()
        self.utc = utc

    def format(self, record: logging.LogRecord) -> str:
        tz = _dt.timezone.utc if self.utc else None
        obj: Dict[str, Any] = {
            "ts": _dt.datetime.fromtimestamp(record.created, tz=tz).isoformat(timespec="milliseconds"),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
            "module": record.module,
            "lineno": record.lineno,
        }
        ctx = getattr(record, "ctx", None)
        if ctx:
            obj["ctx"] = {str(k): v if isinstance(v, (int, float, bool, type(None))) else _field(v) for k, v in ctx.items()}
        if record.exc_info and record.exc_info[0] is not None:
            obj["exc_type"] = record.exc_info[0].__name__
            obj["traceback"] = self.formatException(record.exc_info)
        return json.dumps(obj, ensure_ascii=False)


class Log:
    @staticmethod
    def _level_from_flags(verbose: int, quiet: int) -> int:
        if quiet >= 1:
            return logging.ERROR
        return {0: logging.WARNING, 1: logging.INFO, 2: logging.DEBUG}.get(verbose, TRACE)

    @staticmethod
    def bind(logger: logging.Logger, **ctx: Any) -> ContextLoggerAdapter:
        """Attach fields to every record logged through the returned adapter."""
        if isinstance(logger, ContextLoggerAdapter):
            return logger.bind(**ctx)
        return ContextLoggerAdapter(logger, ctx)

    @staticmethod
    def trace(logger: Any, msg: str, *args: Any, **ctx: Any) -> None:
        logger.log(TRACE, msg, *args, extra={"ctx": ctx} if ctx else None)

    @staticmethod
    def _formatter(json_logs: bool, style: LogStyle) -> logging.Formatter:
        return JsonFormatter(utc=style.utc) if json_logs else EmojiFormatter(style)

    @staticmethod
    def setup(
        verbose: int = 0,
        log_file: Optional[str] = None,
        *,
        quiet: int = 0,
        color: Optional[bool] = None,
        utc: bool = False,
        logger_name: str = "regvalue",
        json_logs: bool = False,
        stream: Optional[TextIO] = None,
    ) -> logging.Logger:
        """
        (Re)configure the regvalue logger: stderr handler plus optional file.

        Calling it again replaces the handlers, so the CLI can set up early
        and reconfigure once the config files are merged.
        """
        stream = stream or sys.stderr
        level = Log._level_from_flags(verbose, quiet)
        tty, emoji = _stream_caps(stream)

        logger = logging.getLogger(logger_name)
        logger.propagate = False
        logger.setLevel(level)
        for h in list(logger.handlers):
            logger.removeHandler(h)
            h.close()

        console = LogStyle(color=tty if color is None else color, unicode=emoji, detail=verbose >= 3, utc=utc)
        sh = logging.StreamHandler(stream)
        sh.setFormatter(Log._formatter(json_logs, console))
        logger.addHandler(sh)

        if log_file:
            fp = Path(log_file).expanduser().resolve()
            fp.parent.mkdir(parents=True, exist_ok=True)
            fh = logging.FileHandler(fp, encoding="utf-8")
            fh.setFormatter(Log._formatter(json_logs, LogStyle(color=False, unicode=emoji, detail=True, utc=utc)))
            logger.addHandler(fh)

        logger.debug("Logger initialized (level=%s, pid=%s)", logging.getLevelName(level), os.getpid())
        return logger
