"""Structured, tagged logging.

Loggers are created per service (``Log.create({"service": "lsp.binary"})``)
and write key/value, JSON or pretty lines to stderr and/or a log file.
Nothing is written until ``Log.configure`` enables a sink, so an embedding
host sees no output unless it asks for it.
"""

import json
import sys
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, TextIO

from ..core.global_paths import GlobalPath


class LogLevel(str, Enum):
    """Log severity levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"

    @classmethod
    def parse(cls, value: str | None) -> "LogLevel":
        if value is None:
            return cls.INFO
        text = value.strip().upper()
        if text == "WARNING":
            return cls.WARN
        try:
            return cls(text)
        except ValueError:
            raise ValueError(f"invalid log level: {value}") from None


class LogFormat(str, Enum):
    """Log output format."""

    KV = "kv"
    JSON = "json"
    PRETTY = "pretty"

    @classmethod
    def parse(cls, value: str | None) -> "LogFormat":
        if value is None:
            return cls.KV
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise ValueError(f"invalid log format: {value}") from None


LEVEL_PRIORITY = {
    LogLevel.DEBUG: 0,
    LogLevel.INFO: 1,
    LogLevel.WARN: 2,
    LogLevel.ERROR: 3,
}


@dataclass
class LogConfig:
    """Global logging configuration."""

    level: LogLevel = LogLevel.INFO
    format: LogFormat = LogFormat.KV
    console: bool = False
    file: bool = False
    log_file_path: Optional[str] = None
    _file_handle: Optional[TextIO] = None


_config = LogConfig()
_last_timestamp = time.time()


class Logger:
    """Structured logger with a fixed set of tags."""

    def __init__(self, tags: Optional[Dict[str, Any]] = None):
        self.tags = tags or {}

    def _enabled(self, level: LogLevel) -> bool:
        if not (_config.console or _config.file):
            return False
        return LEVEL_PRIORITY[level] >= LEVEL_PRIORITY[_config.level]

    def _normalize(self, value: Any) -> Any:
        if isinstance(value, Exception):
            text = str(value) or type(value).__name__
            if value.__cause__ is not None:
                text += " Caused by: " + str(self._normalize(value.__cause__))
            return text
        if value is None or isinstance(value, (dict, list, tuple, int, float, bool)):
            return value
        return str(value)

    def _value(self, value: Any) -> str:
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (dict, list, tuple)):
            return json.dumps(value, ensure_ascii=False, separators=(",", ":"))
        text = str(value)
        if text == "" or "=" in text or any(ch.isspace() for ch in text):
            return json.dumps(text, ensure_ascii=False)
        return text

    def _render(self, level: LogLevel, message: Any, extra: Optional[Dict[str, Any]]) -> str:
        global _last_timestamp

        now = time.time()
        delta_ms = int((now - _last_timestamp) * 1000)
        _last_timestamp = now

        stamp = datetime.now(timezone.utc).isoformat(timespec="seconds")
        fields = {
            key: self._normalize(value)
            for key, value in {**self.tags, **(extra or {})}.items()
            if value is not None
        }
        msg = self._normalize(message)

        if _config.format == LogFormat.JSON:
            payload = {"time": stamp, "delta_ms": delta_ms, "level": level.value.lower(), "msg": msg, **fields}
            return json.dumps(payload, ensure_ascii=False, separators=(",", ":")) + "\n"

        pairs = " ".join(f"{key}={self._value(value)}" for key, value in fields.items())
        if _config.format == LogFormat.PRETTY:
            suffix = f" ({pairs})" if pairs else ""
            return f"{stamp} {level.value} {msg or ''}{suffix} +{delta_ms}ms\n"

        parts = [stamp, f"+{delta_ms}ms", f"level={level.value.lower()}", f"msg={self._value(msg)}", pairs]
        return " ".join(part for part in parts if part) + "\n"

    def _emit(self, level: LogLevel, message: Any, extra: Optional[Dict[str, Any]]) -> None:
        if not self._enabled(level):
            return
        line = self._render(level, message, extra)
        if _config.console:
            sys.stderr.write(line)
            sys.stderr.flush()
        if _config.file and _config._file_handle:
            _config._file_handle.write(line)
            _config._file_handle.flush()

    def debug(self, message: Any = None, extra: Optional[Dict[str, Any]] = None) -> None:
        self._emit(LogLevel.DEBUG, message, extra)

    def info(self, message: Any = None, extra: Optional[Dict[str, Any]] = None) -> None:
        self._emit(LogLevel.INFO, message, extra)

    def warn(self, message: Any = None, extra: Optional[Dict[str, Any]] = None) -> None:
        self._emit(LogLevel.WARN, message, extra)

    def error(self, message: Any = None, extra: Optional[Dict[str, Any]] = None) -> None:
        self._emit(LogLevel.ERROR, message, extra)


class Log:
    """Global logging interface and factory."""

    _loggers: Dict[str, Logger] = {}

    @classmethod
    def create(cls, tags: Optional[Dict[str, Any]] = None) -> Logger:
        """Create or retrieve a logger.

        Loggers tagged with a string ``service`` are cached by service name.
        """
        tags = tags or {}
        service = tags.get("service")
        if not isinstance(service, str) or not service:
            return Logger(tags=tags)
        if service not in cls._loggers:
            cls._loggers[service] = Logger(tags=tags)
        return cls._loggers[service]

    @classmethod
    def configure(
        cls,
        *,
        level: LogLevel | None = None,
        format: LogFormat | None = None,
        console: bool | None = None,
        file: bool | None = None,
    ) -> None:
        """Configure logging sinks and output format.

        Args:
            level: Minimum level to output
            format: Line format
            console: Write to stderr
            file: Write to a new timestamped file under ``GlobalPath.log()``
        """
        if level is not None:
            _config.level = level
        if format is not None:
            _config.format = format
        if console is not None:
            _config.console = console
        if file is not None:
            _config.file = file

        cls.close()
        if not _config.file:
            _config.log_file_path = None
            return

        log_dir = Path(GlobalPath.log())
        log_dir.mkdir(parents=True, exist_ok=True)
        stamp = datetime.now().isoformat().split(".")[0].replace(":", "")
        log_path = log_dir / f"{stamp}.log"

        _config.log_file_path = str(log_path)
        _config._file_handle = log_path.open("a", encoding="utf-8")

    @classmethod
    def file(cls) -> str:
        """Get the current log file path."""
        return _config.log_file_path or ""

    @classmethod
    def reset(cls) -> None:
        """Close sinks and restore the silent default configuration."""
        cls.close()
        _config.level = LogLevel.INFO
        _config.format = LogFormat.KV
        _config.console = False
        _config.file = False
        _config.log_file_path = None

    @classmethod
    def close(cls) -> None:
        """Close the log file handle if open."""
        if _config._file_handle:
            _config._file_handle.close()
            _config._file_handle = None
