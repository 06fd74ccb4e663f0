"""Exceptions raised while loading configuration files."""

from pathlib import Path
from typing import Any, Dict, Optional, Union


class YamlEnvError(Exception):
    """Base exception for all configuration loading errors.

    ``path`` is the resolved path the loader worked on, so callers can report
    exactly where resolution looked.
    """

    def __init__(
        self,
        message: str,
        path: Optional[Union[str, Path]] = None,
        error_code: str = None,
        details: Dict[str, Any] = None,
        cause: Optional[BaseException] = None,
    ):
        self.message = message
        self.path = str(path) if path is not None else None
        self.error_code = error_code or "UNKNOWN_ERROR"
        self.details = details or {}
        self.cause = cause
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/serialization."""
        return {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "path": self.path,
            "details": self.details,
            "cause": repr(self.cause) if self.cause is not None else None,
        }


class ConfigReadError(YamlEnvError):
    """Raised when the configuration file cannot be read."""

    def __init__(self, message: str, path: Union[str, Path], cause: Optional[BaseException] = None):
        details = {"operation": "read"}
        if isinstance(cause, OSError) and cause.errno is not None:
            details["errno"] = cause.errno
        super().__init__(message, path, "CONFIG_READ_ERROR", details, cause)


class ConfigDecodeError(YamlEnvError):
    """Raised when the resolved document cannot be decoded into the target."""

    def __init__(
        self,
        message: str,
        path: Optional[Union[str, Path]] = None,
        target: Any = None,
        cause: Optional[BaseException] = None,
    ):
        details = {"operation": "decode"}
        if target is not None:
            details["target"] = getattr(target, "__name__", repr(target))
        mark = getattr(cause, "problem_mark", None)
        if mark is not None:
            # yaml marks are zero based
            details["line"] = mark.line + 1
            details["column"] = mark.column + 1
        super().__init__(message, path, "CONFIG_DECODE_ERROR", details, cause)
