from __future__ import annotations

import os
import re
from dataclasses import dataclass
from typing import List, Mapping, Optional, Union

from .logger import get_logger

logger = get_logger(__name__)

# ${NAME} or ${NAME:default}; ASCII word characters only
_ENV_PATTERN = re.compile(r"\$\{(\w+)(?::([^}]*))?\}", re.ASCII)
_ENV_PATTERN_BYTES = re.compile(rb"\$\{(\w+)(?::([^}]*))?\}")


@dataclass(frozen=True)
class Placeholder:
    name: str
    default: Optional[str] = None

    def resolve(self, environ: Optional[Mapping[str, str]] = None) -> str:
        value = _lookup(self.name, environ)
        if value is not None:
            return value
        return self.default if self.default is not None else ""


def _pattern_for(content: Union[str, bytes]) -> re.Pattern:
    return _ENV_PATTERN_BYTES if isinstance(content, bytes) else _ENV_PATTERN


def _lookup(name: str, environ: Optional[Mapping[str, str]]) -> Optional[str]:
    env = os.environ if environ is None else environ
    return env[name] if name in env else None


def find_placeholders(content: Union[str, bytes]) -> List[Placeholder]:
    """Return the placeholders of ``content`` in document order."""
    found = []
    for match in _pattern_for(content).finditer(content):
        name, default = match.group(1), match.group(2)
        if isinstance(content, bytes):
            name = name.decode("ascii")
            default = default.decode("utf-8", "surrogateescape") if default is not None else None
        found.append(Placeholder(name, default))
    return found


def resolve_env(content: Union[str, bytes], environ: Optional[Mapping[str, str]] = None) -> Union[str, bytes]:
    """Substitute ``${NAME}`` and ``${NAME:default}`` placeholders in ``content``.

    A variable that is set, even to an empty string, always wins over the
    default. An unset variable yields the default, or an empty string when
    the placeholder has none. Replacement text is never rescanned, and text
    that does not match the placeholder syntax is left as is.

    Bytes are substituted as bytes: defaults are copied verbatim and live
    values are encoded with ``os.fsencode``, so undecodable bytes from a
    POSIX environment round-trip unchanged.

    Args:
        content: Raw document text, as ``bytes`` or ``str``.
        environ: Mapping to look names up in; defaults to ``os.environ``
            read at call time.

    Returns:
        A new object of the same type as ``content``.
    """
    is_bytes = isinstance(content, bytes)
    count = 0

    def repl(match: re.Match) -> Union[str, bytes]:
        nonlocal count
        count += 1
        name, default = match.group(1), match.group(2)
        value = _lookup(name.decode("ascii") if is_bytes else name, environ)
        if value is None:
            if default is not None:
                return default
            return b"" if is_bytes else ""
        if is_bytes:
            return value if isinstance(value, bytes) else os.fsencode(value)
        return value

    resolved = _pattern_for(content).sub(repl, content)
    logger.debug(f"Resolved {count} environment placeholder(s)")
    return resolved
