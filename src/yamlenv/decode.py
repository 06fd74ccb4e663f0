from __future__ import annotations

import dataclasses
import types
from collections.abc import Mapping
from typing import Any, Dict, Optional, Type, TypeVar, Union, get_args, get_origin, get_type_hints

import yaml

from .exceptions import ConfigDecodeError

T = TypeVar("T")

_NoneType = type(None)


def _is_plain(target: Any) -> bool:
    return target is None or target is Any or target is dict or target is Dict


def _build(tp: Any, value: Any) -> Any:
    if tp is Any or isinstance(tp, TypeVar):
        return value

    origin = get_origin(tp)
    args = get_args(tp)

    if origin is Union or origin is getattr(types, "UnionType", Union):
        if value is None and _NoneType in args:
            return None
        candidates = [a for a in args if a is not _NoneType]
        if len(candidates) == 1:
            return _build(candidates[0], value)
        return value

    if origin is list:
        if not isinstance(value, list):
            raise TypeError(f"expected a sequence, got {type(value).__name__}")
        item_type = args[0] if args else Any
        return [_build(item_type, v) for v in value]

    if origin is dict:
        if not isinstance(value, Mapping):
            raise TypeError(f"expected a mapping, got {type(value).__name__}")
        value_type = args[1] if len(args) == 2 else Any
        return {k: _build(value_type, v) for k, v in value.items()}

    if isinstance(tp, type) and dataclasses.is_dataclass(tp):
        return _build_dataclass(tp, value)

    # scalars are kept as the YAML parser typed them
    return value


def _build_dataclass(cls: type, value: Any) -> Any:
    if value is None:
        value = {}
    if not isinstance(value, Mapping):
        raise TypeError(f"expected a mapping for {cls.__name__}, got {type(value).__name__}")

    hints = get_type_hints(cls)
    kwargs = {}
    for field in dataclasses.fields(cls):
        if not field.init or field.name not in value:
            continue
        kwargs[field.name] = _build(hints.get(field.name, Any), value[field.name])
    # unknown keys are ignored, missing required fields fail in the constructor
    return cls(**kwargs)


def decode(content: Union[str, bytes], target: Optional[Type[T]] = None, path: Optional[str] = None) -> T:
    """Parse a YAML document and build ``target`` from it.

    Args:
        content: Resolved document text.
        target: ``None``/``dict`` for the plain parsed object, a dataclass or
            a generic such as ``List[X]``/``Dict[str, X]`` to build
            recursively, or any callable accepting the parsed mapping as
            keyword arguments.
        path: Source path, attached to errors for diagnostics.

    Raises:
        ConfigDecodeError: malformed YAML or a value the target rejects.
    """
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigDecodeError(f"Invalid YAML document: {e}", path, target, e) from e

    if data is None:
        data = {}

    if _is_plain(target):
        return data

    try:
        if (isinstance(target, type) and dataclasses.is_dataclass(target)) or get_origin(target) is not None:
            return _build(target, data)
        if isinstance(data, Mapping):
            return target(**data)
        return target(data)
    except (TypeError, ValueError, NameError) as e:
        name = getattr(target, "__name__", repr(target))
        raise ConfigDecodeError(f"Cannot decode document into {name}: {e}", path, target, e) from e
