"""Argument containers and keyword lookup helpers for WAMP payloads."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, TypeVar

T = TypeVar("T")

#: Positional arguments of a WAMP message.
Arguments = list
#: Keyword arguments of a WAMP message.
KwArguments = dict

EMPTY_ARGUMENTS: tuple = ()
EMPTY_KW_ARGUMENTS: Mapping[str, Any] = MappingProxyType({})


def _require_mapping(mapping: Any) -> Mapping:
    if not isinstance(mapping, Mapping):
        raise TypeError(f"expected a map, got {type(mapping).__name__}")
    return mapping


def value_for_key(mapping: Mapping, key: str) -> Any:
    """Return the value stored under the string ``key``.

    Raises TypeError if ``mapping`` is not a map and KeyError if the key is
    absent.
    """
    _require_mapping(mapping)
    if isinstance(key, str) and key in mapping:
        return mapping[key]
    raise KeyError(f"{key} keyword argument doesn't exist")


def value_for_key_or(mapping: Mapping, key: str, fallback: T) -> Any | T:
    """Return the value stored under ``key``, or ``fallback`` if absent.

    Raises TypeError if ``mapping`` is not a map.
    """
    _require_mapping(mapping)
    if isinstance(key, str) and key in mapping:
        return mapping[key]
    return fallback