"""Read access to the payload of an incoming procedure invocation."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, TypeVar

from wampkit.arguments import (
    EMPTY_ARGUMENTS,
    EMPTY_KW_ARGUMENTS,
    value_for_key,
    value_for_key_or,
)

T = TypeVar("T")

_MISSING = object()


def _is_list(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


class InvocationPayload:
    """Positional arguments, keyword arguments and call details of an invocation.

    ``details`` is ``None`` until set; lookups on details then raise TypeError.
    """

    def __init__(
        self,
        arguments: Sequence[Any] | None = None,
        kw_arguments: Mapping[str, Any] | None = None,
        details: Mapping[str, Any] | None = None,
    ) -> None:
        self._arguments: Any = EMPTY_ARGUMENTS if arguments is None else arguments
        self._kw_arguments: Any = EMPTY_KW_ARGUMENTS if kw_arguments is None else kw_arguments
        self._details: Any = None
        self._uri = ""
        self._progressive_results_expected = False
        if details is not None:
            self.set_details(details)

    def uri(self) -> str:
        """The procedure URI, as used by prefix and wildcard registrations."""
        return self._uri

    def number_of_arguments(self) -> int:
        """The number of positional arguments."""
        return len(self._arguments) if _is_list(self._arguments) else 0

    def number_of_kw_arguments(self) -> int:
        """The number of keyword arguments."""
        return len(self._kw_arguments) if isinstance(self._kw_arguments, Mapping) else 0

    def argument(self, index: int) -> Any:
        """The positional argument at ``index``; IndexError if there is none."""
        if not _is_list(self._arguments) or index < 0 or len(self._arguments) <= index:
            raise IndexError(f"no argument at index {index}")
        return self._arguments[index]

    def arguments(self) -> list[Any]:
        """All positional arguments as a new list."""
        if not _is_list(self._arguments):
            raise TypeError("positional arguments are not a list")
        return list(self._arguments)

    def kw_argument(self, key: str) -> Any:
        """The keyword argument ``key``; KeyError if it was not passed."""
        return value_for_key(self._kw_arguments, key)

    def kw_argument_or(self, key: str, fallback: T) -> Any | T:
        """The keyword argument ``key``, or ``fallback`` if it was not passed."""
        return value_for_key_or(self._kw_arguments, key, fallback)

    def kw_arguments(self) -> dict[str, Any]:
        """All keyword arguments as a new dict."""
        if not isinstance(self._kw_arguments, Mapping):
            raise TypeError("keyword arguments are not a map")
        return dict(self._kw_arguments)

    def detail(self, key: str) -> Any:
        """The call detail ``key``; KeyError if it is absent."""
        value = value_for_key_or(self._details, key, _MISSING)
        if value is _MISSING:
            raise KeyError(f"{key} call detail doesn't exist")
        return value

    def detail_or(self, key: str, fallback: T) -> Any | T:
        """The call detail ``key``, or ``fallback`` if it is absent."""
        return value_for_key_or(self._details, key, fallback)

    def details(self) -> dict[str, Any]:
        """All call details as a new dict."""
        if not isinstance(self._details, Mapping):
            raise TypeError("call details are not a map")
        return dict(self._details)

    def progressive_results_expected(self) -> bool:
        """Whether the caller asked for progressive results."""
        return self._progressive_results_expected

    def set_details(self, details: Mapping[str, Any]) -> None:
        """Store the call details and read "procedure" and "receive_progress"."""
        uri = value_for_key_or(details, "procedure", "")
        if not isinstance(uri, str):
            raise TypeError("procedure detail is not a string")
        progressive = value_for_key_or(details, "receive_progress", False)
        if not isinstance(progressive, bool):
            raise TypeError("receive_progress detail is not a boolean")
        self._uri = uri
        self._progressive_results_expected = progressive
        self._details = details