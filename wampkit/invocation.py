"""An incoming procedure invocation and the replies sent back for it."""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from enum import Enum, IntEnum
from typing import Any

from wampkit.payload import InvocationPayload

#: Callback that hands a finished reply message to the session.
SendResult = Callable[[list], None]


class MessageType(IntEnum):
    """WAMP message type codes."""

    HELLO = 1
    WELCOME = 2
    ABORT = 3
    CHALLENGE = 4
    AUTHENTICATE = 5
    GOODBYE = 6
    ERROR = 8
    PUBLISH = 16
    PUBLISHED = 17
    SUBSCRIBE = 32
    SUBSCRIBED = 33
    UNSUBSCRIBE = 34
    UNSUBSCRIBED = 35
    EVENT = 36
    CALL = 48
    CANCEL = 49
    RESULT = 50
    REGISTER = 64
    REGISTERED = 65
    UNREGISTER = 66
    UNREGISTERED = 67
    INVOCATION = 68
    INTERRUPT = 69
    YIELD = 70


class _ResultKind(Enum):
    FINAL = "final"
    INTERMEDIARY = "intermediary"


class Invocation(InvocationPayload):
    """A call of a registered procedure, answered once with a result or an error.

    Progressive results may be sent before the final reply when the caller
    asked for them; otherwise they are silently discarded. Closing an
    invocation that has not been answered sends an empty result.
    """

    def __init__(
        self,
        request_id: int = 0,
        send_result: SendResult | None = None,
        arguments: Sequence[Any] | None = None,
        kw_arguments: Mapping[str, Any] | None = None,
        details: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(arguments, kw_arguments, details)
        self.request_id = request_id
        self._send_result: SendResult | None = send_result

    def __enter__(self) -> Invocation:
        return self

    def __exit__(self, exc_type: Any, exc: Any, tb: Any) -> None:
        self.close()

    def sendable(self) -> bool:
        """Whether a reply can still be sent."""
        return self._send_result is not None

    def close(self) -> None:
        """Send an empty result if no final reply has been sent yet."""
        if self.sendable():
            self.empty_result()

    def _require_sendable(self) -> SendResult:
        if self._send_result is None:
            raise RuntimeError(
                "tried to call result() or error() but wamp_invocation "
                "is not sendable (double call?)"
            )
        return self._send_result

    def _finish(self, send: SendResult, message: list) -> None:
        send(message)
        self._send_result = None

    def empty_result(self) -> None:
        """Reply with an empty result."""
        send = self._require_sendable()
        self._finish(send, [int(MessageType.YIELD), self.request_id, {}])

    def _send(
        self,
        arguments: Sequence[Any],
        kw_arguments: Mapping[str, Any] | None,
        kind: _ResultKind,
    ) -> None:
        send = self._require_sendable()
        intermediary = kind is _ResultKind.INTERMEDIARY
        if intermediary and not self.progressive_results_expected():
            return
        options = {"progress": True} if intermediary else {}
        message = [int(MessageType.YIELD), self.request_id, options, list(arguments)]
        if kw_arguments is not None:
            message.append(dict(kw_arguments))
        if intermediary:
            send(message)
        else:
            self._finish(send, message)

    def progress(
        self, arguments: Sequence[Any], kw_arguments: Mapping[str, Any] | None = None
    ) -> None:
        """Send a progressive result; dropped if the caller did not ask for one."""
        self._send(arguments, kw_arguments, _ResultKind.INTERMEDIARY)

    def result(
        self, arguments: Sequence[Any], kw_arguments: Mapping[str, Any] | None = None
    ) -> None:
        """Reply with the final result."""
        self._send(arguments, kw_arguments, _ResultKind.FINAL)

    def error(
        self,
        error_uri: str,
        arguments: Sequence[Any] | None = None,
        kw_arguments: Mapping[str, Any] | None = None,
    ) -> None:
        """Reply with an error URI and optional positional and keyword arguments."""
        send = self._require_sendable()
        message: list = [
            int(MessageType.ERROR),
            int(MessageType.INVOCATION),
            self.request_id,
            {},
            error_uri,
        ]
        if arguments is not None or kw_arguments is not None:
            message.append(list(arguments) if arguments is not None else [])
        if kw_arguments is not None:
            message.append(dict(kw_arguments))
        self._finish(send, message)