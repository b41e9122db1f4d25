# wampkit

Building blocks for the callee side of a WAMP (Web Application Messaging
Protocol) client in Python. wampkit has no runtime dependencies and provides:

- `wampkit.arguments` – `value_for_key(mapping, key)` and
  `value_for_key_or(mapping, key, fallback)` for looking up string keys in
  keyword arguments and detail dictionaries. Both raise `TypeError` when given
  something that is not a mapping; `value_for_key` raises `KeyError` when the
  key is absent.
- `wampkit.challenge` – `Challenge`, a dataclass for the authentication
  challenge a router sends: `authmethod`, `challenge`, and for salted
  WAMP-CRA `salt`, `iterations` and `keylen` (both -1 when not given); for
  cryptosign a `channel_id`.
- `wampkit.payload` – `InvocationPayload`, read access to the positional
  arguments, keyword arguments and call details of an incoming invocation:
  `argument`, `arguments`, `number_of_arguments`, `kw_argument`,
  `kw_argument_or`, `kw_arguments`, `number_of_kw_arguments`, `detail`,
  `detail_or`, `details`, `uri` and `progressive_results_expected`.
  `set_details` reads the `"procedure"` and `"receive_progress"` details.
- `wampkit.invocation` – `Invocation` and the `MessageType` codes. An
  invocation answers its caller exactly once with `result`, `error` or
  `empty_result`; a second answer raises `RuntimeError`. `progress` sends an
  intermediate result when the caller set `receive_progress`, and is
  silently dropped otherwise.

## Installing

```
pip install .
```

Python 3.10 or later is required.

## Example: answering an invocation

Replies are built as plain lists (`[YIELD, request_id, options, arguments,
kw_arguments]`, or an `ERROR` message) and handed to the `send_result`
callback.

```python
from wampkit.invocation import Invocation

sent = []

invocation = Invocation(
    request_id=7,
    send_result=sent.append,
    arguments=[23, 777],
    details={"procedure": "com.examples.calculator.add2"},
)

a, b = invocation.argument(0), invocation.argument(1)
invocation.result([a + b])

assert sent == [[70, 7, {}, [800]]]
assert not invocation.sendable()
```

An invocation that has not yet answered sends an empty result when it is
closed, with `close()` or by leaving a `with` block, so the caller is never
left waiting:

```python
with Invocation(request_id=8, send_result=sent.append) as invocation:
    pass

assert sent[-1] == [70, 8, {}]
```

## What wampkit does not do

wampkit does not connect to a router, join a realm, run a session or
serialize messages to the wire. It has no transport, no caller, publisher or
subscriber side, and no bookkeeping of outstanding requests; the
`send_result` callback of an `Invocation` is where a session of your own
takes the finished reply and sends it.

## Running the tests

```
pip install .[test]
pytest
```