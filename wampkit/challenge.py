"""The authentication challenge sent by a router."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Challenge:
    """A challenge received while joining a realm.

    ``salt``, ``iterations`` and ``keylen`` are used by "wampcra" when the
    secret is stored as a derived key; ``channel_id`` is used by
    "cryptosign". ``iterations`` and ``keylen`` are -1 when not given.
    """

    authmethod: str
    challenge: str = ""
    salt: str = ""
    iterations: int = -1
    keylen: int = -1
    channel_id: str = ""