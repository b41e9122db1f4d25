"""Building blocks for WAMP callees: invocations, invocation payloads, challenges and argument helpers."""

__version__ = "0.1.0"

__all__ = ["arguments", "challenge", "invocation", "payload"]