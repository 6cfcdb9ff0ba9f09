"""
redissug Errors

Exceptions raised by the suggestion client itself. Errors coming from the
Redis driver (``redis.exceptions.RedisError`` and friends) are never wrapped.
"""


class SuggestionError(Exception):
    """Base class for errors raised by redissug."""


class NoValue(SuggestionError, LookupError):
    """The dictionary key or the requested entry does not exist.

    This is an expected outcome rather than a fault, so it carries no detail
    beyond the message.
    """


class ReplyDecodeError(SuggestionError, ValueError):
    """A server reply did not have the shape the command promises."""
