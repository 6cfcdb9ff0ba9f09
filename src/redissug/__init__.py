"""
redissug

Async client for RediSearch auto-suggest dictionaries.
"""

__version__ = "0.1.0"

from redissug.client import CommandExecutor, RedisSuggestionClient, decode_suggestions
from redissug.core import NoValue, ReplyDecodeError, SugGetOptions, Suggestion, SuggestionError

__all__ = [
    "__version__",
    "CommandExecutor",
    "RedisSuggestionClient",
    "decode_suggestions",
    "Suggestion",
    "SugGetOptions",
    "SuggestionError",
    "NoValue",
    "ReplyDecodeError",
]
