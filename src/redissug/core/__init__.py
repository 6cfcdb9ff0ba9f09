"""Core domain types."""

from .errors import NoValue, ReplyDecodeError, SuggestionError
from .models import SugGetOptions, Suggestion

__all__ = [
    "Suggestion",
    "SugGetOptions",
    "SuggestionError",
    "NoValue",
    "ReplyDecodeError",
]
