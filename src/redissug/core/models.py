"""
redissug Core Domain Models

Pydantic models for suggestion records and query options.
"""

from pydantic import BaseModel, ConfigDict


class Suggestion(BaseModel):
    """A single auto-complete entry as returned by FT.SUGGET.

    ``payload`` is empty when the entry was stored without one or when the
    query did not ask for payloads. The server-held score is never exposed.
    """

    model_config = ConfigDict(frozen=True)

    text: str
    payload: str = ""


class SugGetOptions(BaseModel):
    """Modifiers for a suggestion lookup."""

    model_config = ConfigDict(frozen=True)

    fuzzy: bool = False  # Levenshtein distance 1 instead of exact prefix
    with_payloads: bool = False
