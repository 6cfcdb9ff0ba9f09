"""
Pytest Configuration and Fixtures

Shared fixtures for unit and integration tests.
"""

from typing import Any

import pytest

from redissug.client import RedisSuggestionClient
from redissug.config import Settings


# ══════════════════════════════════════════════════════════════
# Settings Fixtures
# ══════════════════════════════════════════════════════════════


@pytest.fixture
def test_settings() -> Settings:
    """Test settings pointing at a scratch Redis database."""
    return Settings(
        app_env="development",
        debug=True,
        redis_url="redis://localhost:6379/15",
        suggest_default_max=5,
    )


# ══════════════════════════════════════════════════════════════
# Fake Executor
# ══════════════════════════════════════════════════════════════


class FakeSuggestionServer:
    """In-memory stand-in for the FT.SUG* commands of a Redis Stack server.

    Matching is exact prefix only and ordering is by score, highest first,
    ties broken by insertion order. Every call is recorded in ``calls``.
    """

    def __init__(self) -> None:
        self.dictionaries: dict[str, dict[str, list[Any]]] = {}
        self.calls: list[tuple[Any, ...]] = []

    async def execute_command(self, *args: Any, **options: Any) -> Any:
        self.calls.append(args)
        command, rest = args[0].upper(), list(args[1:])
        handler = getattr(self, "_" + command.replace(".", "_").lower())
        return handler(*rest)

    def _ft_sugadd(self, key: str, text: str, score: float, *flags: Any) -> int:
        entries = self.dictionaries.setdefault(key, {})
        incr = "INCR" in flags
        payload = None
        if "PAYLOAD" in flags:
            payload = flags[flags.index("PAYLOAD") + 1]

        if text in entries:
            entry = entries[text]
            entry[0] = entry[0] + float(score) if incr else float(score)
            if payload is not None:
                entry[1] = payload
        else:
            entries[text] = [float(score), payload]
        return len(entries)

    def _ft_sugget(self, key: str, prefix: str, *flags: Any) -> list[Any] | None:
        entries = self.dictionaries.get(key)
        if entries is None:
            return None

        limit = 5
        if "MAX" in flags:
            limit = int(flags[flags.index("MAX") + 1])

        matched = [(text, entry) for text, entry in entries.items() if text.startswith(prefix)]
        matched.sort(key=lambda item: item[1][0], reverse=True)

        reply: list[Any] = []
        for text, (_, payload) in matched[:limit]:
            reply.append(text)
            if "WITHPAYLOADS" in flags:
                reply.append(payload)
        return reply

    def _ft_sugdel(self, key: str, text: str) -> int:
        entries = self.dictionaries.get(key, {})
        if text not in entries:
            return 0
        del entries[text]
        if not entries:
            del self.dictionaries[key]
        return 1

    def _ft_suglen(self, key: str) -> int:
        return len(self.dictionaries.get(key, {}))

    def _del(self, *keys: str) -> int:
        return sum(1 for key in keys if self.dictionaries.pop(key, None) is not None)


@pytest.fixture
def fake_server() -> FakeSuggestionServer:
    """Empty in-memory suggestion server."""
    return FakeSuggestionServer()


@pytest.fixture
def suggestion_client(fake_server: FakeSuggestionServer) -> RedisSuggestionClient:
    """Suggestion client wired to the in-memory server."""
    return RedisSuggestionClient(fake_server)
