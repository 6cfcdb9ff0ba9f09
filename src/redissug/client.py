"""
Suggestion Client

Typed access to RediSearch auto-complete dictionaries:

- FT.SUGADD / FT.SUGGET / FT.SUGDEL / FT.SUGLEN
- DEL for dropping whole dictionaries

The client keeps no state of its own. Connection pooling, retries and
protocol handling belong to the injected executor, normally a
``redis.asyncio.Redis`` instance.
"""

import asyncio
from typing import Any, Protocol, Sequence

import structlog

from redissug.core import NoValue, ReplyDecodeError, SugGetOptions, Suggestion

logger = structlog.get_logger()


SUGADD_COMMAND = "FT.SUGADD"
SUGGET_COMMAND = "FT.SUGGET"
SUGDEL_COMMAND = "FT.SUGDEL"
SUGLEN_COMMAND = "FT.SUGLEN"
DEL_COMMAND = "DEL"


class CommandExecutor(Protocol):
    """Anything that can run a raw Redis command and return its reply."""

    async def execute_command(self, *args: Any, **options: Any) -> Any: ...


# ══════════════════════════════════════════════════════════════
# Reply Decoding
# ══════════════════════════════════════════════════════════════


def _as_text(value: Any, position: int, allow_nil: bool = False) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bytes):
        return value.decode("utf-8")
    if value is None and allow_nil:
        # Entries stored without a payload come back as nil
        return ""
    raise ReplyDecodeError(
        f"Unexpected {type(value).__name__} at position {position} of FT.SUGGET reply"
    )


def decode_suggestions(reply: Sequence[Any], with_payloads: bool) -> list[Suggestion]:
    """
    Decode a flat FT.SUGGET reply into suggestion records.

    Args:
        reply: Flat reply array, in server order
        with_payloads: Whether elements alternate ``text, payload``

    Returns:
        Suggestions in the order the server returned them

    Raises:
        ReplyDecodeError: If the reply is not an array, holds a non-string
            element, or has an odd length when payloads were requested
    """
    if not isinstance(reply, (list, tuple)):
        raise ReplyDecodeError(f"Expected array reply, got {type(reply).__name__}")

    if not with_payloads:
        return [Suggestion(text=_as_text(item, i)) for i, item in enumerate(reply)]

    if len(reply) % 2:
        raise ReplyDecodeError(
            f"Expected text/payload pairs, got {len(reply)} elements"
        )

    texts = reply[0::2]
    payloads = reply[1::2]
    return [
        Suggestion(
            text=_as_text(text, 2 * i),
            payload=_as_text(payload, 2 * i + 1, allow_nil=True),
        )
        for i, (text, payload) in enumerate(zip(texts, payloads))
    ]


# ══════════════════════════════════════════════════════════════
# Client
# ══════════════════════════════════════════════════════════════


class RedisSuggestionClient:
    """
    Auto-complete dictionary operations over a Redis command executor.

    Every method performs exactly one round trip. ``timeout`` bounds that
    round trip in seconds; cancelling the calling task cancels it as well.
    """

    def __init__(self, executor: CommandExecutor):
        self.executor = executor

    async def _execute(self, *args: Any, timeout: float | None = None) -> Any:
        call = self.executor.execute_command(*args)
        if timeout is None:
            return await call
        return await asyncio.wait_for(call, timeout)

    async def add(
        self,
        key: str,
        text: str,
        score: float,
        incr: bool = False,
        payload: str = "",
        *,
        timeout: float | None = None,
    ) -> int:
        """
        Add a suggestion to a dictionary.

        With ``incr`` the score is added to the existing weight instead of
        replacing it. An empty payload sends no PAYLOAD clause.

        Returns:
            Size of the dictionary after the add
        """
        args: list[Any] = [SUGADD_COMMAND, key, text, score]

        if incr:
            args.append("INCR")

        if payload:
            args.extend(["PAYLOAD", payload])

        size = int(await self._execute(*args, timeout=timeout))
        logger.debug("Suggestion added", key=key, text=text, incr=incr, size=size)
        return size

    async def get(
        self,
        key: str,
        prefix: str,
        max_results: int = 0,
        options: SugGetOptions | None = None,
        *,
        timeout: float | None = None,
    ) -> list[Suggestion]:
        """
        Get suggestions for a prefix, highest score first.

        Scores may not match the ones given to :meth:`add`, so they are not
        returned. ``max_results <= 0`` leaves the limit to the server default.

        Raises:
            NoValue: If the dictionary does not exist
            ReplyDecodeError: If the reply cannot be decoded
        """
        opts = options or SugGetOptions()
        args: list[Any] = [SUGGET_COMMAND, key, prefix]

        if opts.fuzzy:
            args.append("FUZZY")
        if opts.with_payloads:
            args.append("WITHPAYLOADS")
        if max_results > 0:
            args.extend(["MAX", max_results])

        reply = await self._execute(*args, timeout=timeout)
        if reply is None:
            logger.debug("Suggestion dictionary not found", key=key)
            raise NoValue(f"No suggestion dictionary at {key!r}")

        return decode_suggestions(reply, opts.with_payloads)

    async def delete(self, key: str, text: str, *, timeout: float | None = None) -> None:
        """
        Delete a suggestion from a dictionary.

        Raises:
            NoValue: If nothing was deleted, whether the key or the entry is absent
        """
        removed = int(await self._execute(SUGDEL_COMMAND, key, text, timeout=timeout))
        if removed == 0:
            logger.debug("Suggestion not found", key=key, text=text)
            raise NoValue(f"No suggestion {text!r} in {key!r}")

        logger.debug("Suggestion deleted", key=key, text=text)

    async def length(self, key: str, *, timeout: float | None = None) -> int:
        """Size of a dictionary; 0 when it does not exist."""
        return int(await self._execute(SUGLEN_COMMAND, key, timeout=timeout))

    async def delete_all(self, *keys: str, timeout: float | None = None) -> None:
        """Drop whole dictionaries."""
        if not keys:
            return

        await self._execute(DEL_COMMAND, *keys, timeout=timeout)
        logger.debug("Suggestion dictionaries deleted", keys=list(keys))


__all__ = [
    "CommandExecutor",
    "RedisSuggestionClient",
    "decode_suggestions",
]
