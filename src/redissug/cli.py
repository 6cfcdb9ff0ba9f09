"""
redissug CLI

Command-line interface for RediSearch suggestion dictionaries.
"""

import asyncio
import json
import logging
import sys
from typing import Any, Awaitable, Callable

import click
from redis.exceptions import RedisError

from redissug import __version__
from redissug.client import RedisSuggestionClient
from redissug.config import settings
from redissug.core import NoValue, SugGetOptions
from redissug.db.redis import close_redis, get_suggestion_client, init_redis
from redissug.log import configure_logging


def _run(call: Callable[[RedisSuggestionClient], Awaitable[Any]]) -> Any:
    """Open the shared connection, run one client call, close the connection."""

    async def runner() -> Any:
        try:
            await init_redis()
            client = await get_suggestion_client()
            return await call(client)
        finally:
            await close_redis()

    try:
        return asyncio.run(runner())
    except (RedisError, asyncio.TimeoutError) as e:
        click.echo(f"✗ Redis error: {str(e) or type(e).__name__}", err=True)
        sys.exit(1)


def _masked_url(url: Any) -> str:
    """Render a Redis URL with its password hidden."""
    text = str(url)
    if url.password:
        return text.replace(f":{url.password}@", ":***@", 1)
    return text


# ══════════════════════════════════════════════════════════════
# CLI Group
# ══════════════════════════════════════════════════════════════


@click.group()
@click.version_option(version=__version__, prog_name="redissug")
@click.option("--debug/--no-debug", default=False, help="Enable debug logging")
@click.option(
    "--timeout",
    type=float,
    default=None,
    help="Per-command deadline in seconds",
)
@click.pass_context
def cli(ctx: click.Context, debug: bool, timeout: float | None) -> None:
    """redissug - RediSearch auto-suggest dictionaries from the shell."""
    configure_logging(logging.DEBUG if debug or settings.debug else settings.log_level)

    ctx.ensure_object(dict)
    ctx.obj["timeout"] = timeout if timeout is not None else settings.redis_command_timeout


# ══════════════════════════════════════════════════════════════
# Suggestion Commands
# ══════════════════════════════════════════════════════════════


@cli.command()
@click.argument("key")
@click.argument("text")
@click.option("--score", "-s", default=1.0, type=float, help="Suggestion weight")
@click.option("--incr/--no-incr", default=False, help="Add score to the existing weight")
@click.option("--payload", "-p", default="", help="Payload stored with the suggestion")
@click.pass_context
def add(ctx: click.Context, key: str, text: str, score: float, incr: bool, payload: str) -> None:
    """Add TEXT to the dictionary at KEY."""
    timeout = ctx.obj["timeout"]

    size = _run(lambda client: client.add(key, text, score, incr, payload, timeout=timeout))
    click.echo(size)


@cli.command()
@click.argument("key")
@click.argument("prefix")
@click.option("--max", "-n", "max_results", default=None, type=int, help="Maximum results")
@click.option("--fuzzy/--exact", default=False, help="Allow one edit of distance")
@click.option("--with-payloads/--no-payloads", default=False, help="Include payloads")
@click.option("--json", "as_json", is_flag=True, default=False, help="Print a JSON array")
@click.pass_context
def get(
    ctx: click.Context,
    key: str,
    prefix: str,
    max_results: int | None,
    fuzzy: bool,
    with_payloads: bool,
    as_json: bool,
) -> None:
    """Complete PREFIX from the dictionary at KEY."""
    timeout = ctx.obj["timeout"]
    limit = settings.suggest_default_max if max_results is None else max_results
    options = SugGetOptions(fuzzy=fuzzy, with_payloads=with_payloads)

    try:
        suggestions = _run(
            lambda client: client.get(key, prefix, limit, options, timeout=timeout)
        )
    except NoValue:
        click.echo("No suggestions", err=True)
        sys.exit(1)

    if as_json:
        click.echo(json.dumps([s.model_dump() for s in suggestions], indent=2))
        return

    for suggestion in suggestions:
        if with_payloads:
            click.echo(f"{suggestion.text}\t{suggestion.payload}")
        else:
            click.echo(suggestion.text)


@cli.command("del")
@click.argument("key")
@click.argument("text")
@click.pass_context
def delete(ctx: click.Context, key: str, text: str) -> None:
    """Delete TEXT from the dictionary at KEY."""
    timeout = ctx.obj["timeout"]

    try:
        _run(lambda client: client.delete(key, text, timeout=timeout))
    except NoValue:
        click.echo("Not found", err=True)
        sys.exit(1)

    click.echo("Deleted")


@cli.command("len")
@click.argument("key")
@click.pass_context
def length(ctx: click.Context, key: str) -> None:
    """Print the size of the dictionary at KEY."""
    timeout = ctx.obj["timeout"]

    click.echo(_run(lambda client: client.length(key, timeout=timeout)))


@cli.command()
@click.argument("keys", nargs=-1, required=True)
@click.pass_context
def drop(ctx: click.Context, keys: tuple[str, ...]) -> None:
    """Delete whole dictionaries."""
    timeout = ctx.obj["timeout"]

    _run(lambda client: client.delete_all(*keys, timeout=timeout))
    click.echo(f"Dropped {len(keys)} key(s)")


# ══════════════════════════════════════════════════════════════
# Config Commands
# ══════════════════════════════════════════════════════════════


@cli.command()
def config() -> None:
    """Show current configuration."""
    click.echo("redissug Configuration\n")

    config_items = [
        ("Environment", settings.app_env),
        ("Debug", str(settings.debug)),
        ("Log Level", settings.log_level),
        ("Redis", _masked_url(settings.redis_url)),
        ("Redis Password", settings.redis_password),
        ("Socket Timeout", str(settings.redis_socket_timeout)),
        ("Command Timeout", str(settings.redis_command_timeout)),
        ("Default Max", str(settings.suggest_default_max)),
    ]

    for key, value in config_items:
        # Mask sensitive values
        if "password" in key.lower() or "secret" in key.lower():
            value = "***" if value else "Not set"
        click.echo(f"  {key:20} {value}")


# ══════════════════════════════════════════════════════════════
# Entry Point
# ══════════════════════════════════════════════════════════════


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
