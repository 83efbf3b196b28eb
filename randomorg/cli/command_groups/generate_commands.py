"""generate* commands: integers, strings, gaussians, uuids, sequences."""

from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Callable

import typer
from loguru import logger
from rich.console import Console
from rich.table import Table

from randomorg.client import CharSet, RandomOrg
from randomorg.config.loader import get_config
from randomorg.utils.exceptions import RandomOrgError, ValidationError

_CHARSETS = {
    "digits": CharSet.NUMBER,
    "lower": CharSet.LOWER_ALPHABET,
    "upper": CharSet.UPPER_ALPHABET,
}


def parse_char_set(spec: str) -> CharSet:
    """Parse ``digits+lower`` style specs; anything else is a literal character set."""
    parts = [p.strip() for p in spec.split("+")]
    if parts and all(p in _CHARSETS for p in parts):
        result = _CHARSETS[parts[0]]
        for p in parts[1:]:
            result = result + _CHARSETS[p]
        return result
    return CharSet.custom(spec)


def parse_sequence_bound(raw: str) -> int | list[int]:
    """``5`` -> 5 (uniform), ``5,10,20`` -> [5, 10, 20] (one per sequence)."""
    try:
        if "," in raw:
            return [int(p) for p in raw.split(",") if p.strip()]
        return int(raw)
    except ValueError as e:
        raise typer.BadParameter(f"expected an integer or comma-separated integers, got {raw!r}") from e


def render_violations(console: Console, err: ValidationError) -> None:
    table = Table(title=err.message if err.code != "VALIDATION_ERROR" else "Invalid parameters")
    table.add_column("Rule", style="red")
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    table.add_column("Expected", style="dim")
    for v in err.violations:
        table.add_row(
            v.rule_id,
            ", ".join(v.field_names),
            ", ".join(str(x) for x in v.field_values),
            "" if v.expected is None else str(v.expected),
        )
    console.print(table)


def run_generate(console: Console, call: Callable[[RandomOrg], Awaitable[Any]]) -> Any:
    """Run one generate call against a configured client, mapping errors to exit codes."""
    cfg = get_config()
    if not cfg.api_key:
        console.print("[red]No API key configured.[/red] Set RANDOM_ORG_API_KEY or apiKey in ~/.randomorg/config.json")
        raise typer.Exit(1)

    async def run() -> Any:
        async with RandomOrg.from_config(cfg) as client:
            data = await call(client)
            return data, client.last_usage

    try:
        data, usage = asyncio.run(run())
    except ValidationError as e:
        render_violations(console, e)
        raise typer.Exit(2) from e
    except RandomOrgError as e:
        logger.warning("generate failed: {}", e)
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e

    logger.info("completed at {}", data.completion_time)
    if usage is not None:
        console.print(
            f"[dim]requests left {usage.requests_left} · bits left {usage.bits_left} · "
            f"advisory delay {usage.advisory_delay_millis}ms[/dim]"
        )
    return data


def register_generate_commands(app: typer.Typer, console: Console) -> None:
    """Register generate commands on the main app."""

    @app.command("integers")
    def integers(
        n: int = typer.Argument(..., help="How many integers (1-1000)"),
        min: int = typer.Argument(..., help="Lower bound, inclusive"),
        max: int = typer.Argument(..., help="Upper bound, inclusive"),
        replacement: bool = typer.Option(True, "--replacement/--no-replacement", help="Allow repeated values"),
    ) -> None:
        """Generate random integers."""
        data = run_generate(console, lambda c: c.generate_integers(n, min, max, replacement))
        console.print(" ".join(str(x) for x in data.data))

    @app.command("strings")
    def strings(
        n: int = typer.Argument(..., help="How many strings (1-10000)"),
        length: int = typer.Argument(..., help="Length of each string (1-32)"),
        chars: str = typer.Option("digits+lower+upper", "--chars", help="digits/lower/upper joined by '+', or literal characters"),
        replacement: bool = typer.Option(True, "--replacement/--no-replacement"),
    ) -> None:
        """Generate random strings."""
        char_set = parse_char_set(chars)
        data = run_generate(console, lambda c: c.generate_strings(n, length, char_set, replacement))
        for s in data.data:
            console.print(s)

    @app.command("gaussians")
    def gaussians(
        n: int = typer.Argument(..., help="How many values (1-10000)"),
        mean: float = typer.Argument(..., help="Distribution mean"),
        std_dev: float = typer.Argument(..., help="Standard deviation"),
        sig_digits: int = typer.Argument(..., help="Significant digits (2-14)"),
    ) -> None:
        """Generate values from a Gaussian distribution."""
        data = run_generate(console, lambda c: c.generate_gaussians(n, mean, std_dev, sig_digits))
        console.print(" ".join(str(x) for x in data.data))

    @app.command("uuids")
    def uuids(n: int = typer.Argument(..., help="How many UUIDs (1-1000)")) -> None:
        """Generate version 4 UUIDs."""
        data = run_generate(console, lambda c: c.generate_uuids(n))
        for u in data.data:
            console.print(str(u))

    @app.command("sequences")
    def sequences(
        n: int = typer.Argument(..., help="How many sequences (1-1000)"),
        length: str = typer.Option(..., "--length", help="Length, or comma-separated lengths per sequence"),
        min: str = typer.Option(..., "--min", help="Lower bound, or one per sequence"),
        max: str = typer.Option(..., "--max", help="Upper bound, or one per sequence"),
        replacement: bool = typer.Option(True, "--replacement/--no-replacement"),
    ) -> None:
        """Generate sequences of random integers."""
        length_v = parse_sequence_bound(length)
        min_v = parse_sequence_bound(min)
        max_v = parse_sequence_bound(max)
        data = run_generate(
            console,
            lambda c: c.generate_integer_sequences(n, length_v, min_v, max_v, replacement),
        )
        for seq in data.data:
            console.print(" ".join(str(x) for x in seq))
