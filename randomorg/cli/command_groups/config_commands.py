"""Config command group."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from randomorg.config.loader import camel_to_snake, get_config, get_config_path, load_config, save_config


def mask_secret(value: str) -> str:
    if not value:
        return ""
    if len(value) <= 8:
        return "*" * len(value)
    return f"{value[:4]}…{value[-4:]}"


def register_config_commands(app: typer.Typer, console: Console) -> None:
    """Register config show/set commands."""
    config_app = typer.Typer(help="Config helpers (show/set)")
    app.add_typer(config_app, name="config")

    @config_app.command("show")
    def config_show() -> None:
        """Show the effective configuration (API key masked)."""
        cfg = get_config()
        table = Table(title=str(get_config_path()))
        table.add_column("Key", style="cyan")
        table.add_column("Value")
        table.add_row("apiKey", mask_secret(cfg.api_key) or "[yellow]not set[/yellow]")
        table.add_row("baseUrl", cfg.base_url)
        table.add_row("timeoutSeconds", "none" if cfg.timeout_seconds is None else str(cfg.timeout_seconds))
        table.add_row("log.level", cfg.log.level)
        table.add_row("log.fileEnabled", str(cfg.log.file_enabled))
        console.print(table)

    @config_app.command("set")
    def config_set(
        key: str = typer.Argument(..., help="apiKey, baseUrl or timeoutSeconds"),
        value: str = typer.Argument(..., help="New value ('none' clears timeoutSeconds)"),
    ) -> None:
        """Persist a top-level setting to ~/.randomorg/config.json."""
        field = camel_to_snake(key)
        if field not in ("api_key", "base_url", "timeout_seconds"):
            raise typer.BadParameter(f"unknown key: {key}")
        cfg = load_config()
        if field == "timeout_seconds":
            try:
                parsed: object = None if value.lower() == "none" else float(value)
            except ValueError as e:
                raise typer.BadParameter(f"timeoutSeconds must be a number or 'none', got {value!r}") from e
        else:
            parsed = value
        updated = cfg.model_copy(update={field: parsed})
        save_config(updated)
        console.print(f"[green]✓[/green] Set {key}")
