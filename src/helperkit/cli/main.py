"""helperkit CLI entry point.

\b
Examples:
    helperkit request GET https://api.example.com/items
    helperkit request POST https://api.example.com/items --data '{"name": "x"}'
    helperkit config --show
    helperkit config --set-auth --provider aws --key abc123
"""

import json
import logging
import sys
from pathlib import Path
from typing import Optional, Tuple

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .. import __version__
from ..core.config import CloudProvider, ConfigManager
from ..core.security.sanitizer import SensitiveDataSanitizer
from ..exceptions import HelperKitError, InvalidArgumentError
from ..logging import LoggingConfig, configure_logging
from ..web import HttpMethod, create_web_helpers_from_config, run_sync

console = Console()
err_console = Console(stderr=True)


def _parse_headers(values: Tuple[str, ...]) -> dict:
    headers = {}
    for item in values:
        name, sep, value = item.partition("=")
        if not sep or not name:
            raise click.BadParameter(f"expected NAME=VALUE, got '{item}'", param_hint="--header")
        headers[name.strip()] = value.strip()
    return headers


def _print_error(error: HelperKitError) -> None:
    err_console.print(f"[red]Error:[/red] {escape(error.message)}")
    if error.help_text:
        err_console.print(f"[yellow]Help:[/yellow] {escape(error.help_text)}")


def _setup_logging(manager: ConfigManager, verbose: int) -> None:
    section = manager.load_config().logging
    configure_logging(LoggingConfig.from_section(section, verbose, __version__))


@click.group()
@click.version_option(__version__, prog_name="helperkit")
@click.option(
    "--config",
    "config_file",
    type=click.Path(path_type=Path),
    help="Configuration file (default: ~/.config/helperkit/config.toml)",
)
@click.option("-v", "--verbose", count=True, help="Increase log verbosity")
@click.pass_context
def cli(ctx: click.Context, config_file: Optional[Path], verbose: int) -> None:
    """Typed HTTP helpers with cloud-provider authentication."""
    ctx.ensure_object(dict)
    ctx.obj["config_manager"] = ConfigManager(config_file)
    ctx.obj["verbose"] = verbose


@cli.command()
@click.argument("method", type=click.Choice([m.value for m in HttpMethod], case_sensitive=False))
@click.argument("url")
@click.option("--data", "data", help="JSON request body")
@click.option("--header", "-H", "header_values", multiple=True, help="Custom header NAME=VALUE")
@click.option("--allow-failure", is_flag=True, help="Print non-success responses instead of failing")
@click.pass_context
def request(
    ctx: click.Context,
    method: str,
    url: str,
    data: Optional[str],
    header_values: Tuple[str, ...],
    allow_failure: bool,
) -> None:
    """Send METHOD to URL and print the JSON response."""
    manager: ConfigManager = ctx.obj["config_manager"]
    try:
        _setup_logging(manager, ctx.obj["verbose"])
        body = None
        if data is not None:
            try:
                body = json.loads(data)
            except ValueError as e:
                raise InvalidArgumentError("--data", f"not valid JSON: {e}") from e

        headers = _parse_headers(header_values)
        response = run_sync(_send, manager, method, url, body, headers, allow_failure)
    except HelperKitError as e:
        _print_error(e)
        sys.exit(1)

    style = "green" if response.success else "red"
    err_console.print(f"[{style}]HTTP {response.status_code}[/{style}]")
    if response.result is not None:
        console.print_json(json.dumps(response.result))
    elif response.body:
        console.print(response.text, markup=False)
    if not response.success:
        sys.exit(1)


async def _send(manager, method, url, body, headers, allow_failure):
    async with create_web_helpers_from_config(manager) as web:
        web.add_headers(headers)
        return await web.request(method, url, body, allow_failure=allow_failure)


@cli.command()
@click.option("--show", is_flag=True, help="Show current configuration")
@click.option("--set-auth", is_flag=True, help="Set cloud authentication")
@click.option(
    "--provider",
    type=click.Choice([p.value for p in CloudProvider], case_sensitive=False),
    help="Cloud provider for --set-auth",
)
@click.option("--key", "auth_key", help="Authentication key for --set-auth")
@click.option("--header-name", help="Header name when provider is 'custom'")
@click.pass_context
def config(
    ctx: click.Context,
    show: bool,
    set_auth: bool,
    provider: Optional[str],
    auth_key: Optional[str],
    header_name: Optional[str],
) -> None:
    """Manage configuration and credentials."""
    manager: ConfigManager = ctx.obj["config_manager"]
    try:
        if set_auth:
            if not provider or auth_key is None:
                raise click.UsageError("--set-auth requires --provider and --key")
            manager.set_cloud_auth(CloudProvider(provider.lower()), auth_key, header_name)
            console.print(f"[green]✓[/green] Saved cloud authentication to {escape(str(manager.config_file))}")

        if show or not set_auth:
            _show_config(manager)
    except HelperKitError as e:
        _print_error(e)
        sys.exit(1)


def _show_config(manager: ConfigManager) -> None:
    config = manager.load_config()
    auth = config.cloud_auth

    table = Table(title="helperkit configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")

    rows = [
        ("config file", str(manager.config_file)),
        ("cloud_auth.provider", auth.provider.value if auth.provider else "-"),
        (
            "cloud_auth.authentication_key",
            SensitiveDataSanitizer.mask_credential(auth.authentication_key),
        ),
        ("cloud_auth.custom_header_name", auth.custom_header_name or "-"),
        ("http.base_url", config.http.base_url or "-"),
        ("http.timeout_seconds", str(config.http.timeout_seconds)),
        ("logging.level", config.logging.level.value),
        ("logging.format", config.logging.format),
    ]
    for setting, value in rows:
        table.add_row(setting, escape(value))
    console.print(table)


def main() -> None:
    logging.captureWarnings(True)
    cli(obj={})


if __name__ == "__main__":
    main()
