"""Root CLI group for dtneid with global flags and command registration."""

from __future__ import annotations

import click

from dtneid import __version__
from dtneid.commands import register_commands
from dtneid.commands._base import EidGroup
from dtneid.commands._context import AppContext
from dtneid.config.settings import DtnEidSettings


@click.group(
    cls=EidGroup,
    invoke_without_command=True,
    examples=[
        ("dtneid parse dtn://node/inbox", "validate and describe"),
        ("dtneid encode ipn:23.42", "text to CBOR"),
        ("dtneid decode 820100", "CBOR to text"),
        ("dtneid -c ./dtneid.toml --json roundtrip dtn:none", "explicit config file"),
    ],
)
@click.version_option(version=__version__, prog_name="dtneid")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """dtneid — parse, render, and encode DTN endpoint identifiers."""
    settings = DtnEidSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
