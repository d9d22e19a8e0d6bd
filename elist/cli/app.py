from __future__ import annotations

import os
from pathlib import Path

import typer

from elist import __version__
from elist.core.chain import ErrorChain, push
from elist.core.config import (
    CONFIG_ENV_VAR,
    Config,
    load_config,
    load_config_or_default,
    resolve_config_path,
)
from elist.output.console import RichConsole
from elist.output.trace import print_chain


app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)


def _load(config: Path | None) -> Config:
    path = resolve_config_path(config)
    # Only the implicit ./elist.toml is optional.
    if config is None and not os.environ.get(CONFIG_ENV_VAR):
        return load_config_or_default(path)
    return load_config(path)


@app.command()
def trace(
    messages: list[str] = typer.Argument(
        ..., help="Error messages, root cause first, outermost context last."
    ),
    config: Path | None = typer.Option(
        None,
        "--config",
        help=f"Config file (default: ${CONFIG_ENV_VAR} or ./elist.toml)",
    ),
    color: bool | None = typer.Option(
        None,
        "--color/--no-color",
        help="Force styled output on or off (overrides the config file).",
    ),
) -> None:
    """Push each message onto a chain and print the resulting trace."""
    try:
        cfg = _load(config)
    except ErrorChain as e:
        err_console = RichConsole(stderr=True)
        err_console.error("cannot load configuration")
        print_chain(e, err_console)
        raise typer.Exit(code=1) from e

    use_color = cfg.output.color if color is None else color
    console = RichConsole(color=use_color)

    chain: ErrorChain | None = None
    for message in messages:
        chain = push(chain, message)

    print_chain(chain, console, header=cfg.output.header)


def _show_version(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit(code=0)


@app.callback()
def _main(  # pyright: ignore[reportUnusedFunction]
    version: bool = typer.Option(
        False,
        "--version",
        callback=_show_version,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    pass


def main() -> None:
    app()
