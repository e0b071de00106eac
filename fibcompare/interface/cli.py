# SPDX-License-Identifier: GPL-3.0-only
import functools
import logging
from pathlib import Path
from typing import Any, Callable, Optional

import typer

from fibcompare import APP_NAME
from fibcompare.core.config import get_config, set_config
from fibcompare.core.errors import BaseError
from fibcompare.core.report import run_report
from fibcompare.interface.logging import LogLevel, setup_logging

app = typer.Typer(add_completion=False)
log = logging.getLogger(__name__)


def handle_errors(cmd: Callable[..., None]) -> Callable[..., None]:
    """Decorate a CLI command function with an error handler.

    Expected errors are logged and turned into a non-zero exit code: 2 for invalid usage,
    1 for everything else.
    """

    @functools.wraps(cmd)
    def cmd_with_error_handling(*args: Any, **kwargs: Any) -> None:
        try:
            cmd(*args, **kwargs)
        except BaseError as e:
            log.error("%s: %s", type(e).__name__, str(e).replace("\n", r"\n"))
            typer.echo(f"Error: {type(e).__name__}: {e.friendly_msg()}", err=True)
            raise typer.Exit(2 if e.is_invalid_usage else 1)

    return cmd_with_error_handling


@app.command()
@handle_errors
def main(
    log_level: LogLevel = typer.Option(
        LogLevel.WARNING.value,
        "--log-level",
        case_sensitive=False,
        help="Set log level.",
    ),
    config_file: Optional[Path] = typer.Option(
        None,
        "--config-file",
        exists=True,
        dir_okay=False,
        resolve_path=True,
        help="Read configuration from this YAML file.",
    ),
) -> None:
    """Print Fibonacci numbers computed by the recursive, cached and iterative methods."""
    setup_logging(log_level)
    if config_file:
        set_config(config_file)

    config = get_config()
    log.info(
        "%s: recursion below n=%d, table up to n=%d",
        APP_NAME,
        config.recursive_limit,
        config.upper_bound,
    )
    status = run_report(config.recursive_limit, config.upper_bound)
    raise typer.Exit(status)
