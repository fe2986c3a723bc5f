from __future__ import annotations
import io
import logging
import os
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from settings import ConfigError, load_settings
from stream.engine import prettify_stream
from widths import ColumnWidthTracker

app = typer.Typer(
    add_completion=False,
    help="Align and colorize Combined Log Format access lines. Reads stdin when INPUT is '-' or omitted.",
)

err_console = Console(stderr=True)
logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(name)s: %(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _open_input(input_path: str):
    # split on \n only; a lone \r stays inside its record
    if input_path == "-":
        return io.TextIOWrapper(sys.stdin.buffer, encoding="utf-8", newline="\n"), False
    return open(input_path, "r", encoding="utf-8", newline="\n"), True


def _silence_stdout() -> None:
    # downstream closed the pipe; keep the interpreter from complaining at exit
    try:
        devnull = os.open(os.devnull, os.O_WRONLY)
    except OSError as e:
        logger.debug("could not open %s after broken pipe: %s", os.devnull, e)
        return
    try:
        os.dup2(devnull, sys.stdout.fileno())
    except (OSError, ValueError) as e:
        logger.debug("could not redirect stdout after broken pipe: %s", e)
    finally:
        os.close(devnull)


@app.command(help="Pretty-print access log lines from INPUT (default: stdin) to stdout.")
def run(
    input_path: str = typer.Argument("-", metavar="INPUT", help="Access log file, or '-' for stdin"),
    color: Optional[bool] = typer.Option(None, "--color/--no-color", help="Wrap parsed lines in ANSI colors by status class"),
    config: Optional[Path] = typer.Option(None, "--config", exists=True, dir_okay=False, readable=True, help="YAML settings file (color, palette)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug details to stderr"),
):
    _configure_logging(verbose)
    try:
        settings = load_settings(str(config) if config is not None else None)
    except (ConfigError, OSError) as e:
        err_console.print(f"[red]Config failed:[/red] {escape(str(e))}")
        raise typer.Exit(code=1)

    use_color = settings.color if color is None else color
    palette = settings.palette if use_color else None
    logger.debug("input=%s color=%s palette=%s", input_path, use_color, palette)

    try:
        infh, close = _open_input(input_path)
    except OSError as e:
        err_console.print(f"[red]Input failed:[/red] {escape(str(e))}")
        raise typer.Exit(code=1)

    out = sys.stdout
    try:
        for line in prettify_stream(infh, ColumnWidthTracker(), palette):
            out.write(line + "\n")
            out.flush()
    except BrokenPipeError:
        _silence_stdout()
    except (OSError, UnicodeDecodeError) as e:
        err_console.print(f"[red]Input failed:[/red] {escape(str(e))}")
        raise typer.Exit(code=1)
    except KeyboardInterrupt:
        pass
    finally:
        if close:
            infh.close()
        else:
            # leave sys.stdin.buffer open for the caller
            infh.detach()


if __name__ == "__main__":
    app()
