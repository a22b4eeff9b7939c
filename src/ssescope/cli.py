from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import typer

from .analysis import is_valid_sse_format
from .config import ViewerConfig, load_viewer_config
from .render import render_table, resolve_json_mode
from .samples import get_sample, list_samples
from .stream_parser import parse_sse_stream

app = typer.Typer(add_completion=False, help="ssescope: inspect Server-Sent Events streams")


def _read_input(path: Path | None) -> str:
    if path is None or str(path) == "-":
        return sys.stdin.read()
    return path.read_text(encoding="utf-8")


def _fail(msg: str) -> typer.Exit:
    typer.secho(msg, fg=typer.colors.RED, err=True)
    return typer.Exit(code=2)


def _load_config(config: Path | None) -> ViewerConfig:
    try:
        return load_viewer_config(config)
    except FileNotFoundError as e:
        raise _fail(f"Config file not found: {e}") from e


@app.command()
def parse(
    path: Path | None = typer.Argument(None, help="SSE text file ('-' or omitted reads stdin)"),
    sample: str | None = typer.Option(None, "--sample", "-s", help="Parse a built-in sample stream instead"),
    as_json: bool = typer.Option(False, "--json", help="Print the parse result as JSON"),
    mode: str | None = typer.Option(None, "--mode", help="JSON payload rendering: auto|on|off"),
    config: Path | None = typer.Option(None, "--config", help="Path to ssescope.yaml (defaults to auto-detect)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    cfg = _load_config(config)

    if sample is not None and path is not None:
        raise _fail("Pass either a path or --sample, not both")

    if sample is not None:
        try:
            text = get_sample(sample).data
        except KeyError as e:
            raise _fail(f"Unknown sample: {sample}") from e
    else:
        text = _read_input(path)

    result = parse_sse_stream(text)

    try:
        json_mode = resolve_json_mode(mode or cfg.json_mode, result.events)
    except ValueError as e:
        raise _fail(str(e)) from e

    if as_json:
        out = result.to_dict()
        out["json_mode"] = json_mode
        out["valid_format"] = is_valid_sse_format(text)
        typer.echo(json.dumps(out, ensure_ascii=False, indent=2))
    else:
        if result.events:
            typer.echo(
                render_table(
                    result,
                    json_mode=json_mode,
                    placeholder=cfg.placeholder,
                    max_data_width=cfg.max_data_width,
                )
            )
        for d in result.diagnostics:
            typer.secho(d, fg=typer.colors.YELLOW, err=True)

    if not result.events:
        raise typer.Exit(code=1)


@app.command()
def validate(
    path: Path | None = typer.Argument(None, help="SSE text file ('-' or omitted reads stdin)"),
) -> None:
    if is_valid_sse_format(_read_input(path)):
        typer.secho("valid", fg=typer.colors.GREEN)
        return
    typer.secho("invalid", fg=typer.colors.RED)
    raise typer.Exit(code=1)


@app.command()
def samples() -> None:
    for s in list_samples():
        typer.echo(f"{s.id:<15} {s.name} - {s.description}")


def main() -> None:
    # Entry point for console script.
    app()


if __name__ == "__main__":
    main()
