from __future__ import annotations

import logging
from dataclasses import replace as dc_replace
from pathlib import Path

import typer
import yaml

from .config import (
    AlignerConfig,
    InvalidConfigError,
    load_config,
    parse_align_mode,
    validate_config,
)
from .pipeline import render_text

logger = logging.getLogger(__name__)

app = typer.Typer(help="Text Aligner CLI.", no_args_is_help=True)


@app.command()
def align(
    input_path: Path = typer.Argument(
        ..., exists=True, readable=True, dir_okay=False, file_okay=True
    ),
    width: int | None = typer.Argument(
        None, help="Maximum line width (overrides config max_width)."
    ),
    align_mode: str | None = typer.Argument(
        None,
        metavar="ALIGN",
        help="Alignment: 'left', 'right' or 'justify' (overrides config align).",
    ),
    destination: Path | None = typer.Argument(
        None, dir_okay=False, help="Output file; stdout when omitted."
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logs."),
) -> None:
    """Wrap and align the text of INPUT_PATH."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    try:
        cfg = _apply_overrides(load_config(config), width, align_mode)
        text = input_path.read_text(encoding=cfg.encoding)
        rendered = render_text(text, cfg)
    except InvalidConfigError as exc:
        raise typer.BadParameter(str(exc)) from exc

    if destination is None:
        typer.echo(rendered, nl=False)
        return
    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_text(rendered, encoding=cfg.encoding)
    logger.info("Wrote aligned text to %s", destination)


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = AlignerConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    app()


def _apply_overrides(
    config: AlignerConfig, width: int | None, align_mode: str | None
) -> AlignerConfig:
    """Return a copy of config with the CLI width and alignment applied."""
    if width is not None:
        config = dc_replace(config, max_width=width)
    if align_mode is not None:
        config = dc_replace(config, align=parse_align_mode(align_mode))
    return validate_config(config)


if __name__ == "__main__":
    main()
