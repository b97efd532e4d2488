"""Typer-based command line interface for the converter.

Every command accepts ``--config`` (YAML options deep-merged over the
package defaults), ``--locale`` (repeatable, highest priority first; replaces
the configured locale list) and ``--verbose`` for debug logging on stderr.

Exit codes
----------
0 success
4 configuration error (invalid YAML options, unsupported locale)
5 invalid input (EDTF outside the supported grammar, unrecognized text)
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path
from typing import Any, NoReturn, Optional

import typer
import yaml
from pydantic import ValidationError

from . import __version__
from .config import load_config
from .converter import Converter
from .edtf.models import SegmentResult
from .utils.errors import EdtfError, UnsupportedLocale
from .utils.logging import configure

if not sys.stdout.isatty():  # pragma: no cover - CLI test context
    os.environ.setdefault("NO_COLOR", "1")
    os.environ.setdefault("RICH_DISABLE_NO_COLOR", "1")

EXIT_CONFIG = 4
EXIT_INPUT = 5

app = typer.Typer(
    name="edtf-converter",
    help="Convert between EDTF, natural language and date ranges.",
)

ConfigOption = typer.Option(None, "--config", help="YAML config to override defaults")  # noqa: B008
LocaleOption = typer.Option(  # noqa: B008
    None, "--locale", "-l", help="Locale identifier; repeat to merge, highest priority first"
)
VerboseOption = typer.Option(  # noqa: B008
    False, "--verbose", "-v", help="Emit debug logging to stderr"
)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _safe_exit(code: int, msg: str | None = None) -> NoReturn:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(msg, err=True)
    raise typer.Exit(code)


def _build_converter(
    config_path: Optional[Path], locales: Optional[list[str]], verbose: bool
) -> Converter:
    """Load options and construct a converter, mapping failures to exit 4."""

    configure(verbose)
    try:
        options = load_config(config_path)
        if locales:
            options = options.model_copy(update={"locales": tuple(locales)})
        return Converter(options)
    except (OSError, yaml.YAMLError, ValidationError, UnsupportedLocale) as exc:
        _safe_exit(EXIT_CONFIG, f"Configuration error: {exc}")


def _isoformat(value: Any) -> str | None:
    return value.isoformat(timespec="milliseconds") if value is not None else None


def _segment_dict(segment: SegmentResult) -> dict[str, Any]:
    return {
        "clean_segment": segment.clean_segment,
        "format": segment.format.value,
        "detected_modifiers": [m.keyword for m in segment.detected_modifiers],
        "is_approximate": segment.is_approximate,
        "is_uncertain": segment.is_uncertain,
        "has_open_start": segment.has_open_start,
        "has_open_end": segment.has_open_end,
        "min": _isoformat(segment.min_instant),
        "max": _isoformat(segment.max_instant),
    }


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(  # noqa: B008
        False, "--version", callback=_version_callback, is_eager=True, help="Show version"
    ),
) -> None:
    """Entry point for the edtf-converter command group."""
    pass


@app.command("to-edtf")
def to_edtf(
    text: str = typer.Argument(..., help="Natural-language date phrase"),  # noqa: B008
    config_path: Optional[Path] = ConfigOption,
    locale: Optional[list[str]] = LocaleOption,
    verbose: bool = VerboseOption,
) -> None:
    """Convert natural language to EDTF."""

    converter = _build_converter(config_path, locale, verbose)
    try:
        typer.echo(converter.text_to_edtf(text))
    except EdtfError as exc:
        _safe_exit(EXIT_INPUT, str(exc))


@app.command("to-text")
def to_text(
    edtf: str = typer.Argument(..., help="EDTF string"),  # noqa: B008
    config_path: Optional[Path] = ConfigOption,
    locale: Optional[list[str]] = LocaleOption,
    verbose: bool = VerboseOption,
) -> None:
    """Convert EDTF to natural language."""

    converter = _build_converter(config_path, locale, verbose)
    try:
        typer.echo(converter.edtf_to_text(edtf))
    except EdtfError as exc:
        _safe_exit(EXIT_INPUT, str(exc))


@app.command("to-date")
def to_date(
    edtf: str = typer.Argument(..., help="EDTF string"),  # noqa: B008
    config_path: Optional[Path] = ConfigOption,
    locale: Optional[list[str]] = LocaleOption,
    verbose: bool = VerboseOption,
) -> None:
    """Print the minimum and maximum UTC instants of an EDTF value as JSON."""

    converter = _build_converter(config_path, locale, verbose)
    try:
        result = converter.edtf_to_date(edtf)
    except EdtfError as exc:
        _safe_exit(EXIT_INPUT, str(exc))
    typer.echo(json.dumps({"min": _isoformat(result.min), "max": _isoformat(result.max)}))


@app.command("validate")
def validate(
    edtf: str = typer.Argument(..., help="EDTF string"),  # noqa: B008
    config_path: Optional[Path] = ConfigOption,
    locale: Optional[list[str]] = LocaleOption,
    verbose: bool = VerboseOption,
) -> None:
    """Check that an EDTF string is supported."""

    converter = _build_converter(config_path, locale, verbose)
    try:
        converter.validate_edtf(edtf)
    except EdtfError as exc:
        _safe_exit(EXIT_INPUT, str(exc))
    typer.echo("valid")


@app.command("parse")
def parse(
    edtf: str = typer.Argument(..., help="EDTF string"),  # noqa: B008
    config_path: Optional[Path] = ConfigOption,
    locale: Optional[list[str]] = LocaleOption,
    verbose: bool = VerboseOption,
) -> None:
    """Print the parsed segments of an EDTF string as JSON."""

    converter = _build_converter(config_path, locale, verbose)
    try:
        result = converter.parse_edtf(edtf)
    except EdtfError as exc:
        _safe_exit(EXIT_INPUT, str(exc))
    payload = {
        "primary": _segment_dict(result.primary),
        "secondary": _segment_dict(result.secondary) if result.secondary else None,
    }
    typer.echo(json.dumps(payload, indent=2))


if __name__ == "__main__":  # pragma: no cover
    app()
