"""paliscript CLI - Main entry point."""

import logging
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

import click

from paliscript.batch import convert_jsonl, convert_table, convert_text_files
from paliscript.config import engine_config, load_settings
from paliscript.engine.converter import Transliterator
from paliscript.models import EngineConfig, ScriptId
from paliscript.profiles.registry import resolve_script
from paliscript.qc.coverage import check_lines_coverage
from paliscript.utils.io import read_text_lines
from paliscript.utils.log import setup_logging


SCRIPT_CHOICE = click.Choice([s.value for s in ScriptId], case_sensitive=False)


def conversion_options(multiple: bool = False) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Add the --script, --numbers and --pali-only-thai options to a command."""

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        func = click.option(
            "--pali-only-thai/--standard-thai",
            default=None,
            help="Use the Pali-only Thai letterforms",
        )(func)
        func = click.option(
            "--numbers/--no-numbers",
            default=None,
            help="Also convert digits to the script's numerals",
        )(func)
        return click.option(
            "--script",
            "-s",
            "script",
            type=SCRIPT_CHOICE,
            multiple=multiple,
            help="Target script (default: from settings)" + (", repeatable" if multiple else ""),
        )(func)

    return decorator


def _conversion_settings(
    ctx: click.Context,
    numbers: bool | None,
    pali_only_thai: bool | None,
) -> tuple[bool, Transliterator]:
    """Resolve conversion flags against the settings."""
    settings = ctx.obj["settings"]
    conversion = settings["conversion"]

    also_convert_numbers = conversion["also_convert_numbers"] if numbers is None else numbers
    config = engine_config(settings)
    if pali_only_thai is not None:
        config = EngineConfig(pali_only_thai_forms=pali_only_thai)

    return bool(also_convert_numbers), Transliterator(config)


def _default_script(ctx: click.Context, script: str | None) -> ScriptId:
    return resolve_script(script or ctx.obj["settings"]["conversion"]["script"])


def _fail(logger: logging.Logger, action: str, error: Exception) -> None:
    logger.error(f"{action} failed: {error}", exc_info=True)
    click.echo(f"Error: {error}", err=True)
    sys.exit(1)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Settings file overriding the packaged defaults",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, config_path: Path | None) -> None:
    """Convert romanized Pali to Thai, Khmer, Myanmar, Sinhala or Devanagari."""
    try:
        settings = load_settings(config_path)
    except (OSError, ValueError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    log_settings = settings["logging"]
    log_level = "DEBUG" if verbose else log_settings["level"]
    log_file = log_settings.get("file")

    logger = setup_logging(
        level=log_level,
        format_type=log_settings.get("format", "pretty"),
        log_file=Path(log_file) if log_file else None,
    )

    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings
    ctx.obj["logger"] = logger


@cli.command()
def scripts() -> None:
    """List the supported target scripts."""
    for script in ScriptId:
        click.echo(script.value)


@cli.command()
@click.argument("text", required=False)
@conversion_options()
@click.pass_context
def convert(
    ctx: click.Context,
    text: str | None,
    script: str | None,
    numbers: bool | None,
    pali_only_thai: bool | None,
) -> None:
    """Convert TEXT, or standard input when TEXT is omitted."""
    logger = ctx.obj["logger"]

    try:
        script_id = _default_script(ctx, script)
        also_convert_numbers, transliterator = _conversion_settings(ctx, numbers, pali_only_thai)

        from_stdin = text is None
        if from_stdin:
            text = click.get_text_stream("stdin").read()

        result = transliterator.convert(text.lower(), script_id, also_convert_numbers)
        click.echo(result, nl=not from_stdin)

    except Exception as e:
        _fail(logger, "Conversion", e)


@cli.command(name="file")
@click.argument("sources", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--output-dir",
    "-o",
    required=True,
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory for the converted files",
)
@click.option("--workers", type=int, help="Worker threads (default: from settings)")
@conversion_options()
@click.pass_context
def convert_files(
    ctx: click.Context,
    sources: tuple[Path, ...],
    output_dir: Path,
    workers: int | None,
    script: str | None,
    numbers: bool | None,
    pali_only_thai: bool | None,
) -> None:
    """Convert romanized text files line by line."""
    logger = ctx.obj["logger"]
    batch_settings = ctx.obj["settings"]["batch"]

    try:
        script_id = _default_script(ctx, script)
        also_convert_numbers, transliterator = _conversion_settings(ctx, numbers, pali_only_thai)

        logger.info(f"Converting {len(sources)} files to {script_id.value}")
        outputs = convert_text_files(
            list(sources),
            output_dir,
            script_id,
            logger,
            also_convert_numbers=also_convert_numbers,
            transliterator=transliterator,
            workers=workers or batch_settings["workers"],
            progress=batch_settings.get("progress", False),
        )

        for path in outputs:
            click.echo(f"Written {path}")

    except Exception as e:
        _fail(logger, "File conversion", e)


@cli.command()
@click.argument("src", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("dst", type=click.Path(dir_okay=False, path_type=Path))
@click.option("--field", "-f", default="text", show_default=True, help="Romanized text field")
@conversion_options(multiple=True)
@click.pass_context
def jsonl(
    ctx: click.Context,
    src: Path,
    dst: Path,
    field: str,
    script: tuple[str, ...],
    numbers: bool | None,
    pali_only_thai: bool | None,
) -> None:
    """Add converted copies of FIELD to every record of a JSONL file."""
    logger = ctx.obj["logger"]

    try:
        script_ids = [resolve_script(s) for s in script] or [_default_script(ctx, None)]
        also_convert_numbers, transliterator = _conversion_settings(ctx, numbers, pali_only_thai)

        count = convert_jsonl(
            src,
            dst,
            field,
            script_ids,
            logger,
            also_convert_numbers=also_convert_numbers,
            transliterator=transliterator,
            progress=ctx.obj["settings"]["batch"].get("progress", False),
        )
        click.echo(f"Converted {count} records to {dst}")

    except Exception as e:
        _fail(logger, "JSONL conversion", e)


@cli.command()
@click.argument("src", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("dst", type=click.Path(dir_okay=False, path_type=Path))
@click.option("--column", "-c", default="text", show_default=True, help="Romanized text column")
@conversion_options(multiple=True)
@click.pass_context
def table(
    ctx: click.Context,
    src: Path,
    dst: Path,
    column: str,
    script: tuple[str, ...],
    numbers: bool | None,
    pali_only_thai: bool | None,
) -> None:
    """Add converted columns to a CSV or Parquet table."""
    logger = ctx.obj["logger"]

    try:
        script_ids = [resolve_script(s) for s in script] or [_default_script(ctx, None)]
        also_convert_numbers, transliterator = _conversion_settings(ctx, numbers, pali_only_thai)

        count = convert_table(
            src,
            dst,
            column,
            script_ids,
            logger,
            also_convert_numbers=also_convert_numbers,
            transliterator=transliterator,
        )
        click.echo(f"Converted {count} rows to {dst}")

    except Exception as e:
        _fail(logger, "Table conversion", e)


@cli.command()
@click.argument("src", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--max-examples", default=10, show_default=True, help="Examples to show")
@click.option("--strict", is_flag=True, help="Exit with status 1 if anything would be left unconverted")
@conversion_options()
@click.pass_context
def check(
    ctx: click.Context,
    src: Path,
    max_examples: int,
    strict: bool,
    script: str | None,
    numbers: bool | None,
    pali_only_thai: bool | None,
) -> None:
    """Report characters of SRC that conversion would copy through unchanged."""
    logger = ctx.obj["logger"]

    try:
        script_id = _default_script(ctx, script)
        also_convert_numbers, transliterator = _conversion_settings(ctx, numbers, pali_only_thai)

        result = check_lines_coverage(
            read_text_lines(src),
            script_id,
            logger,
            max_examples=max_examples,
            also_convert_numbers=also_convert_numbers,
            config=transliterator.config,
        )
    except Exception as e:
        _fail(logger, "Coverage check", e)
        return

    click.echo(f"{result.lines_with_issues}/{result.total_lines} lines with unconverted characters")
    for char, count in result.unmapped_chars.most_common():
        click.echo(f"  U+{ord(char):04X} {char!r}: {count}")
    for example in result.examples:
        click.echo(f"  line {example['line']}: {example['unmapped']}  {example['text']}")

    if strict and result.lines_with_issues:
        sys.exit(1)


if __name__ == "__main__":
    cli()
