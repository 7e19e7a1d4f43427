"""Batch conversion of text files, JSONL records and tables."""

import logging
from collections import Counter
from collections.abc import Iterable, Iterator, Sequence
from pathlib import Path
from typing import Any

import pandas as pd
from tqdm import tqdm

from paliscript.engine.converter import Transliterator
from paliscript.models import ScriptId
from paliscript.profiles.registry import resolve_script
from paliscript.utils.io import atomic_write, ensure_dir, read_jsonl, read_text_lines, write_jsonl, write_text_lines
from paliscript.utils.log import log_with_context
from paliscript.utils.parallel import map_parallel_ordered


TABLE_SUFFIXES = (".csv", ".parquet")


def output_name(field: str, script: ScriptId) -> str:
    """Name of the key or column holding a field converted to a script."""
    return f"{field}_{script.value.lower()}"


def _convert_value(
    transliterator: Transliterator,
    value: Any,
    script: ScriptId,
    also_convert_numbers: bool,
) -> Any:
    # Non-text cells (missing values, numbers) are left alone
    if not isinstance(value, str):
        return value
    return transliterator.convert(value.lower(), script, also_convert_numbers)


def convert_text_file(
    src: Path,
    dst: Path,
    script: ScriptId | str,
    logger: logging.Logger,
    also_convert_numbers: bool = False,
    transliterator: Transliterator | None = None,
) -> int:
    """
    Convert a romanized text file line by line.

    Args:
        src: Source text file
        dst: Destination path, written atomically
        script: Target script
        logger: Logger instance
        also_convert_numbers: Map digits to the script's numerals
        transliterator: Converter to use (default: Transliterator())

    Returns:
        Number of lines written
    """
    transliterator = transliterator or Transliterator()
    script_id = resolve_script(script)
    src = Path(src)
    if not src.exists():
        raise FileNotFoundError(f"Input file not found: {src}")

    lines = (
        _convert_value(transliterator, line, script_id, also_convert_numbers)
        for line in read_text_lines(src)
    )
    count = write_text_lines(Path(dst), lines)

    log_with_context(logger, "info", f"Converted {count} lines", src=str(src), dst=str(dst), script=script_id)
    return count


def convert_text_files(
    sources: Sequence[Path],
    output_dir: Path,
    script: ScriptId | str,
    logger: logging.Logger,
    also_convert_numbers: bool = False,
    transliterator: Transliterator | None = None,
    workers: int = 4,
    progress: bool = False,
) -> list[Path]:
    """
    Convert several text files concurrently.

    Each source is written to output_dir as "<stem>.<script>.txt".

    Args:
        sources: Source text files
        output_dir: Destination directory
        script: Target script
        logger: Logger instance
        also_convert_numbers: Map digits to the script's numerals
        transliterator: Converter shared by all workers
        workers: Number of worker threads
        progress: Show a progress bar

    Returns:
        Output paths, in the order of sources

    Raises:
        ValueError: If two sources would be written to the same output file
    """
    transliterator = transliterator or Transliterator()
    script_id = resolve_script(script)
    output_dir = Path(output_dir)

    jobs = [(Path(src), output_dir / f"{Path(src).stem}.{script_id.value.lower()}.txt") for src in sources]
    clashes = sorted(name for name, count in Counter(dst.name for _, dst in jobs).items() if count > 1)
    if clashes:
        raise ValueError(f"Sources would overwrite each other in {output_dir}: {', '.join(clashes)}")
    ensure_dir(output_dir)

    def _convert(job: tuple[Path, Path]) -> Path:
        src, dst = job
        convert_text_file(src, dst, script_id, logger, also_convert_numbers, transliterator)
        return dst

    results = map_parallel_ordered(_convert, jobs, max_workers=workers)
    return list(tqdm(results, total=len(sources), desc="Converting files", unit="file", disable=not progress))


def _convert_records(
    records: Iterable[dict[str, Any]],
    field: str,
    scripts: Sequence[ScriptId],
    transliterator: Transliterator,
    also_convert_numbers: bool,
    stats: dict[str, int],
) -> Iterator[dict[str, Any]]:
    for record in records:
        stats["records"] += 1
        if field not in record:
            stats["skipped"] += 1
            yield record
            continue

        converted = dict(record)
        for script in scripts:
            converted[output_name(field, script)] = _convert_value(
                transliterator, record[field], script, also_convert_numbers
            )
        yield converted


def convert_jsonl(
    src: Path,
    dst: Path,
    field: str,
    scripts: Sequence[ScriptId | str],
    logger: logging.Logger,
    also_convert_numbers: bool = False,
    transliterator: Transliterator | None = None,
    progress: bool = False,
) -> int:
    """
    Add converted copies of a text field to every record of a JSONL file.

    Records without the field are copied unchanged.

    Args:
        src: Source JSONL file
        dst: Destination JSONL file, written atomically
        field: Name of the romanized text field
        scripts: Target scripts; each adds a "<field>_<script>" key
        logger: Logger instance
        also_convert_numbers: Map digits to the script's numerals
        transliterator: Converter to use (default: Transliterator())
        progress: Show a progress bar

    Returns:
        Number of records written
    """
    transliterator = transliterator or Transliterator()
    script_ids = [resolve_script(s) for s in scripts]
    src = Path(src)
    if not src.exists():
        raise FileNotFoundError(f"Input file not found: {src}")

    stats = {"records": 0, "skipped": 0}
    records = tqdm(read_jsonl(src), desc="Converting records", unit="record", disable=not progress)
    count = write_jsonl(
        Path(dst),
        _convert_records(records, field, script_ids, transliterator, also_convert_numbers, stats),
    )

    if stats["skipped"]:
        logger.warning(f"{stats['skipped']}/{stats['records']} records have no '{field}' field")
    log_with_context(
        logger,
        "info",
        f"Converted {count} records",
        src=str(src),
        dst=str(dst),
        scripts=[s.value for s in script_ids],
    )
    return count


def read_table(path: Path) -> pd.DataFrame:
    """
    Read a CSV or Parquet table.

    Raises:
        ValueError: If the file extension is not supported
    """
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix == ".parquet":
        return pd.read_parquet(path)
    if suffix == ".csv":
        # "na" is a Pali word, not a missing value
        return pd.read_csv(path, dtype=str, keep_default_na=False)
    raise ValueError(f"Unsupported table format: {path.suffix} (expected one of {', '.join(TABLE_SUFFIXES)})")


def write_table(path: Path, df: pd.DataFrame) -> None:
    """Write a CSV or Parquet table atomically."""
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix not in TABLE_SUFFIXES:
        raise ValueError(f"Unsupported table format: {path.suffix} (expected one of {', '.join(TABLE_SUFFIXES)})")

    def _write(tmp_path: Path) -> None:
        if suffix == ".parquet":
            df.to_parquet(tmp_path, engine="pyarrow", compression="zstd", index=False)
        else:
            df.to_csv(tmp_path, index=False, encoding="utf-8")

    atomic_write(path, _write)


def convert_table(
    src: Path,
    dst: Path,
    column: str,
    scripts: Sequence[ScriptId | str],
    logger: logging.Logger,
    also_convert_numbers: bool = False,
    transliterator: Transliterator | None = None,
) -> int:
    """
    Add one converted column per script to a CSV or Parquet table.

    Args:
        src: Source table (.csv or .parquet)
        dst: Destination table (.csv or .parquet), written atomically
        column: Name of the romanized text column
        scripts: Target scripts; each adds a "<column>_<script>" column
        logger: Logger instance
        also_convert_numbers: Map digits to the script's numerals
        transliterator: Converter to use (default: Transliterator())

    Returns:
        Number of rows written
    """
    transliterator = transliterator or Transliterator()
    script_ids = [resolve_script(s) for s in scripts]
    src = Path(src)
    if not src.exists():
        raise FileNotFoundError(f"Input file not found: {src}")

    df = read_table(src)
    if column not in df.columns:
        raise ValueError(f"Column '{column}' not found in {src} (columns: {', '.join(map(str, df.columns))})")

    for script in script_ids:
        df[output_name(column, script)] = df[column].map(
            lambda value, script=script: _convert_value(transliterator, value, script, also_convert_numbers)
        )

    write_table(Path(dst), df)

    logger.info(f"Converted {len(df)} rows of '{column}' to {', '.join(s.value for s in script_ids)}: {dst}")
    return len(df)
