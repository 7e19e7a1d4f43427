"""File I/O with atomic writes."""

import json
import shutil
import tempfile
from collections.abc import Callable, Iterable, Iterator
from pathlib import Path
from typing import Any


def atomic_write(
    path: Path,
    write_func: Callable[[Path], None],
) -> None:
    """
    Atomically write to a file using temp file and move.

    Args:
        path: Destination path
        write_func: Function that writes to a given path
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    # Same directory keeps the move on one filesystem
    with tempfile.NamedTemporaryFile(
        mode="wb",
        dir=path.parent,
        delete=False,
        prefix=f".tmp.{path.name}.",
    ) as tmp_file:
        tmp_path = Path(tmp_file.name)

    try:
        write_func(tmp_path)
        shutil.move(str(tmp_path), str(path))
    except Exception:
        tmp_path.unlink(missing_ok=True)
        raise


def write_text_lines(path: Path, lines: Iterable[str]) -> int:
    """
    Write lines of text atomically, one per line.

    Args:
        path: Destination path
        lines: Lines without trailing newlines

    Returns:
        Number of lines written
    """
    count = 0

    def _write(tmp_path: Path) -> None:
        nonlocal count
        with tmp_path.open("w", encoding="utf-8") as f:
            for line in lines:
                f.write(line + "\n")
                count += 1

    atomic_write(path, _write)
    return count


def read_text_lines(path: Path) -> Iterator[str]:
    """
    Read a UTF-8 text file line by line.

    Args:
        path: Path to text file

    Yields:
        Lines without trailing newlines
    """
    with Path(path).open("r", encoding="utf-8") as f:
        for line in f:
            yield line.rstrip("\r\n")


def write_jsonl(path: Path, records: Iterable[dict[str, Any]]) -> int:
    """
    Write JSONL file atomically.

    Args:
        path: Destination path
        records: Iterable of dict records

    Returns:
        Number of records written
    """
    count = 0

    def _write(tmp_path: Path) -> None:
        nonlocal count
        with tmp_path.open("w", encoding="utf-8") as f:
            for record in records:
                f.write(json.dumps(record, ensure_ascii=False) + "\n")
                count += 1

    atomic_write(path, _write)
    return count


def read_jsonl(path: Path) -> Iterator[dict[str, Any]]:
    """
    Read JSONL file line by line, skipping blank lines.

    Args:
        path: Path to JSONL file

    Yields:
        Parsed JSON objects
    """
    with Path(path).open("r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if line:
                yield json.loads(line)


def ensure_dir(path: Path) -> Path:
    """
    Ensure directory exists.

    Args:
        path: Directory path

    Returns:
        Path object
    """
    path = Path(path)
    path.mkdir(parents=True, exist_ok=True)
    return path
