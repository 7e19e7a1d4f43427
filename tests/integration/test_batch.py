"""Integration tests for batch conversion of files and tables."""

import json
import logging
from pathlib import Path

import pandas as pd
import pytest

from paliscript.batch import (
    convert_jsonl,
    convert_table,
    convert_text_file,
    convert_text_files,
    output_name,
)
from paliscript.models import ScriptId


@pytest.fixture
def roman_file(tmp_path: Path, sample_roman_lines) -> Path:
    path = tmp_path / "homage.txt"
    path.write_text("\n".join(sample_roman_lines) + "\n", encoding="utf-8")
    return path


class TestTextFiles:
    def test_convert_text_file(self, tmp_path: Path, test_logger: logging.Logger):
        src = tmp_path / "in.txt"
        src.write_text("Namo\n\n1. tassa |\n", encoding="utf-8")
        dst = tmp_path / "out" / "in.deva.txt"

        count = convert_text_file(src, dst, ScriptId.DEVANAGARI, test_logger, also_convert_numbers=True)

        assert count == 3
        assert dst.read_text(encoding="utf-8") == "नमो\n\n१. तस्स ।\n"

    def test_line_count_kept(self, tmp_path: Path, roman_file: Path, test_logger: logging.Logger):
        dst = tmp_path / "homage.myanmar.txt"

        count = convert_text_file(roman_file, dst, ScriptId.MYANMAR, test_logger)

        lines = dst.read_text(encoding="utf-8").splitlines()
        assert count == len(lines) == 3
        assert lines[1].endswith("\u104a")

    def test_missing_source(self, tmp_path: Path, test_logger: logging.Logger):
        with pytest.raises(FileNotFoundError):
            convert_text_file(tmp_path / "nope.txt", tmp_path / "out.txt", "THAI", test_logger)

    def test_convert_many_files_in_order(self, tmp_path: Path, test_logger: logging.Logger):
        sources = []
        for i, word in enumerate(["ka", "kha", "ga", "gha", "ṅa"]):
            path = tmp_path / f"w{i}.txt"
            path.write_text(word + "\n", encoding="utf-8")
            sources.append(path)

        outputs = convert_text_files(sources, tmp_path / "out", ScriptId.SINHALA, test_logger, workers=3)

        assert [p.name for p in outputs] == [f"w{i}.sinhala.txt" for i in range(5)]
        assert [p.read_text(encoding="utf-8").strip() for p in outputs] == ["ක", "ඛ", "ග", "ඝ", "ඞ"]

    def test_same_stem_in_different_directories(self, tmp_path: Path, test_logger: logging.Logger):
        sources = []
        for folder, word in [("a", "ka"), ("b", "ki")]:
            path = tmp_path / folder / "sutta.txt"
            path.parent.mkdir()
            path.write_text(word + "\n", encoding="utf-8")
            sources.append(path)
        out_dir = tmp_path / "out"

        with pytest.raises(ValueError, match="sutta.thai.txt"):
            convert_text_files(sources, out_dir, ScriptId.THAI, test_logger)

        assert not out_dir.exists()

    def test_creates_output_dir(self, tmp_path: Path, test_logger: logging.Logger):
        src = tmp_path / "a.txt"
        src.write_text("ka\n", encoding="utf-8")
        out_dir = tmp_path / "nested" / "out"

        outputs = convert_text_files([src], out_dir, ScriptId.THAI, test_logger, workers=1)

        assert out_dir.is_dir()
        assert outputs == [out_dir / "a.thai.txt"]


class TestJsonl:
    def test_adds_one_key_per_script(self, tmp_path: Path, test_logger: logging.Logger):
        src = tmp_path / "segments.jsonl"
        records = [
            {"segment_id": "s1", "text": "Buddho"},
            {"segment_id": "s2", "note": "no text"},
        ]
        src.write_text("\n".join(json.dumps(r) for r in records) + "\n", encoding="utf-8")
        dst = tmp_path / "converted.jsonl"

        count = convert_jsonl(src, dst, "text", ["thai", ScriptId.KHMER], test_logger)

        assert count == 2
        written = [json.loads(line) for line in dst.read_text(encoding="utf-8").splitlines()]
        assert written[0] == {
            "segment_id": "s1",
            "text": "Buddho",
            "text_thai": "พุทฺโธ",
            "text_khmer": "ពុទ្ធោ",
        }
        assert written[1] == records[1]

    def test_non_text_value_kept(self, tmp_path: Path, test_logger: logging.Logger):
        src = tmp_path / "segments.jsonl"
        src.write_text('{"text": null}\n', encoding="utf-8")
        dst = tmp_path / "converted.jsonl"

        convert_jsonl(src, dst, "text", [ScriptId.MYANMAR], test_logger)

        assert json.loads(dst.read_text(encoding="utf-8")) == {"text": None, "text_myanmar": None}


class TestTables:
    def test_csv(self, tmp_path: Path, test_logger: logging.Logger):
        src = tmp_path / "words.csv"
        pd.DataFrame({"id": ["1", "2"], "text": ["na", "Dhamma"]}).to_csv(src, index=False)
        dst = tmp_path / "words_out.csv"

        rows = convert_table(src, dst, "text", [ScriptId.THAI, ScriptId.DEVANAGARI], test_logger)

        assert rows == 2
        df = pd.read_csv(dst, dtype=str, keep_default_na=False)
        # "na" must not be read as a missing value
        assert list(df["text_thai"]) == ["น", "ธมฺม"]
        assert list(df["text_devanagari"]) == ["न", "धम्म"]

    def test_parquet(self, tmp_path: Path, test_logger: logging.Logger):
        pytest.importorskip("pyarrow")
        src = tmp_path / "words.parquet"
        pd.DataFrame({"text": ["ñāṇa", None]}).to_parquet(src, index=False)
        dst = tmp_path / "words_out.parquet"

        convert_table(src, dst, "text", ["sinhala"], test_logger)

        df = pd.read_parquet(dst)
        assert df[output_name("text", ScriptId.SINHALA)].iloc[0] == "ඤාණ"
        assert df["text_sinhala"].isna().iloc[1]

    def test_missing_column(self, tmp_path: Path, test_logger: logging.Logger):
        src = tmp_path / "words.csv"
        pd.DataFrame({"word": ["na"]}).to_csv(src, index=False)

        with pytest.raises(ValueError, match="Column 'text' not found"):
            convert_table(src, tmp_path / "out.csv", "text", ["THAI"], test_logger)

    def test_unsupported_format(self, tmp_path: Path, test_logger: logging.Logger):
        src = tmp_path / "words.xlsx"
        src.write_bytes(b"")

        with pytest.raises(ValueError, match="Unsupported table format"):
            convert_table(src, tmp_path / "out.csv", "text", ["THAI"], test_logger)
