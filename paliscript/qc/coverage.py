"""Roman alphabet coverage checks.

Conversion never rejects input: anything it does not recognise is copied
through. These checks report what would be copied, so decomposed
diacritics, Sanskrit-only letters and foreign characters can be found before
converting. Lines are lower-cased first, as they are for conversion.
"""

import logging
from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass

from paliscript.alphabet import ABBREVIATION, DIGITS, DOUBLE_BAR, PERIOD, RESERVED, SINGLE_BAR
from paliscript.engine.scanner import classify
from paliscript.models import ConversionOptions, EngineConfig, ScriptId
from paliscript.profiles.registry import lookup


# Passthrough characters that are expected in running text
IGNORED_CHARS = set(" \t\r\n,;:!?-—–()[]{}\"'‘’“”/*")
# Roman markers copied through on purpose
KNOWN_MARKERS = set(DIGITS) | {PERIOD, RESERVED, SINGLE_BAR, DOUBLE_BAR, ABBREVIATION}
_SKIPPED = IGNORED_CHARS | KNOWN_MARKERS


@dataclass
class CoverageResult:
    """Result of a coverage check."""

    script: ScriptId
    total_lines: int
    lines_with_issues: int
    unmapped_chars: Counter[str]
    examples: list[dict[str, str]]


def find_unmapped_chars(
    text: str,
    script: ScriptId | str,
    also_convert_numbers: bool = False,
    config: EngineConfig | None = None,
) -> set[str]:
    """
    Find characters that a conversion would copy through unchanged.

    Args:
        text: Romanized input, as it would be passed to the converter
        script: Target script
        also_convert_numbers: Whether digits would be converted
        config: Engine configuration

    Returns:
        Set of unmapped characters, excluding whitespace and common punctuation
    """
    profile = lookup(script, config)
    options = ConversionOptions(also_convert_numbers=also_convert_numbers)

    unmapped: set[str] = set()
    index = 0
    while index < len(text):
        token = classify(text, index, profile, options)
        # Consonants without a glyph (e.g. Sanskrit sibilants) are copied too
        if token.glyph == token.roman and token.roman not in _SKIPPED:
            unmapped.add(token.roman)
        index += token.consumed

    return unmapped


def check_lines_coverage(
    lines: Iterable[str],
    script: ScriptId | str,
    logger: logging.Logger,
    max_examples: int = 10,
    also_convert_numbers: bool = False,
    config: EngineConfig | None = None,
) -> CoverageResult:
    """
    Check coverage of many lines of romanized text.

    Lines are lower-cased first, the way fragments are before conversion.

    Args:
        lines: Lines of romanized text
        script: Target script
        logger: Logger instance
        max_examples: Maximum number of examples to collect
        also_convert_numbers: Whether digits would be converted
        config: Engine configuration

    Returns:
        Coverage result
    """
    script_id = lookup(script, config).script

    unmapped_chars: Counter[str] = Counter()
    examples: list[dict[str, str]] = []
    total_lines = 0
    lines_with_issues = 0

    for line_no, line in enumerate(lines, start=1):
        total_lines += 1
        chars = find_unmapped_chars(line.lower(), script_id, also_convert_numbers, config)

        if chars:
            lines_with_issues += 1
            unmapped_chars.update(chars)

            if len(examples) < max_examples:
                examples.append(
                    {
                        "line": str(line_no),
                        "text": line[:100],
                        "unmapped": ", ".join(sorted(chars)),
                    }
                )

    logger.info(
        f"Found {lines_with_issues}/{total_lines} lines with characters "
        f"not converted to {script_id.value}"
    )

    return CoverageResult(
        script=script_id,
        total_lines=total_lines,
        lines_with_issues=lines_with_issues,
        unmapped_chars=unmapped_chars,
        examples=examples,
    )
