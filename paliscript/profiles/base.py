"""Script profile record shared by all target scripts."""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType

from paliscript.alphabet import ABBREVIATION, CONSONANTS, DIGITS, DOUBLE_BAR, SINGLE_BAR
from paliscript.models import ScriptId


@dataclass(frozen=True)
class VowelSign:
    """A dependent vowel sign, split around the consonant it attaches to."""

    after: str = ""
    # Written before the consonant cluster although pronounced after it
    before: str = ""


def one_glyph_span(text: str, index: int) -> int:
    """Pre-base vowels go in front of the last emitted glyph only."""
    return 1


@dataclass(frozen=True)
class ScriptProfile:
    """
    Glyph tables and marks for one target script.

    Attributes:
        script: Script identifier
        vowels: Roman vowels recognised for this script
        independent_vowels: Roman vowel to independent rendering
        dependent_vowels: Roman vowel to dependent sign
        consonants: Roman consonant (letter or digraph) to glyph
        cluster_mark: Mark joining a consonant to a following consonant
        final_mark: Mark killing the inherent vowel of a final consonant
        numerals: Ten digit glyphs, or None to leave digits alone
        single_bar: Sentence-end mark, or None to leave "|" alone
        double_bar: Section-end mark, or None
        abbreviation: Abbreviation mark, or None
        prebase_span: Number of emitted glyphs a pre-base vowel jumps over
        postprocess: Whole-string fix-ups applied after the scan
    """

    script: ScriptId
    vowels: str
    independent_vowels: Mapping[str, str]
    dependent_vowels: Mapping[str, VowelSign]
    consonants: Mapping[str, str]
    cluster_mark: str
    final_mark: str
    numerals: str | None = None
    single_bar: str | None = None
    double_bar: str | None = None
    abbreviation: str | None = None
    prebase_span: Callable[[str, int], int] = field(default=one_glyph_span)
    postprocess: Callable[[str], str] | None = None

    def __post_init__(self) -> None:
        missing = [c for c in CONSONANTS if c not in self.consonants]
        if missing:
            raise ValueError(f"{self.script.value} profile lacks consonants: {', '.join(missing)}")
        for v in self.vowels:
            if v not in self.independent_vowels or v not in self.dependent_vowels:
                raise ValueError(f"{self.script.value} profile lacks vowel: {v}")
        if self.numerals is not None and len(self.numerals) != len(DIGITS):
            raise ValueError(f"{self.script.value} profile needs {len(DIGITS)} numerals")

        # Freeze the tables
        object.__setattr__(self, "independent_vowels", MappingProxyType(dict(self.independent_vowels)))
        object.__setattr__(self, "dependent_vowels", MappingProxyType(dict(self.dependent_vowels)))
        object.__setattr__(self, "consonants", MappingProxyType(dict(self.consonants)))

    def is_vowel(self, char: str | None) -> bool:
        return char is not None and len(char) == 1 and char in self.vowels

    def consonant(self, roman: str) -> str | None:
        """Glyph for a roman consonant or aspirated digraph."""
        return self.consonants.get(roman)

    def numeral(self, digit: str) -> str | None:
        if self.numerals is None:
            return None
        return self.numerals[DIGITS.index(digit)]

    def punctuation(self, char: str) -> str | None:
        """Script mark for a roman punctuation marker, if this script has one."""
        if char == SINGLE_BAR:
            return self.single_bar
        if char == DOUBLE_BAR:
            return self.double_bar
        if char == ABBREVIATION:
            return self.abbreviation
        return None

    def with_consonants(self, replacements: Mapping[str, str]) -> "ScriptProfile":
        """Copy of this profile with some consonant glyphs replaced."""
        consonants = dict(self.consonants)
        consonants.update(replacements)
        return replace(self, consonants=consonants)
