"""Classification of romanized input into tokens."""

from dataclasses import dataclass
from enum import Enum

from paliscript.alphabet import ASPIRABLE, ASPIRATE, DIGITS, PERIOD, RESERVED, is_cluster_consonant
from paliscript.models import ConversionOptions
from paliscript.profiles.base import ScriptProfile


class TokenKind(str, Enum):
    """How a token is placed in the output."""

    VOWEL = "VOWEL"
    CONSONANT = "CONSONANT"
    OTHER = "OTHER"


@dataclass(frozen=True)
class Token:
    """One unit of romanized input and its glyph."""

    kind: TokenKind
    roman: str
    glyph: str

    @property
    def consumed(self) -> int:
        """Number of input characters this token covers (1, or 2 for a digraph)."""
        return len(self.roman)


def _other(roman: str, glyph: str | None = None) -> Token:
    return Token(TokenKind.OTHER, roman, glyph or roman)


def classify(
    text: str,
    index: int,
    profile: ScriptProfile,
    options: ConversionOptions,
) -> Token:
    """
    Classify the input at a position.

    Args:
        text: Romanized input
        index: Position to classify
        profile: Target script profile
        options: Conversion options

    Returns:
        Token starting at index. Vowel tokens carry the independent form;
        the engine decides the final placement.
    """
    char = text[index]

    if char in DIGITS:
        return _other(char, profile.numeral(char) if options.also_convert_numbers else None)

    # A period cannot be told apart from a decorative dot, so it stays as is
    if char == PERIOD or char == RESERVED:
        return _other(char)

    mark = profile.punctuation(char)
    if mark is not None:
        return _other(char, mark)

    if profile.is_vowel(char):
        return Token(TokenKind.VOWEL, char, profile.independent_vowels[char])

    roman = char
    if char in ASPIRABLE and text[index + 1 : index + 2] == ASPIRATE:
        roman = char + ASPIRATE
    glyph = profile.consonant(roman)

    if is_cluster_consonant(char):
        return Token(TokenKind.CONSONANT, roman, glyph or char)

    # niggahita has a glyph but never clusters; anything else passes through
    return _other(roman, glyph)
