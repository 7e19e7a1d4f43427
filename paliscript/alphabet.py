"""Romanized Pali alphabet shared by every target script."""

VOWELS = "aāiīuūeo"
# Devanagari also distinguishes ai (ē) and au (ō)
VOWELS_DEVANAGARI = "aāiīuūeēoō"

# Consonants that make a following vowel dependent and take cluster marks.
# The Sanskrit letters at the end have no glyph in any script and are copied
# through; niggahita is deliberately absent.
CLUSTER_CONSONANTS = "kgṅcjñṭḍṇtdnpbmyrlvshḷśṣṛṝḹ"

# Consonants that combine with a following "h" into one aspirated letter
ASPIRABLE = "bcdgjkptḍṭ"
ASPIRATE = "h"

# Every roman consonant with a glyph, in traditional order
CONSONANTS: tuple[str, ...] = (
    "k", "kh", "g", "gh", "ṅ",
    "c", "ch", "j", "jh", "ñ",
    "ṭ", "ṭh", "ḍ", "ḍh", "ṇ",
    "t", "th", "d", "dh", "n",
    "p", "ph", "b", "bh", "m",
    "y", "r", "l", "v", "s", "h", "ḷ", "ṃ",
)

DIGITS = "0123456789"

SINGLE_BAR = "|"
DOUBLE_BAR = "\u2016"
ABBREVIATION = "\u2024"
PERIOD = "."
RESERVED = "x"


def is_cluster_consonant(char: str | None) -> bool:
    """Check whether a roman character counts as a consonant for clustering."""
    return char is not None and len(char) == 1 and char in CLUSTER_CONSONANTS

