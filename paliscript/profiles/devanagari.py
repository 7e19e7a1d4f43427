"""Devanagari script profile."""

from paliscript.models import ScriptId
from paliscript.profiles.base import ScriptProfile, VowelSign


VIRAMA = "्"

INDEPENDENT_VOWELS = {
    "a": "अ",
    "ā": "आ",
    "i": "इ",
    "ī": "ई",
    "u": "उ",
    "ū": "ऊ",
    "e": "ए",
    "ē": "ऐ",
    "o": "ओ",
    "ō": "औ",
}

DEPENDENT_VOWELS = {
    "a": VowelSign(),
    "ā": VowelSign(after="ा"),
    "i": VowelSign(after="ि"),
    "ī": VowelSign(after="ी"),
    "u": VowelSign(after="ु"),
    "ū": VowelSign(after="ू"),
    "e": VowelSign(after="े"),
    "ē": VowelSign(after="ै"),
    "o": VowelSign(after="ो"),
    "ō": VowelSign(after="ौ"),
}

CONSONANTS = {
    "k": "क", "kh": "ख", "g": "ग", "gh": "घ", "ṅ": "ङ",
    "c": "च", "ch": "छ", "j": "ज", "jh": "झ", "ñ": "ञ",
    "ṭ": "ट", "ṭh": "ठ", "ḍ": "ड", "ḍh": "ढ", "ṇ": "ण",
    "t": "त", "th": "थ", "d": "द", "dh": "ध", "n": "न",
    "p": "प", "ph": "फ", "b": "ब", "bh": "भ", "m": "म",
    "y": "य", "r": "र", "l": "ल", "v": "व",
    "s": "स", "h": "ह", "ḷ": "ळ", "ṃ": "ं",
}

NUMERALS = "०१२३४५६७८९"


def build_profile() -> ScriptProfile:
    """Build the Devanagari profile."""
    return ScriptProfile(
        script=ScriptId.DEVANAGARI,
        vowels="aāiīuūeēoō",
        independent_vowels=INDEPENDENT_VOWELS,
        dependent_vowels=DEPENDENT_VOWELS,
        consonants=CONSONANTS,
        cluster_mark=VIRAMA,
        final_mark=VIRAMA,
        numerals=NUMERALS,
        single_bar="।",
        double_bar="॥",
        abbreviation="॰",
    )
