"""Khmer script profile."""

from paliscript.models import ScriptId
from paliscript.profiles.base import ScriptProfile, VowelSign


COENG = "្"
KILLER = "៑"

INDEPENDENT_VOWELS = {
    "a": "អ",
    # qa followed by the aa sign
    "ā": "អា",
    "i": "ឥ",
    "ī": "ឦ",
    "u": "ឧ",
    "ū": "ឩ",
    "e": "ឯ",
    "o": "ឱ",
}

DEPENDENT_VOWELS = {
    "a": VowelSign(),
    "ā": VowelSign(after="ា"),
    "i": VowelSign(after="ិ"),
    "ī": VowelSign(after="ី"),
    "u": VowelSign(after="ុ"),
    "ū": VowelSign(after="ូ"),
    "e": VowelSign(after="េ"),
    "o": VowelSign(after="ោ"),
}

CONSONANTS = {
    "k": "ក", "kh": "ខ", "g": "គ", "gh": "ឃ", "ṅ": "ង",
    "c": "ច", "ch": "ឆ", "j": "ជ", "jh": "ឈ", "ñ": "ញ",
    "ṭ": "ដ", "ṭh": "ឋ", "ḍ": "ឌ", "ḍh": "ឍ", "ṇ": "ណ",
    "t": "ត", "th": "ថ", "d": "ទ", "dh": "ធ", "n": "ន",
    "p": "ប", "ph": "ផ", "b": "ព", "bh": "ភ", "m": "ម",
    "y": "យ", "r": "រ", "l": "ល", "v": "វ",
    "s": "ស", "h": "ហ", "ḷ": "ឡ", "ṃ": "ំ",
}

NUMERALS = "០១២៣៤៥៦៧៨៩"


def build_profile() -> ScriptProfile:
    """Build the Khmer profile."""
    return ScriptProfile(
        script=ScriptId.KHMER,
        vowels="aāiīuūeo",
        independent_vowels=INDEPENDENT_VOWELS,
        dependent_vowels=DEPENDENT_VOWELS,
        consonants=CONSONANTS,
        cluster_mark=COENG,
        final_mark=KILLER,
        numerals=NUMERALS,
        single_bar="។",
        double_bar="៕",
    )
