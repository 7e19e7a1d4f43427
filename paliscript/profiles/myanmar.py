"""Myanmar script profile."""

from paliscript.alphabet import ASPIRABLE, ASPIRATE, is_cluster_consonant
from paliscript.engine.myanmar import SHORT_AA, VIRAMA, postprocess
from paliscript.models import ScriptId
from paliscript.profiles.base import ScriptProfile, VowelSign


ASAT = "်"
# Pre-base e is U+102A, not U+1031
PREBASE_E = "ဪ"

INDEPENDENT_VOWELS = {
    "a": "အ",
    "ā": "အ" + SHORT_AA,
    "i": "ဣ",
    "ī": "ဤ",
    "u": "ဥ",
    "ū": "ဦ",
    "e": "ဧ",
    "o": "ဩ",
}

DEPENDENT_VOWELS = {
    "a": VowelSign(),
    "ā": VowelSign(after=SHORT_AA),
    "i": VowelSign(after="ိ"),
    "ī": VowelSign(after="ီ"),
    "u": VowelSign(after="ု"),
    "ū": VowelSign(after="ူ"),
    "e": VowelSign(before=PREBASE_E),
    "o": VowelSign(before=PREBASE_E, after=SHORT_AA),
}

CONSONANTS = {
    "k": "က", "kh": "ခ", "g": "ဂ", "gh": "ဃ", "ṅ": "င",
    "c": "စ", "ch": "ဆ", "j": "ဇ", "jh": "ဈ", "ñ": "ဉ",
    "ṭ": "ဋ", "ṭh": "ဌ", "ḍ": "ဍ", "ḍh": "ဎ", "ṇ": "ဏ",
    "t": "တ", "th": "ထ", "d": "ဒ", "dh": "ဓ", "n": "န",
    "p": "ပ", "ph": "ဖ", "b": "ဗ", "bh": "ဘ", "m": "မ",
    "y": "ယ", "r": "ရ", "l": "လ", "v": "ဝ",
    "s": "သ", "h": "ဟ", "ḷ": "ဠ", "ṃ": "ံ",
}

NUMERALS = "".join(chr(0x1040 + d) for d in range(10))


def cluster_span(text: str, index: int) -> int:
    """
    Count the glyphs a pre-base vowel has to jump over.

    The vowel at text[index] follows a consonant. A single consonant (plain
    or aspirated) is one glyph, a stacked pair is consonant + virama +
    consonant (3), and a stacked triple is 5.

    Args:
        text: Romanized input
        index: Position of the vowel in text

    Returns:
        Number of already emitted glyphs to insert in front of
    """
    if index < 1:
        return 0

    def consonant_at(i: int) -> bool:
        return i >= 0 and is_cluster_consonant(text[i])

    if text[index - 1] == ASPIRATE:
        if index >= 2 and text[index - 2] in ASPIRABLE:
            # aspirated letter, possibly stacked under a consonant
            return 3 if consonant_at(index - 3) else 1
        return 3 if consonant_at(index - 2) else 1

    if index >= 3:
        if not consonant_at(index - 2):
            return 1
        if text[index - 2] == ASPIRATE:
            return 5 if consonant_at(index - 4) else 3
        return 5 if consonant_at(index - 3) else 3

    return 3 if consonant_at(index - 2) else 1


def build_profile() -> ScriptProfile:
    """Build the Myanmar profile."""
    return ScriptProfile(
        script=ScriptId.MYANMAR,
        vowels="aāiīuūeo",
        independent_vowels=INDEPENDENT_VOWELS,
        dependent_vowels=DEPENDENT_VOWELS,
        consonants=CONSONANTS,
        cluster_mark=VIRAMA,
        final_mark=ASAT,
        numerals=NUMERALS,
        single_bar="၊",
        double_bar="။",
        prebase_span=cluster_span,
        postprocess=postprocess,
    )
