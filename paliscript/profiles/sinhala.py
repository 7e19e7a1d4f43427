"""Sinhala script profile."""

from paliscript.models import ScriptId
from paliscript.profiles.base import ScriptProfile, VowelSign


VIRAMA = "්"

INDEPENDENT_VOWELS = {
    "a": "අ",
    "ā": "ආ",
    "i": "ඉ",
    "ī": "ඊ",
    "u": "උ",
    "ū": "ඌ",
    "e": "එ",
    "o": "ඔ",
}

DEPENDENT_VOWELS = {
    "a": VowelSign(),
    "ā": VowelSign(after="ා"),
    "i": VowelSign(after="ි"),
    "ī": VowelSign(after="ී"),
    "u": VowelSign(after="ු"),
    "ū": VowelSign(after="ූ"),
    "e": VowelSign(after="ෙ"),
    "o": VowelSign(after="ො"),
}

CONSONANTS = {
    "k": "ක", "kh": "ඛ", "g": "ග", "gh": "ඝ", "ṅ": "ඞ",
    "c": "ච", "ch": "ඡ", "j": "ජ", "jh": "ඣ", "ñ": "ඤ",
    "ṭ": "ට", "ṭh": "ඨ", "ḍ": "ඩ", "ḍh": "ඪ", "ṇ": "ණ",
    "t": "ත", "th": "ථ", "d": "ද", "dh": "ධ", "n": "න",
    "p": "ප", "ph": "ඵ", "b": "බ", "bh": "භ", "m": "ම",
    "y": "ය", "r": "ර", "l": "ල", "v": "ව",
    "s": "ස", "h": "හ", "ḷ": "ළ", "ṃ": "ං",
}


def build_profile() -> ScriptProfile:
    """
    Build the Sinhala profile.

    Sinhala texts are printed with European digits and the roman bars, so
    neither digits nor bars are mapped.
    """
    return ScriptProfile(
        script=ScriptId.SINHALA,
        vowels="aāiīuūeo",
        independent_vowels=INDEPENDENT_VOWELS,
        dependent_vowels=DEPENDENT_VOWELS,
        consonants=CONSONANTS,
        cluster_mark=VIRAMA,
        final_mark=VIRAMA,
    )
