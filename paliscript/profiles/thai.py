"""Thai script profile."""

from paliscript.models import ScriptId
from paliscript.profiles.base import ScriptProfile, VowelSign


# Vowel carrier (o ang) used to write vowels without a consonant
CARRIER = "อ"
BINDU = "ฺ"

INDEPENDENT_VOWELS = {
    "a": CARRIER,
    "ā": CARRIER + "า",
    "i": CARRIER + "ิ",
    "ī": CARRIER + "ี",
    "u": CARRIER + "ุ",
    "ū": CARRIER + "ู",
    # sara e and sara o are written before the carrier
    "e": "เ" + CARRIER,
    "o": "โ" + CARRIER,
}

DEPENDENT_VOWELS = {
    "a": VowelSign(),
    "ā": VowelSign(after="า"),
    "i": VowelSign(after="ิ"),
    "ī": VowelSign(after="ี"),
    "u": VowelSign(after="ุ"),
    "ū": VowelSign(after="ู"),
    "e": VowelSign(before="เ"),
    "o": VowelSign(before="โ"),
}

CONSONANTS = {
    "k": "ก", "kh": "ข", "g": "ค", "gh": "ฆ", "ṅ": "ง",
    "c": "จ", "ch": "ฉ", "j": "ช", "jh": "ฌ", "ñ": "ญ",
    "ṭ": "ฏ", "ṭh": "ฐ", "ḍ": "ฑ", "ḍh": "ฒ", "ṇ": "ณ",
    "t": "ต", "th": "ถ", "d": "ท", "dh": "ธ", "n": "น",
    "p": "ป", "ph": "ผ", "b": "พ", "bh": "ภ", "m": "ม",
    "y": "ย", "r": "ร", "l": "ล", "v": "ว",
    "s": "ส", "h": "ห", "ḷ": "ฬ", "ṃ": "ํ",
}

# Private-use letterforms of yo-ying and tho-than without the lower flourish,
# as used by Pali-only Thai fonts
PALI_ONLY_CONSONANTS = {
    "ñ": "",
    "ṭh": "",
}

NUMERALS = "๐๑๒๓๔๕๖๗๘๙"


def build_profile(pali_only_forms: bool = False) -> ScriptProfile:
    """
    Build the Thai profile.

    Args:
        pali_only_forms: Use the Pali-only letterforms for yo-ying and tho-than

    Returns:
        Thai script profile
    """
    profile = ScriptProfile(
        script=ScriptId.THAI,
        vowels="aāiīuūeo",
        independent_vowels=INDEPENDENT_VOWELS,
        dependent_vowels=DEPENDENT_VOWELS,
        consonants=CONSONANTS,
        cluster_mark=BINDU,
        final_mark=BINDU,
        numerals=NUMERALS,
        single_bar="ฯ",
        double_bar="๚",
    )
    if pali_only_forms:
        return profile.with_consonants(PALI_ONLY_CONSONANTS)
    return profile
