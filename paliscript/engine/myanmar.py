"""Corrective passes over raw Myanmar output.

Whether the aa sign is written short or tall, and whether a stacked pair
becomes a ligature or a medial, depends on the surrounding consonants and
cannot be decided while scanning, so it is fixed up on the whole string.
"""

from collections.abc import Callable


VIRAMA = "္"
SHORT_AA = "ာ"
TALL_AA = "ါ"

KA = "က"
KHA = "ခ"
GA = "ဂ"
NGA = "င"
NYA = "ဉ"
NNYA = "ည"
DA = "ဒ"
DHA = "ဓ"
PA = "ပ"
MA = "မ"
WA = "ဝ"
SA = "သ"
GREAT_SA = "ဿ"

# Consonant (clusters) whose round shape would make a short aa look like a
# closing letter
TALL_AA_CLUSTERS = (
    KHA,
    GA,
    NGA,
    DA,
    PA,
    WA,
    NGA + VIRAMA + KHA,
    NGA + VIRAMA + GA,
    NGA + VIRAMA + NGA,
    DA + VIRAMA + DA,
    DA + VIRAMA + DHA,
    DA + VIRAMA + MA,
    DA + VIRAMA + WA,
)

# Clusters caught by the tall aa pass that keep the short form
SHORT_AA_CLUSTERS = (
    KA + VIRAMA + KHA,
    GA + VIRAMA + GA,
    PA + VIRAMA + PA,
    MA + VIRAMA + PA,
    VIRAMA + WA,
)

LIGATURES = {
    NYA + VIRAMA + NYA: NNYA,
    SA + VIRAMA + SA: GREAT_SA,
}

# Stacked ya, ra, wa and ha are written as medial signs
MEDIALS = {
    "ယ": "ျ",
    "ရ": "ြ",
    "ဝ": "ွ",
    "ဟ": "ှ",
}


def _replace_all(text: str, replacements: list[tuple[str, str]]) -> str:
    for old, new in replacements:
        text = text.replace(old, new)
    return text


def promote_tall_aa(text: str) -> str:
    """Use the tall aa after the consonants listed in TALL_AA_CLUSTERS."""
    return _replace_all(text, [(c + SHORT_AA, c + TALL_AA) for c in TALL_AA_CLUSTERS])


def revert_short_aa(text: str) -> str:
    """Restore the short aa where the tall aa pass overreached."""
    return _replace_all(text, [(c + TALL_AA, c + SHORT_AA) for c in SHORT_AA_CLUSTERS])


def collapse_ligatures(text: str) -> str:
    return _replace_all(text, list(LIGATURES.items()))


def convert_medials(text: str) -> str:
    return _replace_all(text, [(VIRAMA + c, medial) for c, medial in MEDIALS.items()])


# The short aa pass undoes part of the tall aa pass and matches on the virama
# that the medial pass removes
PASSES: tuple[Callable[[str], str], ...] = (
    promote_tall_aa,
    revert_short_aa,
    collapse_ligatures,
    convert_medials,
)


def postprocess(text: str) -> str:
    """
    Apply all Myanmar corrective passes in order.

    Args:
        text: Raw output of the Myanmar scan

    Returns:
        Corrected Myanmar text
    """
    for fix in PASSES:
        text = fix(text)
    return text
