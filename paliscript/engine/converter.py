"""Romanized Pali to target script conversion."""

import logging

from paliscript.alphabet import is_cluster_consonant
from paliscript.engine.scanner import TokenKind, classify
from paliscript.models import ConversionOptions, EngineConfig, ScriptId
from paliscript.profiles.base import ScriptProfile
from paliscript.profiles.registry import lookup


logger = logging.getLogger(__name__)


def _place_vowel(out: list[str], text: str, index: int, vowel: str, profile: ScriptProfile) -> None:
    # Independent unless it directly follows a consonant letter
    if not out or not is_cluster_consonant(text[index - 1]):
        out.extend(profile.independent_vowels[vowel])
        return

    sign = profile.dependent_vowels[vowel]
    if sign.before:
        at = max(len(out) - profile.prebase_span(text, index), 0)
        out[at:at] = sign.before
    out.extend(sign.after)


def _consonant_mark(profile: ScriptProfile, following: str | None) -> str:
    if following is None:
        return profile.final_mark
    if is_cluster_consonant(following):
        return profile.cluster_mark
    if not profile.is_vowel(following):
        return profile.final_mark
    return ""


def transliterate(text: str, profile: ScriptProfile, options: ConversionOptions) -> str:
    """
    Convert romanized text with a given profile.

    Args:
        text: Lower-cased romanized Pali
        profile: Target script profile
        options: Conversion options

    Returns:
        Text in the target script; unknown characters are copied unchanged
    """
    out: list[str] = []
    index = 0

    while index < len(text):
        token = classify(text, index, profile, options)
        next_index = index + token.consumed

        if token.kind is TokenKind.VOWEL:
            _place_vowel(out, text, index, token.roman, profile)
        elif token.kind is TokenKind.CONSONANT:
            out.extend(token.glyph)
            following = text[next_index] if next_index < len(text) else None
            out.extend(_consonant_mark(profile, following))
        else:
            out.extend(token.glyph)

        index = next_index

    result = "".join(out)
    if profile.postprocess is not None:
        result = profile.postprocess(result)
    return result


class Transliterator:
    """
    Converter bound to one engine configuration.

    The configuration (e.g. the Thai Pali-only letterforms) is fixed at
    construction, so one instance can be shared between threads.
    """

    def __init__(self, config: EngineConfig | None = None):
        self.config = config or EngineConfig()
        logger.debug(f"Transliterator ready with {self.config}")

    def profile(self, script: ScriptId | str) -> ScriptProfile:
        return lookup(script, self.config)

    def convert(self, text: str, script: ScriptId | str, also_convert_numbers: bool = False) -> str:
        """
        Convert romanized Pali text.

        Args:
            text: Lower-cased romanized Pali
            script: Target script
            also_convert_numbers: Map digits to the script's numerals

        Returns:
            Converted text

        Raises:
            UnknownScriptError: If the script is not supported
        """
        options = ConversionOptions(also_convert_numbers=also_convert_numbers)
        return transliterate(text, self.profile(script), options)


def convert(
    text: str,
    script: ScriptId | str,
    also_convert_numbers: bool = False,
    config: EngineConfig | None = None,
) -> str:
    """
    Convert romanized Pali text to a target script.

    Args:
        text: Lower-cased romanized Pali
        script: Target script
        also_convert_numbers: Map digits to the script's numerals
        config: Engine configuration (default: EngineConfig())

    Returns:
        Converted text
    """
    options = ConversionOptions(also_convert_numbers=also_convert_numbers)
    return transliterate(text, lookup(script, config), options)
