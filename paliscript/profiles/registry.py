"""Lookup of script profiles by script identifier."""

from collections.abc import Callable
from functools import lru_cache

from paliscript.models import EngineConfig, ScriptId
from paliscript.profiles import devanagari, khmer, myanmar, sinhala, thai
from paliscript.profiles.base import ScriptProfile


class UnknownScriptError(ValueError):
    """Raised for a script identifier with no profile."""

    def __init__(self, script: object):
        self.script = script
        known = ", ".join(s.value for s in ScriptId)
        super().__init__(f"Unknown script: {script!r} (expected one of {known})")


_BUILDERS: dict[ScriptId, Callable[[EngineConfig], ScriptProfile]] = {
    ScriptId.THAI: lambda config: thai.build_profile(config.pali_only_thai_forms),
    ScriptId.KHMER: lambda config: khmer.build_profile(),
    ScriptId.MYANMAR: lambda config: myanmar.build_profile(),
    ScriptId.SINHALA: lambda config: sinhala.build_profile(),
    ScriptId.DEVANAGARI: lambda config: devanagari.build_profile(),
}


def resolve_script(script: ScriptId | str) -> ScriptId:
    """
    Coerce a script name into a ScriptId.

    Args:
        script: ScriptId or its name in any case

    Returns:
        Matching ScriptId

    Raises:
        UnknownScriptError: If no script has that name
    """
    if isinstance(script, ScriptId):
        return script
    if isinstance(script, str):
        try:
            return ScriptId(script.strip().upper())
        except ValueError:
            pass
    raise UnknownScriptError(script)


@lru_cache(maxsize=None)
def _build(script: ScriptId, config: EngineConfig) -> ScriptProfile:
    return _BUILDERS[script](config)


def lookup(script: ScriptId | str, config: EngineConfig | None = None) -> ScriptProfile:
    """
    Get the profile for a script.

    Args:
        script: Target script
        config: Engine configuration (default: EngineConfig())

    Returns:
        Immutable script profile, shared between callers

    Raises:
        UnknownScriptError: If the script is not supported
    """
    return _build(resolve_script(script), config or EngineConfig())
