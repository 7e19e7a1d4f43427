"""Romanized Pali to Thai, Khmer, Myanmar, Sinhala and Devanagari script."""

from paliscript.engine.converter import Transliterator, convert
from paliscript.models import ConversionOptions, EngineConfig, ScriptId
from paliscript.profiles.registry import UnknownScriptError, lookup


__version__ = "1.0.0"

__all__ = [
    "ConversionOptions",
    "EngineConfig",
    "ScriptId",
    "Transliterator",
    "UnknownScriptError",
    "convert",
    "lookup",
]
