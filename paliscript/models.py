"""Data models for script conversion."""

from dataclasses import dataclass
from enum import Enum


class ScriptId(str, Enum):
    """Target script."""

    THAI = "THAI"
    KHMER = "KHMER"
    MYANMAR = "MYANMAR"
    SINHALA = "SINHALA"
    DEVANAGARI = "DEVANAGARI"


@dataclass(frozen=True)
class ConversionOptions:
    """Per-call conversion options."""

    also_convert_numbers: bool = False


@dataclass(frozen=True)
class EngineConfig:
    """Process-level configuration, fixed before any conversion starts."""

    # Swap Thai yo-ying and tho-than for the Pali-only letterforms
    pali_only_thai_forms: bool = False
