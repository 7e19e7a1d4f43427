"""Pytest fixtures for paliscript tests."""

import logging

import pytest

from paliscript.engine.converter import Transliterator
from paliscript.models import EngineConfig


@pytest.fixture
def transliterator():
    """Converter with the default configuration."""
    return Transliterator()


@pytest.fixture
def pali_only_transliterator():
    """Converter using the Pali-only Thai letterforms."""
    return Transliterator(EngineConfig(pali_only_thai_forms=True))


@pytest.fixture
def test_logger() -> logging.Logger:
    """Create a test logger."""
    logger = logging.getLogger("paliscript_test")
    logger.setLevel(logging.DEBUG)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setLevel(logging.DEBUG)
        logger.addHandler(handler)

    return logger


@pytest.fixture
def sample_roman_text():
    """Opening homage in romanized Pali."""
    return "namo tassa bhagavato arahato sammāsambuddhassa"


@pytest.fixture
def sample_roman_lines(sample_roman_text):
    """A few lines of romanized Pali with punctuation and a number."""
    return [
        sample_roman_text,
        "evaṃ me sutaṃ |",
        "1. buddhaṃ saraṇaṃ gacchāmi ‖",
    ]
