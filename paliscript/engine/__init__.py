"""Transliteration engine."""
