"""Per-script glyph tables."""
