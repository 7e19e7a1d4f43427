"""Conversion of a displayed document's text fragments.

A viewer keeps the romanized text of every fragment it shows, converts the
fragments when the reader picks a script, and restores the saved originals
when the reader goes back to roman.
"""

from collections.abc import Iterable

from paliscript.engine.converter import Transliterator
from paliscript.models import ScriptId


class FragmentCache:
    """Romanized originals of a document's text fragments."""

    def __init__(self, fragments: Iterable[str], transliterator: Transliterator | None = None):
        self._originals: tuple[str, ...] = tuple(fragments)
        self.transliterator = transliterator or Transliterator()

    def __len__(self) -> int:
        return len(self._originals)

    def to_roman(self) -> list[str]:
        """Return the saved romanized fragments."""
        return list(self._originals)

    def to_script(self, script: ScriptId | str, also_convert_numbers: bool = False) -> list[str]:
        """
        Convert every fragment from its saved original.

        Fragments are lower-cased first, since the engine does not case-fold.

        Args:
            script: Target script
            also_convert_numbers: Map digits to the script's numerals

        Returns:
            Converted fragments, in the original order
        """
        return [
            self.transliterator.convert(fragment.lower(), script, also_convert_numbers)
            for fragment in self._originals
        ]
