from typing import Iterable, Sequence


class WordTable(Sequence[str]):
    """Immutable, ordered list of words. Indices never change once assigned."""

    __slots__ = ("_words",)

    def __init__(self, words: Iterable[str] = ()):
        self._words = tuple(words)

    def __getitem__(self, i):
        return self._words[i]

    def __len__(self):
        return len(self._words)

    def __iter__(self):
        return iter(self._words)

    def __eq__(self, other):
        if isinstance(other, WordTable):
            return self._words == other._words
        return NotImplemented

    def __hash__(self):
        return hash(self._words)

    def __repr__(self):
        return f"WordTable({list(self._words)!r})"


def load_words(path: str) -> WordTable:
    """Read one word per line, skipping blank lines. Order is preserved."""
    words = []
    with open(path) as f:
        for line in f:
            word = line.strip()
            if word:
                words.append(word)
    return WordTable(words)
