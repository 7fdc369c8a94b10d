"""
Dictionaries: "is this a real word in language L?"

Two implementations of the session's Dictionary protocol:

  - WordListDictionary: set membership over a word list for one language.
    Deterministic and fast; what tests and scripted replays use.
  - NltkDictionary: the NLTK `words` corpus (English). The corpus is loaded
    on first lookup; pass download=True to fetch it if it isn't installed.

Lookups are case-insensitive. A dictionary only knows its own language;
asking about any other language returns False.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator, Set

from .io import load_words


class WordListDictionary:
    def __init__(self, words: Iterable[str], language: str = "en"):
        self.language = language
        self._words: Set[str] = {w.strip().lower() for w in words if w.strip()}

    @classmethod
    def from_file(cls, path: Path | str, language: str = "en") -> "WordListDictionary":
        return cls(load_words(path), language=language)

    def is_valid_word(self, word: str, language: str = "en") -> bool:
        if language != self.language:
            return False
        return word.strip().lower() in self._words

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._words))

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word.strip().lower() in self._words


class NltkDictionary:
    """
    English dictionary backed by `nltk.corpus.words`.

    Args:
      language : language tag this dictionary answers for
      corpus   : object with a `words()` method; defaults to nltk's words corpus
      download : fetch the corpus with nltk.download("words") if it's missing
    """

    def __init__(self, language: str = "en", corpus=None, download: bool = False):
        self.language = language
        self.download = download
        self._corpus = corpus
        self._words: Set[str] | None = None

    def _load(self) -> Set[str]:
        if self._words is not None:
            return self._words

        corpus = self._corpus
        if corpus is None:
            import nltk
            from nltk.corpus import words as corpus

            if self.download:
                try:
                    nltk.data.find("corpora/words")
                except LookupError:
                    nltk.download("words", quiet=True)

        self._words = {w.lower() for w in corpus.words()}
        return self._words

    def is_valid_word(self, word: str, language: str = "en") -> bool:
        if language != self.language:
            return False
        return word.strip().lower() in self._load()

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._load()))


def open_dictionary(source: str, language: str = "en"):
    """
    Build a dictionary from a CLI-style source string.

      "nltk"        -> NltkDictionary (downloads the corpus if missing)
      anything else -> WordListDictionary read from that path
    """
    if source == "nltk":
        return NltkDictionary(language=language, download=True)
    return WordListDictionary.from_file(source, language=language)
