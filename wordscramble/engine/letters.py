"""
Letter-multiset checks against a root word.

Conventions:
  - words are compared after normalization (strip + lowercase)
  - every letter of the root can be consumed at most once, so repeated
    letters in a candidate need repeated letters in the root
    ("pepper" needs three 'p's, two 'e's and one 'r')

Algorithm (consume one instance per letter):
  1) Count the root's letters.
  2) Walk the candidate; each letter consumes one remaining instance.
  3) Fail as soon as a letter has nothing left to consume.
"""

from collections import Counter


def normalize(word: str) -> str:
    """
    Canonical form used for every comparison: trimmed and lowercased.

    Examples:
      normalize("  Silk\\n") -> "silk"
      normalize("   ")       -> ""
    """
    return word.strip().lower()


def can_spell(word: str, root: str) -> bool:
    """
    Return True if `word` can be built from the letters of `root`.

    Each letter of `root` may be used at most once. Both arguments are
    normalized first, so case and surrounding whitespace don't matter.

    Examples:
      can_spell("silk", "silkworm")      -> True
      can_spell("silkworms", "silkworm") -> False   (only one 's')
      can_spell("xyz", "silkworm")       -> False
    """
    word = normalize(word)
    remaining = Counter(normalize(root))

    for letter in word:
        if remaining[letter] > 0:
            remaining[letter] -= 1  # consume one instance
        else:
            return False

    return True
