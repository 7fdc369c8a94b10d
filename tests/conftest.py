import pytest

from wordscramble.datasets import WordListDictionary
from wordscramble.engine import Session

WORDS = ["silk", "worm", "milk", "work", "ski", "skim", "slim", "owl", "row",
         "silkworm", "silkworms", "pepper", "proper"]


@pytest.fixture
def dictionary():
    return WordListDictionary(WORDS)


@pytest.fixture
def session(dictionary):
    s = Session(dictionary, language="en", fallback_root="silkworm")
    s.restart("silkworm")
    return s
