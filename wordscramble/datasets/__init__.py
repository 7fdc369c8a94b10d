from .validator import validate_start_words, pretty_summary
from .io import read_lines, write_lines, load_words
from .dictionary import WordListDictionary, NltkDictionary, open_dictionary
from .word_source import StaticWordSource, FileWordSource

__all__ = ["validate_start_words", "pretty_summary", "read_lines", "write_lines", "load_words",
           "WordListDictionary", "NltkDictionary", "open_dictionary",
           "StaticWordSource", "FileWordSource"]
