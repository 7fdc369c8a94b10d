"""wordscramble: spell words from the letters of a root word."""

__version__ = "0.1.0"
