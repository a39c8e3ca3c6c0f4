"""
Token helpers for comment-line scanning.

Small pure functions over a single string. They never touch files or
module state.
"""

from typing import List, Optional


def starts_with(line: str, prefix: str) -> bool:
    """Check if a line starts with a prefix."""
    return line.startswith(prefix)


def ends_with(line: str, suffix: str) -> bool:
    """Check if a line ends with a suffix."""
    return line.endswith(suffix)


def split(line: str, separator: Optional[str] = None) -> List[str]:
    """
    Split a line by a separator.

    With no separator the line is split on runs of whitespace and empty
    words are dropped.
    """
    return line.split(separator)


def trim(line: str) -> str:
    """Trim surrounding whitespace."""
    return line.strip()


def remove(line: str, substring: str) -> str:
    """Remove every occurrence of substring."""
    return line.replace(substring, "")


def replace_all(line: str, old: str, new: str) -> str:
    """Replace every occurrence of old with new."""
    return line.replace(old, new)


def remove_prefix(line: str, prefix: str) -> str:
    """Remove prefix once if the line starts with it."""
    if line.startswith(prefix):
        return line[len(prefix):]
    return line


def is_wrapped(word: str, opening: str, closing: str) -> bool:
    """Check if a word is enclosed by the given delimiters."""
    return len(word) >= len(opening) + len(closing) and starts_with(word, opening) and ends_with(word, closing)


def unwrap(word: str, opening: str, closing: str) -> str:
    """Strip one pair of enclosing delimiters from a word."""
    return word[len(opening):len(word) - len(closing)]
