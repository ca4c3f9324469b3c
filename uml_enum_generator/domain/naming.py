"""
Naming convention utilities for UML Enum Generator.

This module canonicalizes free-form model names into the identifier conventions of
the generated code, and builds small human-readable phrases for log output.
"""

import re
from enum import Enum
from typing import List

import inflect


# Initialize inflect engine for articles and pluralization
p = inflect.engine()

# Runs of characters that separate words
NON_WORD_PATTERN = re.compile(r"[^A-Za-z0-9]+")
# Words inside a chunk that contains lowercase letters:
# an acronym ending before a capitalized word, a (capitalized) word, or a bare acronym
WORD_PATTERN = re.compile(r"[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z0-9]+|[A-Z]+")


class NamingConvention(Enum):
    """Identifier conventions a name can be masked into."""

    UPPER_SNAKE = "upper_snake"
    LOWER_SNAKE = "lower_snake"


def split_words(text: str) -> List[str]:
    """
    Split a name into its words.

    The text is first cut at every run of non alphanumeric characters (underscores
    included). A chunk without lowercase letters is kept whole, so existing
    acronyms and already-masked names are never split further. Other chunks are cut
    before each capitalized word, keeping a leading run of capitals together.

    Args:
        text: Any identifier-like string

    Returns:
        The non-empty words, in order

    Example:
        >>> split_words("firstName")
        ['first', 'Name']
        >>> split_words("URLValue")
        ['URL', 'Value']
        >>> split_words("HTTP_STATUS")
        ['HTTP', 'STATUS']
    """
    if not isinstance(text, str):
        raise TypeError(f"Expected string, got {type(text).__name__}")

    words = []
    for chunk in NON_WORD_PATTERN.split(text.strip()):
        if not chunk:
            continue
        if not any(char.islower() for char in chunk):
            words.append(chunk)
        else:
            words.extend(WORD_PATTERN.findall(chunk))
    return words


def mask(text: str, convention: NamingConvention) -> str:
    """
    Canonicalize a name into the given naming convention.

    An empty or all-symbol input yields an empty string; callers must treat that as
    an error rather than emit it as an identifier. Masking is idempotent for every
    convention.

    Args:
        text: The name to mask
        convention: Target naming convention

    Returns:
        The masked name

    Example:
        >>> mask("firstName", NamingConvention.UPPER_SNAKE)
        'FIRST_NAME'
        >>> mask("URLValue", NamingConvention.UPPER_SNAKE)
        'URL_VALUE'
    """
    words = split_words(text)
    if convention is NamingConvention.UPPER_SNAKE:
        return "_".join(word.upper() for word in words)
    if convention is NamingConvention.LOWER_SNAKE:
        return "_".join(word.lower() for word in words)
    raise ValueError(f"Unsupported naming convention: {convention}")


def separate(text: str, separator: str) -> str:
    """Lowercase the words of a name and join them with the separator."""
    return separator.join(word.lower() for word in split_words(text))


def prefix_with_a_predicate(word: str) -> str:
    """
    Prefix a word with the indefinite article it takes.

    Example:
        >>> prefix_with_a_predicate("enumeration")
        'an enumeration'
    """
    if not word:
        return word
    return p.a(word)


def describe_count(count: int, noun: str) -> str:
    """
    Describe a number of things, pluralizing the noun when needed.

    Example:
        >>> describe_count(3, "enumeration")
        '3 enumerations'
    """
    return f"{count} {p.plural(noun, count)}"

