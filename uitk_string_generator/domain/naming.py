"""
Naming convention utilities for the UI Toolkit string generator.

This module turns raw UI names (element names, USS class names) into
UPPER_SNAKE_CASE constant identifiers, shortens identifiers that exceed the
configured length and sanitizes free text typed by the user for namespaces
and class names.
"""

import re

from ..constants import IdentifierRules


# An uppercase letter with its lowercase tail, a lowercase run, or a digit run.
_WORD_PATTERN = re.compile(r"[A-Z][a-z]*|[a-z]+|\d+")


def normalize_to_const_name(raw: str) -> str:
    """
    Convert an arbitrary string into an UPPER_SNAKE_CASE constant name.

    Words are split on case changes and digit runs; any other character is a
    separator and is dropped.

    Args:
        raw: The raw name harvested from a stylesheet or markup file

    Returns:
        The constant name, or an empty string when ``raw`` holds no letters
        or digits

    Example:
        >>> normalize_to_const_name("myButton-02")
        'MY_BUTTON_02'
        >>> normalize_to_const_name("btn-primary")
        'BTN_PRIMARY'
    """
    if not isinstance(raw, str):
        raise TypeError(f"Expected string, got {type(raw).__name__}")

    words = _WORD_PATTERN.findall(raw)
    return IdentifierRules.WORD_SEPARATOR.join(word.upper() for word in words)


def _strip_vowels(word: str) -> str:
    """Drop every vowel except the word's first character."""
    if not word:
        return word
    return word[0] + "".join(ch for ch in word[1:] if ch not in IdentifierRules.VOWELS)


def abbreviate(name: str, max_length: int) -> str:
    """
    Shorten ``name`` to at most ``max_length`` characters.

    Names that already fit are returned unchanged. Longer names are shortened
    in stages, stopping at the first one that fits:

    1. drop the non-leading vowels of every word (``LOGIN_BUTTON`` -> ``LGN_BTTN``)
    2. also drop the word separators (``LGNBTTN``)
    3. truncate the stage 1 form and trim trailing separators

    Args:
        name: Identifier made of letters, digits and underscores
        max_length: Maximum length of the result, at least 1

    Returns:
        A deterministic identifier no longer than ``max_length``; non-empty
        whenever ``name`` contains a letter or digit

    Raises:
        ValueError: If ``max_length`` is smaller than 1
    """
    if max_length < 1:
        raise ValueError(f"max_length must be at least 1, got {max_length}")
    if len(name) <= max_length:
        return name

    separator = IdentifierRules.WORD_SEPARATOR
    words = name.split(separator)

    stripped = separator.join(_strip_vowels(word) for word in words)
    if len(stripped) <= max_length:
        return stripped

    compact = stripped.replace(separator, "")
    if len(compact) <= max_length:
        return compact

    truncated = stripped[:max_length].rstrip(separator)
    return truncated or compact[:max_length] or name[:max_length]


def sanitize_free_text(raw: str, allow_periods: bool = False) -> str:
    """
    Reduce user supplied text to letters, decimal digits, underscores and optionally periods.

    Leading digits are dropped so the result can start a C# identifier. With
    ``allow_periods`` the text is treated as a dotted namespace: each segment
    is sanitized on its own and segments left empty are dropped, so leading,
    trailing and doubled periods disappear.

    Example:
        >>> sanitize_free_text("12.My Game..1UI.", allow_periods=True)
        'MyGame.UI'
        >>> sanitize_free_text("Main Menu-SS")
        'MainMenuSS'
    """
    if not raw:
        return ""

    if allow_periods:
        separator = IdentifierRules.NAMESPACE_SEPARATOR
        segments = (sanitize_free_text(segment) for segment in raw.split(separator))
        return separator.join(segment for segment in segments if segment)

    kept = []
    for ch in raw:
        if not (ch.isalpha() or ch.isdecimal() or ch == "_"):
            continue
        if not kept and ch.isdecimal():
            continue
        kept.append(ch)

    return "".join(kept)


def make_identifier(raw: str, max_length: int) -> str:
    """
    Build the candidate constant identifier for one raw name.

    Normalizes, abbreviates and prefixes an underscore when the result would
    start with a digit. The underscore counts toward ``max_length`` except
    when ``max_length`` is 1. Returns an empty string when the raw name
    yields no words.
    """
    name = normalize_to_const_name(raw)
    if name and name[0].isdigit():
        budget = max_length - len(IdentifierRules.DIGIT_GUARD_PREFIX) if max_length > 1 else max_length
        return IdentifierRules.DIGIT_GUARD_PREFIX + abbreviate(name, budget)
    return abbreviate(name, max_length)


def is_valid_identifier(name: str) -> bool:
    """Check that ``name`` is a non-empty C# identifier made of word characters."""
    if not name:
        return False
    return re.fullmatch(r"[A-Za-z_][A-Za-z0-9_]*", name) is not None
