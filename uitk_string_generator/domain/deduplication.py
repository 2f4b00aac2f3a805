"""
Structural and collision de-duplication of harvested names.

``distinct`` removes exact duplicates from the raw names before they are
normalized; ``assign_unique`` then resolves the collisions that normalization
introduces (``my.name`` and ``My-Name`` both become ``MY_NAME``) by appending
``_1``, ``_2``... to later identifiers.
"""

import logging
from typing import Dict, Iterable, List, Tuple

from ..constants import IdentifierRules


logger = logging.getLogger(__name__)


def distinct(raw_names: Iterable[str]) -> List[str]:
    """Return the distinct values of ``raw_names`` in first-seen order."""
    return list(dict.fromkeys(raw_names))


def _is_blank(text: str) -> bool:
    return not text or not text.strip()


def assign_unique(candidates: Iterable[Tuple[str, str]]) -> Dict[str, str]:
    """
    Map each candidate identifier to its value, suffixing identifiers that are already taken.

    Candidates whose identifier is empty or whose value is empty/whitespace are
    skipped. Two candidates with the same identifier always produce two entries,
    even when their values are equal.

    Args:
        candidates: Ordered ``(identifier, value)`` pairs

    Returns:
        An insertion ordered mapping from unique identifier to value

    Example:
        >>> assign_unique([("MY_NAME", "my.name"), ("MY_NAME", "My-Name")])
        {'MY_NAME': 'my.name', 'MY_NAME_1': 'My-Name'}
    """
    assigned: Dict[str, str] = {}
    separator = IdentifierRules.WORD_SEPARATOR

    for identifier, value in candidates:
        if _is_blank(identifier) or _is_blank(value):
            logger.debug(f"Skipping blank name/value pair: {identifier!r} -> {value!r}")
            continue

        unique_identifier = identifier
        index = 1
        while unique_identifier in assigned:
            unique_identifier = f"{identifier}{separator}{index}"
            index += 1

        if unique_identifier != identifier:
            logger.debug(f"Identifier '{identifier}' already used; '{value}' becomes '{unique_identifier}'")
        assigned[unique_identifier] = value

    return assigned
