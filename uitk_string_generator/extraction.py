"""
Name extraction from USS stylesheets and parsed UXML trees.

Both extractors return names in document order, duplicates and all; callers
apply ``domain.distinct`` before turning them into identifiers.
"""

import logging
import re
from typing import Iterator, List
from xml.etree.ElementTree import Element

from .constants import MarkupTags


logger = logging.getLogger(__name__)

# `.name {` or `#name {`, whitespace allowed before the brace
SELECTOR_PATTERN = re.compile(r"[#.]([a-zA-Z0-9_-]+)\s*\{")


def extract_style_class_names(stylesheet_text: str) -> List[str]:
    """
    Collect the class/id names of every selector directly followed by a rule block.

    Example:
        >>> extract_style_class_names(".btn-primary { color: red; } #btn-primary { color: blue; }")
        ['btn-primary', 'btn-primary']
    """
    names = [match.group(1) for match in SELECTOR_PATTERN.finditer(stylesheet_text)]
    logger.debug(f"Found {len(names)} selector names in stylesheet text")
    return names


def local_name(tag: str) -> str:
    """Strip the ``{namespace-uri}`` or ``prefix:`` part of an XML tag."""
    if "}" in tag:
        tag = tag.rsplit("}", 1)[1]
    return tag.rsplit(":", 1)[-1]


def _walk(element: Element) -> Iterator[Element]:
    """Pre-order walk that prunes Template/Style declarations."""
    if local_name(element.tag) in MarkupTags.NON_VISUAL:
        return
    yield element
    for child in element:
        yield from _walk(child)


def extract_element_names(markup_root: Element) -> List[str]:
    """
    Collect the non-empty ``name`` attributes of a UXML tree in pre-order.

    The root is visited first, then each child subtree in document order.
    """
    names = []
    for element in _walk(markup_root):
        name = element.get(MarkupTags.NAME_ATTRIBUTE)
        if name:
            names.append(name)
    logger.debug(f"Found {len(names)} named elements in markup tree")
    return names
