"""
Centralized constants for the UI Toolkit string generator.

Default configuration values, naming suffixes and the fixed strings used by
the emitted C# source live here so that the generator, the configuration
schema and the CLI agree on them.
"""

from typing import FrozenSet


# =============================================================================
# CORE CONFIGURATION
# =============================================================================

class DefaultConfig:
    """Default configuration values."""

    NAMESPACE = "UIToolKitStrings"
    OUTPUT_DIR = "Assets/UI Toolkit/StringLibrary/"
    MAX_IDENTIFIER_LENGTH = 20
    FILE_EXTENSION = ".cs"


# =============================================================================
# NAMING
# =============================================================================

class ClassNaming:
    """Suffixes used to derive generated class names from asset names."""

    STYLESHEET_MARKER = "SS"
    STYLESHEET_SUFFIX = "Classes"
    MARKUP_SUFFIX = "Strings"


class IdentifierRules:
    """Character classes used while building constant identifiers."""

    WORD_SEPARATOR = "_"
    VOWELS: FrozenSet[str] = frozenset("AEIOUaeiou")
    DIGIT_GUARD_PREFIX = "_"
    NAMESPACE_SEPARATOR = "."


# =============================================================================
# EXTRACTION
# =============================================================================

class MarkupTags:
    """UXML element names that are declarations rather than visual elements."""

    NAME_ATTRIBUTE = "name"
    NON_VISUAL: FrozenSet[str] = frozenset({"Template", "Style"})


# =============================================================================
# EMISSION
# =============================================================================

class Emission:
    """Fixed strings of the generated source file."""

    TEMPLATE_NAME = "static_class.cs.j2"
    PROVENANCE_COMMENT = "// This file was generated by uitk-string-generator. Do not edit."
    ENCODING = "utf-8"
