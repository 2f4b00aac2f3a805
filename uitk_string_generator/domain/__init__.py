"""
Domain module for the UI Toolkit string generator.

Naming rules, de-duplication and the value objects passed between the
extraction, emission and writing stages. Nothing here touches the file system.
"""

from .models import (
    GenerationTarget,
    NameValueEntry,
    GenerationRequest,
    GenerationResult,
)

from .naming import (
    normalize_to_const_name,
    abbreviate,
    sanitize_free_text,
    make_identifier,
    is_valid_identifier,
)

from .deduplication import (
    distinct,
    assign_unique,
)

__all__ = [
    # Models
    'GenerationTarget',
    'NameValueEntry',
    'GenerationRequest',
    'GenerationResult',

    # Naming
    'normalize_to_const_name',
    'abbreviate',
    'sanitize_free_text',
    'make_identifier',
    'is_valid_identifier',

    # De-duplication
    'distinct',
    'assign_unique',
]
