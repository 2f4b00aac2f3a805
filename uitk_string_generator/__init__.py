"""
UI Toolkit string generator.

Scans Unity UI Toolkit stylesheets (USS) and UXML documents for style class
and element names and writes C# classes that expose them as string constants.
"""

from .generator import StringClassGenerator, generate_string_classes
from .exceptions import (
    StringGeneratorError,
    ConfigurationError,
    AssetLoadError,
    GeneratedFileWriteError,
)

__version__ = "0.1.0"

__all__ = [
    'StringClassGenerator',
    'generate_string_classes',
    'StringGeneratorError',
    'ConfigurationError',
    'AssetLoadError',
    'GeneratedFileWriteError',
]
