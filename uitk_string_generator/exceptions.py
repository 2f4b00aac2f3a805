"""
Custom exception hierarchy for the UI Toolkit string generator.

Every error carries a machine readable code, the context it was raised in and
a short list of things the user can try next.
"""

from typing import Dict, Any, Optional, List


class StringGeneratorError(Exception):
    """
    Base exception for all string generator errors.

    Provides rich context and error recovery guidance.
    """

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
        error_code: Optional[str] = None
    ):
        """
        Initialize the exception with context and recovery suggestions.

        Args:
            message: Human-readable error message
            context: Additional context about where/why the error occurred
            suggestions: List of potential solutions or next steps
            error_code: Unique error code for programmatic handling
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}
        self.suggestions = suggestions or []
        self.error_code = error_code

    def __str__(self) -> str:
        """Return formatted error message with context."""
        lines = [super().__str__()]

        if self.error_code:
            lines.append(f"Error Code: {self.error_code}")

        if self.context:
            lines.append("Context:")
            for key, value in self.context.items():
                lines.append(f"  {key}: {value}")

        if self.suggestions:
            lines.append("Suggestions:")
            for suggestion in self.suggestions:
                lines.append(f"  • {suggestion}")

        return "\n".join(lines)


class ConfigurationError(StringGeneratorError):
    """Raised when configuration is invalid or missing."""

    def __init__(self, message: str, config_file: str = None, **kwargs):
        context = kwargs.get('context', {})
        if config_file:
            context['config_file'] = config_file

        suggestions = kwargs.get('suggestions', [])
        if not suggestions:
            suggestions = [
                "Check the configuration file syntax",
                "Select at least one stylesheet (.uss) or markup (.uxml) asset",
                "Use letters, digits and underscores for namespace and class names",
            ]

        super().__init__(
            message,
            context=context,
            suggestions=suggestions,
            error_code="CONFIG_ERROR"
        )


class AssetLoadError(StringGeneratorError):
    """Raised when a source asset cannot be read or parsed."""

    def __init__(self, message: str, asset_path: str = None, **kwargs):
        context = kwargs.get('context', {})
        if asset_path:
            context['asset_path'] = asset_path

        suggestions = kwargs.get('suggestions', [])
        if not suggestions:
            suggestions = [
                "Verify the asset path exists and is readable",
                "Check that UXML files are well-formed XML",
            ]

        super().__init__(
            message,
            context=context,
            suggestions=suggestions,
            error_code="ASSET_LOAD_ERROR"
        )


class GeneratedFileWriteError(StringGeneratorError):
    """Raised when the output directory or the generated file cannot be written."""

    def __init__(self, message: str, output_path: str = None, **kwargs):
        context = kwargs.get('context', {})
        if output_path:
            context['output_path'] = output_path

        suggestions = kwargs.get('suggestions', [])
        if not suggestions:
            suggestions = [
                "Check write permissions on the output directory",
                "Verify the output path is valid on this platform",
            ]

        super().__init__(
            message,
            context=context,
            suggestions=suggestions,
            error_code="FILE_WRITE_ERROR"
        )


# Convenience functions for common error patterns
def raise_configuration_error(message: str, config_file: str = None, **kwargs):
    """Convenience function to raise configuration errors."""
    raise ConfigurationError(message, config_file=config_file, **kwargs)
