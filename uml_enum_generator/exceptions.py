"""
Custom exception hierarchy for UML Enum Generator.

This module provides an exception system with rich context and error recovery
guidance for contributors and users.
"""

from typing import Dict, Any, Optional, List


class EnumGeneratorError(Exception):
    """
    Base exception for all UML Enum Generator errors.

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


class ConfigurationError(EnumGeneratorError):
    """Raised when configuration is invalid or missing."""

    def __init__(self, message: str, config_file: str = None, **kwargs):
        context = kwargs.get('context', {})
        if config_file:
            context['config_file'] = config_file

        suggestions = kwargs.get('suggestions', [])
        if not suggestions:
            suggestions = [
                "Check the configuration file syntax",
                "Verify all required fields are present",
                "Check the documentation for configuration examples"
            ]

        super().__init__(
            message,
            context=context,
            suggestions=suggestions,
            error_code="CONFIG_ERROR"
        )


class ModelLoadError(EnumGeneratorError):
    """Raised when the structural model file cannot be read or does not match the schema."""

    def __init__(self, message: str, model_file: str = None, **kwargs):
        context = kwargs.get('context', {})
        if model_file:
            context['model_file'] = model_file

        suggestions = kwargs.get('suggestions', [])
        if not suggestions:
            suggestions = [
                "Check the model file exists and is valid YAML or JSON",
                "Verify every package, classifier and property has a name",
                "Compare the file against the model examples in the documentation"
            ]

        super().__init__(
            message,
            context=context,
            suggestions=suggestions,
            error_code="MODEL_LOAD_ERROR"
        )


class ModelIntegrityError(EnumGeneratorError):
    """Raised when a classifier cannot be turned into an enumeration."""

    def __init__(self, message: str, classifier: str = None, property_name: str = None, **kwargs):
        context = kwargs.get('context', {})
        if classifier:
            context['classifier'] = classifier
        if property_name is not None:
            context['property'] = property_name

        suggestions = kwargs.get('suggestions', [])
        if not suggestions:
            suggestions = [
                "Give the enumeration at least one property",
                "Use property names containing letters or digits",
                "Remove the enumeration stereotype if the class is not an enumeration"
            ]

        super().__init__(
            message,
            context=context,
            suggestions=suggestions,
            error_code="MODEL_INTEGRITY_ERROR"
        )
        self.classifier = classifier
        self.property_name = property_name


class CodeGenerationError(EnumGeneratorError):
    """Raised when rendering the generated code model fails."""

    def __init__(self, message: str, component: str = None, classifier: str = None, **kwargs):
        context = kwargs.get('context', {})
        if component:
            context['component'] = component  # e.g., 'renderer', 'formatter'
        if classifier:
            context['classifier'] = classifier

        suggestions = kwargs.get('suggestions', [])
        if not suggestions:
            suggestions = [
                "Check the target language is supported",
                "Verify the templates are installed with the package",
                "Try generating one classifier at a time"
            ]

        super().__init__(
            message,
            context=context,
            suggestions=suggestions,
            error_code="CODE_GENERATION_ERROR"
        )
