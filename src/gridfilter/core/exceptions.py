"""
Core Exception Hierarchy for GridFilter

Provides error classification with error codes, recovery suggestions and
context information for descriptor translation, field validation and
configuration failures. None of these errors are recovered internally;
they surface to the caller, who decides how to report them in the UI.
"""

import uuid
from enum import Enum
from typing import Dict, Any, Optional, List
from dataclasses import dataclass, field


class ErrorCode(Enum):
    """Standard error codes for different error categories."""

    # Descriptor errors (1000-1999)
    DESCRIPTOR_MALFORMED = 1001
    DESCRIPTOR_MISSING_BOUND = 1002
    DESCRIPTOR_UNKNOWN_KIND = 1003
    DESCRIPTOR_TYPE_MISMATCH = 1004
    DESCRIPTOR_INVALID_SHAPE = 1005

    # Field errors (2000-2999)
    FIELD_NOT_FOUND = 2001
    FIELD_NOT_COMPARABLE = 2002
    FIELD_NOT_NUMERIC = 2003

    # Configuration errors (3000-3999)
    CONFIG_INVALID_FORMAT = 3001
    CONFIG_INVALID_VALUE = 3002
    CONFIG_FILE_NOT_FOUND = 3003

    # Generic/unknown errors (9000-9999)
    UNKNOWN_ERROR = 9000
    INTERNAL_ERROR = 9001


@dataclass
class ErrorContext:
    """Contextual information about an error occurrence."""

    operation: str = ""
    field_name: Optional[str] = None
    descriptor_index: Optional[int] = None
    correlation_id: Optional[str] = None
    user_context: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert context to dictionary for serialization."""
        return {
            'operation': self.operation,
            'field_name': self.field_name,
            'descriptor_index': self.descriptor_index,
            'correlation_id': self.correlation_id,
            'user_context': self.user_context
        }


@dataclass
class RecoverySuggestion:
    """Structured recovery suggestion for error resolution."""

    action: str  # Brief action description
    description: str  # Detailed explanation
    priority: int = 1  # Priority order (1=highest)

    def to_dict(self) -> Dict[str, Any]:
        """Convert suggestion to dictionary."""
        return {
            'action': self.action,
            'description': self.description,
            'priority': self.priority
        }


class GridFilterError(Exception):
    """
    Base exception for all GridFilter errors.

    Carries an error code, context about where the error happened and a
    list of recovery suggestions that a UI can show next to the message.
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.UNKNOWN_ERROR,
        context: Optional[ErrorContext] = None,
        cause: Optional[Exception] = None,
        suggestions: Optional[List[RecoverySuggestion]] = None
    ):
        """
        Initialize GridFilter error.

        Args:
            message: Human-readable error description
            error_code: Standardized error code
            context: Contextual information about the error
            cause: Original exception that caused this error
            suggestions: List of recovery suggestions
        """
        super().__init__(message)

        self.message = message
        self.error_code = error_code
        self.context = context or ErrorContext()
        self.cause = cause
        self.suggestions = suggestions or []

        if not self.context.correlation_id:
            self.context.correlation_id = str(uuid.uuid4())[:8]

    def add_suggestion(self, suggestion: RecoverySuggestion) -> None:
        """Add a recovery suggestion to the error."""
        self.suggestions.append(suggestion)
        self.suggestions.sort(key=lambda s: s.priority)

    def get_user_message(self) -> str:
        """Get user-friendly error message with suggestions."""
        lines = [f"Error: {self.message}"]

        if self.error_code != ErrorCode.UNKNOWN_ERROR:
            lines.append(f"Error Code: {self.error_code.value}")

        if self.suggestions:
            lines.append("\nSuggested solutions:")
            for i, suggestion in enumerate(self.suggestions[:3], 1):
                lines.append(f"  {i}. {suggestion.action}")
                lines.append(f"     {suggestion.description}")

        return "\n".join(lines)

    def get_debug_info(self) -> Dict[str, Any]:
        """Get comprehensive debug information."""
        return {
            'error_type': self.__class__.__name__,
            'message': self.message,
            'error_code': self.error_code.value,
            'context': self.context.to_dict(),
            'cause': {
                'type': type(self.cause).__name__ if self.cause else None,
                'message': str(self.cause) if self.cause else None
            },
            'suggestions': [s.to_dict() for s in self.suggestions]
        }


class DescriptorError(GridFilterError):
    """Exception for descriptors that cannot be translated into a filter."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.DESCRIPTOR_MALFORMED,
        descriptor: Optional[Any] = None,
        index: Optional[int] = None,
        **kwargs
    ):
        context = kwargs.get('context') or ErrorContext(operation="translate_descriptor")
        if index is not None:
            context.descriptor_index = index
        if descriptor is not None:
            context.user_context['descriptor'] = descriptor

        kwargs['context'] = context
        kwargs['error_code'] = error_code

        super().__init__(message, **kwargs)


class MalformedDescriptorError(DescriptorError):
    """A descriptor is missing data or carries values of the wrong type."""

    def __init__(self, message: str, error_code: ErrorCode = ErrorCode.DESCRIPTOR_MALFORMED, **kwargs):
        super().__init__(message, error_code=error_code, **kwargs)

        if error_code == ErrorCode.DESCRIPTOR_MISSING_BOUND:
            self.add_suggestion(RecoverySuggestion(
                action="Supply both range bounds",
                description="Range descriptors need both 'value' and 'valueTo'.",
                priority=1
            ))


class UnknownDescriptorKindError(DescriptorError):
    """A tagged descriptor uses a kind other than 'equality' or 'range'."""

    def __init__(self, message: str, kind: Optional[Any] = None, **kwargs):
        super().__init__(message, error_code=ErrorCode.DESCRIPTOR_UNKNOWN_KIND, **kwargs)
        self.kind = kind
        self.context.user_context['kind'] = kind

        self.add_suggestion(RecoverySuggestion(
            action="Use a supported kind",
            description="Tagged descriptors accept kind 'equality' or 'range'; "
                        "omit the kind and pass 'values' for a set filter.",
            priority=1
        ))


class InvalidFieldError(GridFilterError):
    """Exception for filters naming a missing or incompatible field."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.FIELD_NOT_FOUND,
        field_name: Optional[str] = None,
        available_fields: Optional[List[str]] = None,
        **kwargs
    ):
        context = kwargs.get('context') or ErrorContext(operation="validate_field")
        if field_name:
            context.field_name = field_name
        if available_fields is not None:
            context.user_context['available_fields'] = available_fields

        kwargs['context'] = context
        kwargs['error_code'] = error_code

        super().__init__(message, **kwargs)
        self.field_name = field_name

        if error_code == ErrorCode.FIELD_NOT_FOUND and available_fields:
            self.add_suggestion(RecoverySuggestion(
                action="Check the field name",
                description=f"Available fields: {', '.join(available_fields)}",
                priority=1
            ))


class ConfigurationError(GridFilterError):
    """Exception for configuration-related errors."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.CONFIG_INVALID_FORMAT,
        config_key: Optional[str] = None,
        config_value: Optional[Any] = None,
        **kwargs
    ):
        context = kwargs.get('context') or ErrorContext(operation="load_config")
        if config_key:
            context.user_context['config_key'] = config_key
            context.user_context['config_value'] = config_value

        kwargs['context'] = context
        kwargs['error_code'] = error_code

        super().__init__(message, **kwargs)


# Convenience functions for creating common errors
def invalid_field_error(message: str, field: Optional[str] = None, **kwargs) -> InvalidFieldError:
    """Create an invalid field error with field context."""
    return InvalidFieldError(message, field_name=field, **kwargs)


def malformed_descriptor_error(message: str, index: Optional[int] = None, **kwargs) -> MalformedDescriptorError:
    """Create a malformed descriptor error with descriptor context."""
    return MalformedDescriptorError(message, index=index, **kwargs)


def unknown_kind_error(kind: Any, index: Optional[int] = None, **kwargs) -> UnknownDescriptorKindError:
    """Create an unknown descriptor kind error."""
    return UnknownDescriptorKindError(f"Unknown descriptor kind '{kind}'", kind=kind, index=index, **kwargs)


def config_error(message: str, key: Optional[str] = None, **kwargs) -> ConfigurationError:
    """Create a configuration error with key context."""
    return ConfigurationError(message, config_key=key, **kwargs)
