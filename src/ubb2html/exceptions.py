#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the ubb2html library.

Malformed UBB markup never raises: unknown tags, unterminated tags and bad
attributes all degrade to literal output. The exceptions below cover misuse
of the library API itself.

Exception Hierarchy
-------------------
- Ubb2HtmlError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options type passed to a parser)

  - RegistrationError (invalid tag handler registration)

  - RenderError (a tag handler failed while strict_mode is enabled)

"""

from typing import Any


class Ubb2HtmlError(Exception):
    """Base exception class for all ubb2html-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(Ubb2HtmlError):
    """Exception raised for invalid input parameters or options.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidOptionsError(ValidationError):
    """Exception raised when options of an unsupported type are provided.

    ``parse`` accepts a ``ParseOptions`` instance, a mapping in the legacy
    ``{"convert_newlines": ..., "class_url": ...}`` shape, or None.

    Parameters
    ----------
    expected_type : type
        The expected options class type
    received_type : type
        The actual type that was received
    message : str, optional
        Custom error message. If not provided, generates a helpful message
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the invalid options error."""
        if message is None:
            message = (
                f"Expected options of type '{expected_type.__name__}' or a mapping "
                f"but received '{received_type.__name__}'."
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.expected_type = expected_type
        self.received_type = received_type


class RegistrationError(Ubb2HtmlError):
    """Exception raised when a tag handler cannot be registered.

    Parameters
    ----------
    tag_name : str
        The tag name that was being registered
    message : str
        Description of the problem

    """

    def __init__(self, tag_name: str, message: str, original_error: Exception | None = None):
        """Initialize the registration error."""
        super().__init__(f"Cannot register handler for [{tag_name}]: {message}", original_error=original_error)
        self.tag_name = tag_name


class RenderError(Ubb2HtmlError):
    """Exception raised when a tag handler fails and ``strict_mode`` is enabled.

    Without strict mode the failing tag is logged and rendered as literal text.

    Parameters
    ----------
    tag_name : str
        The tag whose handler failed
    original_error : Exception, optional
        The exception raised by the handler

    """

    def __init__(self, tag_name: str, original_error: Exception | None = None):
        """Initialize the render error."""
        super().__init__(f"Handler for [{tag_name}] failed: {original_error}", original_error=original_error)
        self.tag_name = tag_name


__all__ = [
    "Ubb2HtmlError",
    "ValidationError",
    "InvalidOptionsError",
    "RegistrationError",
    "RenderError",
]
