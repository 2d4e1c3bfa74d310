"""Exception classes for query parameter validation.

This module defines a hierarchy of exception classes, one per way a
query can be rejected. Validators raise them; the validation pipeline
catches them and copies their details onto the response document.
"""

from __future__ import annotations

from typing import Any, ClassVar, Dict, Optional


class QueryParameterError(Exception):
    """A query parameter failed validation.

    Carries the human-readable fields that end up on the response
    document: the message, a description of what was expected and the
    value actually received (None when the parameter was absent).
    """

    kind: ClassVar[str] = "invalid_parameter"

    def __init__(
        self,
        parameter: str,
        message: str,
        expected: Optional[str] = None,
        actual: Optional[str] = None,
    ) -> None:
        """Initialize the exception.

        Args:
            parameter: Name of the offending query parameter
            message: Human-readable error message
            expected: Description of an acceptable value
            actual: Raw value received, or None if absent
        """
        super().__init__(f"[{parameter}] {message}")
        self.parameter: str = parameter
        self.message: str = message
        self.expected: Optional[str] = expected
        self.actual: Optional[str] = actual

    def as_document(self) -> Dict[str, Any]:
        """Render the error fields of a response document.

        Returns:
            Mapping with status, message, expected and actual keys
        """
        return {
            "status": "error",
            "message": self.message,
            "expected": self.expected,
            "actual": self.actual,
        }


class MissingParameterError(QueryParameterError):
    """Raised when a required parameter is absent from the query."""

    kind = "missing_parameter"

    def __init__(self, parameter: str) -> None:
        super().__init__(
            parameter,
            "Required input parameter not specified.",
            expected=parameter,
            actual=None,
        )


class EmptyValueError(QueryParameterError):
    """Raised when a parameter is present but has an empty value."""

    kind = "empty_value"

    def __init__(self, parameter: str, expected: str) -> None:
        super().__init__(
            parameter,
            f"No value provided for {parameter} input parameter.",
            expected=expected,
            actual="",
        )


class NonNumericValueError(QueryParameterError):
    """Raised when a value cannot be read as a floating point number."""

    kind = "non_numeric_value"

    def __init__(self, parameter: str, expected: str, actual: str) -> None:
        super().__init__(
            parameter,
            f"Non-numeric value provided for {parameter}.",
            expected=expected,
            actual=actual,
        )


class UnknownUnitError(QueryParameterError):
    """Raised when a unit of measure is neither Fahrenheit nor Celsius."""

    kind = "unknown_unit"

    def __init__(self, parameter: str, actual: str, expected: Optional[str] = None) -> None:
        super().__init__(
            parameter,
            "Unknown unit of measure provided.",
            expected=expected or f"One of '{parameter}=C' or '{parameter}=F'.",
            actual=actual,
        )


class OutOfRangeError(QueryParameterError):
    """Raised when a parsed value lies outside its physical limits."""

    kind = "out_of_range"


class ConflictingInputsError(QueryParameterError):
    """Raised when both relative humidity and dewpoint are supplied."""

    kind = "conflicting_inputs"
