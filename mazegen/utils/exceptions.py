"""
Exception classes for mazegen with helpful error messages and user guidance.

Every exception carries the component that raised it, a suggested action,
an error code and optional diagnostic data, all folded into the message.
"""

from __future__ import annotations

from numbers import Integral
from typing import Any


class MazeError(Exception):
    """
    Base exception for maze errors with helpful context and suggestions.

    Provides structured error information including:
    - Clear error description
    - Component context information
    - Suggested actions for resolution
    - Optional diagnostic data
    """

    def __init__(
        self,
        message: str,
        component: str | None = None,
        suggested_action: str | None = None,
        error_code: str | None = None,
        diagnostic_data: dict[str, Any] | None = None,
    ):
        self.component = component or "mazegen"
        self.suggested_action = suggested_action
        self.error_code = error_code
        self.diagnostic_data = diagnostic_data or {}

        full_message = f"[{self.component}] {message}"

        if self.suggested_action:
            full_message += f"\nSuggestion: {self.suggested_action}"

        if self.error_code:
            full_message += f"\nError Code: {self.error_code}"

        if self.diagnostic_data:
            full_message += "\nDiagnostic Information:"
            for key, value in self.diagnostic_data.items():
                full_message += f"\n   - {key}: {value}"

        super().__init__(full_message)


class ConfigurationError(MazeError, ValueError):
    """Exception raised when a maze parameter is invalid."""

    def __init__(
        self,
        parameter_name: str,
        provided_value: Any,
        expected_type: type | None = None,
        valid_range: tuple | None = None,
        valid_values: list[str] | None = None,
        component: str | None = None,
    ):
        self.parameter_name = parameter_name
        self.provided_value = provided_value

        diagnostic_data = {
            "parameter": parameter_name,
            "provided_value": str(provided_value),
            "provided_type": type(provided_value).__name__,
        }

        if expected_type:
            diagnostic_data["expected_type"] = expected_type.__name__

        if valid_range:
            upper = "inf" if valid_range[1] is None else valid_range[1]
            diagnostic_data["valid_range"] = f"[{valid_range[0]}, {upper}]"

        if valid_values:
            diagnostic_data["valid_values"] = ", ".join(valid_values)

        suggested_action = _generate_configuration_suggestions(
            parameter_name, provided_value, expected_type, valid_range, valid_values
        )

        message = f"Invalid configuration for parameter '{parameter_name}'"

        super().__init__(
            message=message,
            component=component,
            suggested_action=suggested_action,
            error_code="INVALID_CONFIGURATION",
            diagnostic_data=diagnostic_data,
        )


class GridPreconditionError(MazeError, ValueError):
    """Exception raised when a grid operation is called with invalid coordinates."""

    def __init__(
        self,
        operation: str,
        coordinates: tuple,
        grid_shape: tuple[int, int],
        reason: str,
    ):
        diagnostic_data = {
            "operation": operation,
            "coordinates": str(coordinates),
            "grid_shape": f"{grid_shape[0]}x{grid_shape[1]} (width x height)",
        }

        super().__init__(
            message=f"Precondition violated in {operation}: {reason}",
            component="MazeGrid",
            suggested_action="Pass in-bounds coordinates of two grid-adjacent cells",
            error_code="GRID_PRECONDITION",
            diagnostic_data=diagnostic_data,
        )


class MazeGenerationError(MazeError, RuntimeError):
    """Exception raised when a generated maze is not a perfect maze."""

    def __init__(self, algorithm: str, verification: dict[str, Any]):
        diagnostic_data = {key: verification[key] for key in sorted(verification)}

        if not verification.get("is_connected", True):
            suggested_action = "Generator left unreachable cells: check neighbour enumeration"
        elif not verification.get("is_no_loops", True):
            suggested_action = "Generator removed too many walls: check cycle detection"
        else:
            suggested_action = None

        super().__init__(
            message=f"Generated maze is not perfect (algorithm={algorithm})",
            component="PerfectMazeGenerator",
            suggested_action=suggested_action,
            error_code="NOT_PERFECT",
            diagnostic_data=diagnostic_data,
        )


# Helper functions for generating specific suggestions


def _generate_configuration_suggestions(
    parameter_name: str,
    provided_value: Any,
    expected_type: type | None,
    valid_range: tuple | None,
    valid_values: list[str] | None,
) -> str:
    """Generate specific suggestions for configuration errors."""

    suggestions = []

    if expected_type and not isinstance(provided_value, expected_type):
        suggestions.append(f"Convert {parameter_name} to {expected_type.__name__}")

    if valid_range and isinstance(provided_value, (int, float)):
        if provided_value < valid_range[0]:
            suggestions.append(f"Increase {parameter_name} to at least {valid_range[0]}")
        elif valid_range[1] is not None and provided_value > valid_range[1]:
            suggestions.append(f"Decrease {parameter_name} to at most {valid_range[1]}")

    if valid_values:
        suggestions.append(f"Choose one of: {', '.join(valid_values)}")

    return " | ".join(suggestions) if suggestions else f"Check {parameter_name} value and try again"


# Convenience functions for common error scenarios


def validate_dimension(value: Any, parameter_name: str, component: str | None = None) -> int:
    """Validate a grid dimension (positive integer) and return it."""
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise ConfigurationError(
            parameter_name=parameter_name,
            provided_value=value,
            expected_type=int,
            component=component,
        )

    if value < 1:
        raise ConfigurationError(
            parameter_name=parameter_name,
            provided_value=value,
            valid_range=(1, None),
            component=component,
        )

    return int(value)
