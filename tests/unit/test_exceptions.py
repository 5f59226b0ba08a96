#!/usr/bin/env python3
"""
Unit tests for mazegen/utils/exceptions.py

Tests the exception hierarchy:
- MazeError (base exception)
- ConfigurationError (invalid parameters)
- GridPreconditionError (grid contract violations)
- MazeGenerationError (imperfect generated maze)
- validate_dimension helper
"""

import pytest

from mazegen.utils.exceptions import (
    ConfigurationError,
    GridPreconditionError,
    MazeError,
    MazeGenerationError,
    validate_dimension,
)

# =============================================================================
# Test MazeError (Base Exception)
# =============================================================================


@pytest.mark.unit
def test_maze_error_basic():
    """Test basic MazeError creation."""
    error = MazeError("Test error message", component="TestComponent")

    assert "[TestComponent] Test error message" in str(error)
    assert error.component == "TestComponent"


@pytest.mark.unit
def test_maze_error_default_component():
    assert str(MazeError("boom")).startswith("[mazegen] boom")


@pytest.mark.unit
def test_maze_error_with_suggestion_and_code():
    error = MazeError("Error occurred", suggested_action="Try a smaller grid", error_code="ERR001")

    error_str = str(error)
    assert "Suggestion: Try a smaller grid" in error_str
    assert "Error Code: ERR001" in error_str


@pytest.mark.unit
def test_maze_error_with_diagnostics():
    error = MazeError("Diagnostic test", diagnostic_data={"cells": 12, "walls": 11})

    error_str = str(error)
    assert "Diagnostic Information" in error_str
    assert "cells: 12" in error_str
    assert "walls: 11" in error_str


# =============================================================================
# Test ConfigurationError
# =============================================================================


@pytest.mark.unit
def test_configuration_error_is_value_error():
    error = ConfigurationError(parameter_name="width", provided_value=0, valid_range=(1, None))

    assert isinstance(error, MazeError)
    assert isinstance(error, ValueError)
    assert error.parameter_name == "width"
    assert error.provided_value == 0


@pytest.mark.unit
def test_configuration_error_range_suggestion():
    error_str = str(ConfigurationError(parameter_name="height", provided_value=0, valid_range=(1, None)))

    assert "Invalid configuration for parameter 'height'" in error_str
    assert "Increase height to at least 1" in error_str
    assert "valid_range: [1, inf]" in error_str
    assert "INVALID_CONFIGURATION" in error_str


@pytest.mark.unit
def test_configuration_error_type_suggestion():
    error_str = str(ConfigurationError(parameter_name="width", provided_value="3", expected_type=int))

    assert "Convert width to int" in error_str
    assert "provided_type: str" in error_str


@pytest.mark.unit
def test_configuration_error_valid_values():
    error_str = str(ConfigurationError(parameter_name="algorithm", provided_value="x", valid_values=["a", "b"]))

    assert "Choose one of: a, b" in error_str


# =============================================================================
# Test GridPreconditionError and MazeGenerationError
# =============================================================================


@pytest.mark.unit
def test_grid_precondition_error():
    error = GridPreconditionError("remove_wall", ((0, 0), (2, 0)), (3, 1), "cells are not adjacent")

    error_str = str(error)
    assert isinstance(error, ValueError)
    assert "[MazeGrid]" in error_str
    assert "cells are not adjacent" in error_str
    assert "grid_shape: 3x1" in error_str
    assert "GRID_PRECONDITION" in error_str


@pytest.mark.unit
def test_maze_generation_error_suggests_fix():
    verification = {"is_perfect": False, "is_connected": False, "is_no_loops": True}
    error = MazeGenerationError("dfs", verification)

    assert isinstance(error, RuntimeError)
    assert "algorithm=dfs" in str(error)
    assert "unreachable cells" in str(error)
    assert error.diagnostic_data["is_connected"] is False


# =============================================================================
# Test validate_dimension
# =============================================================================


@pytest.mark.unit
@pytest.mark.parametrize("value", [1, 7, 1000])
def test_validate_dimension_accepts_positive_ints(value):
    assert validate_dimension(value, "width") == value


@pytest.mark.unit
@pytest.mark.parametrize("value", [0, -3, 2.0, "4", None, False])
def test_validate_dimension_rejects(value):
    with pytest.raises(ConfigurationError):
        validate_dimension(value, "width")
