"""
Exception classes for mazeframe with helpful error messages and user guidance.

Three failure families exist:
- configuration errors (bad dimensions, unsupported algorithm/frame combination)
- structural failures (no entrance or exit cell could be placed)
- search exhaustion (a solver found no path, meaning an upstream invariant broke)
"""

from __future__ import annotations

from typing import Any


class MazeError(Exception):
    """
    Base exception for maze engine errors with context and suggestions.

    The formatted message contains:
    - Clear error description
    - Component that raised it
    - Suggested action for resolution
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
        self.component = component or "mazeframe"
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


class MazeConfigurationError(MazeError):
    """Exception raised when generation parameters are invalid."""

    def __init__(
        self,
        parameter_name: str,
        provided_value: Any,
        valid_range: tuple | None = None,
        component: str | None = None,
    ):
        diagnostic_data = {
            "parameter": parameter_name,
            "provided_value": str(provided_value),
            "provided_type": type(provided_value).__name__,
        }

        if valid_range:
            diagnostic_data["valid_range"] = f"[{valid_range[0]}, {valid_range[1]}]"

        suggested_action = _generate_configuration_suggestions(parameter_name, provided_value, valid_range)

        super().__init__(
            message=f"Invalid configuration for parameter '{parameter_name}'",
            component=component,
            suggested_action=suggested_action,
            error_code="INVALID_CONFIGURATION",
            diagnostic_data=diagnostic_data,
        )


class UnsupportedFrameError(MazeError):
    """Exception raised for an unknown frame type or algorithm/frame combination."""

    def __init__(self, frame_type: str, algorithm: str | None = None, component: str | None = None):
        diagnostic_data = {"frame_type": frame_type}
        if algorithm is not None:
            diagnostic_data["algorithm"] = algorithm

        super().__init__(
            message=f"Unsupported frame/algorithm combination: {frame_type}"
            + (f" with {algorithm}" if algorithm else ""),
            component=component,
            suggested_action="Use one of the frames square, circular, polygon, text with a listed algorithm",
            error_code="UNSUPPORTED_COMBINATION",
            diagnostic_data=diagnostic_data,
        )


class EntranceExitNotFoundError(MazeError):
    """Exception raised when no entrance or exit cell can be placed."""

    def __init__(self, missing: str, frame_type: str, component: str | None = None, **details: Any):
        diagnostic_data: dict[str, Any] = {"missing": missing, "frame_type": frame_type}
        diagnostic_data.update(details)

        if frame_type == "text":
            suggested_action = "Use a longer text or a larger row count so the glyph mask is not empty"
        elif frame_type == "polygon":
            suggested_action = "Increase rows/columns so the polygon covers at least two edge cells"
        else:
            suggested_action = "Check grid dimensions"

        super().__init__(
            message=f"No {missing} cell could be placed",
            component=component,
            suggested_action=suggested_action,
            error_code="NO_ENTRANCE_EXIT",
            diagnostic_data=diagnostic_data,
        )


class SearchExhaustedError(MazeError):
    """
    Exception raised when a solver exhausts the maze without reaching the exit.

    In a correctly generated maze this cannot happen, so it signals a broken
    connectivity invariant upstream.
    """

    def __init__(self, start: Any, goal: Any, explored: int, component: str | None = None):
        super().__init__(
            message=f"No path from {tuple(start)} to {tuple(goal)}",
            component=component,
            suggested_action="Connectivity invariant violated upstream; regenerate the maze and report the seed",
            error_code="SEARCH_EXHAUSTED",
            diagnostic_data={"cells_explored": explored},
        )


def _generate_configuration_suggestions(
    parameter_name: str,
    provided_value: Any,
    valid_range: tuple | None,
) -> str:
    """Generate specific suggestions for configuration errors."""

    suggestions = []

    if valid_range and isinstance(provided_value, (int, float)):
        if provided_value < valid_range[0]:
            suggestions.append(f"Increase {parameter_name} to at least {valid_range[0]}")
        elif provided_value > valid_range[1]:
            suggestions.append(f"Decrease {parameter_name} to at most {valid_range[1]}")

    if parameter_name in ("rows", "columns", "cols") and isinstance(provided_value, int) and provided_value <= 0:
        suggestions.append("Grid dimensions must be positive")

    return " | ".join(suggestions) if suggestions else f"Check {parameter_name} value and try again"


def validate_dimensions(rows: Any, cols: Any, component: str | None = None) -> None:
    """Validate grid dimensions, raising MazeConfigurationError on failure."""
    for name, value in (("rows", rows), ("columns", cols)):
        if isinstance(value, bool) or not isinstance(value, int) or value < 1:
            raise MazeConfigurationError(name, value, valid_range=(1, float("inf")), component=component)


def validate_percentage(value: Any, parameter_name: str, component: str | None = None) -> None:
    """Validate a 0-100 percentage parameter."""
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not 0 <= value <= 100:
        raise MazeConfigurationError(parameter_name, value, valid_range=(0, 100), component=component)
