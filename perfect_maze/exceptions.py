"""
Exception classes for perfect_maze with actionable error messages.

The generator has exactly one caller-facing failure mode: malformed grid
dimensions. It is reported through ``InvalidDimensions`` before any
generation work starts.
"""

from __future__ import annotations

from typing import Any


class MazeError(Exception):
    """
    Base exception for maze generation errors.

    Provides structured error information including:
    - Clear error description
    - Suggested action for resolution
    - Optional error code and diagnostic data
    """

    def __init__(
        self,
        message: str,
        suggested_action: str | None = None,
        error_code: str | None = None,
        diagnostic_data: dict[str, Any] | None = None,
    ):
        self.message = message
        self.suggested_action = suggested_action
        self.error_code = error_code
        self.diagnostic_data = diagnostic_data or {}

        full_message = message

        if self.suggested_action:
            full_message += f"\nSuggestion: {self.suggested_action}"

        if self.error_code:
            full_message += f"\nError Code: {self.error_code}"

        if self.diagnostic_data:
            full_message += "\nDiagnostic Information:"
            for key, value in self.diagnostic_data.items():
                full_message += f"\n   - {key}: {value}"

        super().__init__(full_message)


class InvalidDimensions(MazeError, ValueError):
    """Raised when maze width or height is not a positive odd integer."""

    def __init__(self, width: Any, height: Any):
        self.width = width
        self.height = height

        diagnostic_data = {
            "width": str(width),
            "height": str(height),
        }

        super().__init__(
            message=f"Maze dimensions must be positive odd integers, got {width}x{height}",
            suggested_action=_suggest_dimensions(width, height),
            error_code="INVALID_DIMENSIONS",
            diagnostic_data=diagnostic_data,
        )


def _nearest_odd(value: Any) -> int | None:
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    if value < 1:
        return 1
    return value if value % 2 == 1 else value + 1


def _suggest_dimensions(width: Any, height: Any) -> str:
    odd_width = _nearest_odd(width)
    odd_height = _nearest_odd(height)
    if odd_width is None or odd_height is None:
        return "Pass integer dimensions such as width=21, height=21"
    return f"Use odd dimensions, e.g. width={odd_width}, height={odd_height}"
