"""Errors raised while shaping pivot results."""

from __future__ import annotations


class ShapeError(Exception):
    """Raised when a pivot or one of its events cannot be shaped."""

    def __init__(self, message: str, code: str = "SHAPE_ERROR"):
        super().__init__(message)
        self.code = code
