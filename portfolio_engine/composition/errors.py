"""Exceptions raised for structural caller errors.

Sparse or malformed ``extracted_data`` never raises; only preconditions the
caller controls (category names, content counts, wire payload shape) do.
"""

from __future__ import annotations

import typing as typ


class PortfolioEngineError(Exception):
    """Base exception with a stable machine-readable error code."""

    error_code: typ.ClassVar[str] = "portfolio_engine_error"

    code: str

    def __init__(self, message: str, *, code: str | None = None) -> None:
        super().__init__(message)
        self.code = code if code is not None else type(self).error_code


class InvalidCategoryError(PortfolioEngineError):
    """Raised when a category name is not one of the eight known values."""

    error_code: typ.ClassVar[str] = "invalid_category"

    value: object

    def __init__(self, value: object) -> None:
        super().__init__(f"Unknown category: {value!r}.")
        self.value = value


class InsufficientContentError(PortfolioEngineError):
    """Raised when fewer content items are supplied than a caller requires."""

    error_code: typ.ClassVar[str] = "insufficient_content"

    required: int
    available: int

    def __init__(self, *, required: int, available: int) -> None:
        super().__init__(
            f"At least {required} content item(s) required; got {available}.",
        )
        self.required = required
        self.available = available


class InvalidContentError(PortfolioEngineError):
    """Raised when a wire payload cannot be read as normalized content."""

    error_code: typ.ClassVar[str] = "invalid_content"

    field: str | None

    def __init__(self, message: str, *, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


__all__ = [
    "InsufficientContentError",
    "InvalidCategoryError",
    "InvalidContentError",
    "PortfolioEngineError",
]
