from __future__ import annotations


class ChromaWheelError(Exception):
    """Base class for chromawheel errors."""


class InvalidGeometryError(ChromaWheelError, ValueError):
    """Raised for non-positive or non-finite sizes, scales or border widths."""
