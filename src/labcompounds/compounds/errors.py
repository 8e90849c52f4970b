"""Exceptions raised at the edges of the package."""

__all__ = [
    "LabCompoundsError",
    "InvalidElementsError",
    "ReferenceTableError",
    "InvalidFilterError",
]


class LabCompoundsError(Exception):
    """Base class for labcompounds errors."""


class InvalidElementsError(LabCompoundsError, ValueError):
    """Caller-supplied elements could not be turned into ElementSpec values."""


class ReferenceTableError(LabCompoundsError, ValueError):
    """A reference table row is malformed."""


class InvalidFilterError(LabCompoundsError, ValueError):
    """A frame filter names an unknown column or tag value."""
