"""Resource catalog exports."""

from .attribute_suppressors import (
    AttributeSuppressor,
    SuppressorKind,
    UnknownAttributeError,
    find_attribute_suppressor,
    list_attribute_suppressors,
    should_suppress_diff,
)

__all__ = [
    "AttributeSuppressor",
    "SuppressorKind",
    "UnknownAttributeError",
    "find_attribute_suppressor",
    "list_attribute_suppressors",
    "should_suppress_diff",
]
