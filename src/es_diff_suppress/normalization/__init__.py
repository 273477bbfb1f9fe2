"""Normalization exports."""

from .default_sets import TEMPLATE_DEFAULT_SET, DefaultSet
from .dotted_key_flattening import flatten_dotted_keys

__all__ = [
    "DefaultSet",
    "TEMPLATE_DEFAULT_SET",
    "flatten_dotted_keys",
]
