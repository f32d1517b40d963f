"""
style.
=====

Does: Aggregate text styling: attributes, the `Style` renderer and `StyledString`.
Returns: Immutable value types that build escape strings; nothing is printed.
"""

from .attributes import Attribute, Attributes
from .display import StyledString
from .style import Style

__all__ = ["Attribute", "Attributes", "Style", "StyledString"]
__docformat__ = "google"
