"""
Attr implementation for the HTML tree.
This module implements the ordered name/value pair stored on elements.
"""


class Attr:
    """
    Attribute of an Element node.

    Attributes compare by name and value, so an element's attribute list can
    be compared with the output of ``to_attrs``.
    """

    __slots__ = ("name", "value")

    def __init__(self, name: str, value: str):
        """
        Initialize a new attribute.

        Args:
            name: The attribute name, stored as given
            value: The attribute value
        """
        self.name = name
        self.value = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Attr):
            return NotImplemented
        return self.name == other.name and self.value == other.value

    def __hash__(self) -> int:
        return hash((self.name, self.value))

    def __repr__(self) -> str:
        return f"Attr(name={self.name!r}, value={self.value!r})"

    def clone(self) -> 'Attr':
        """Return a detached copy of this attribute."""
        return Attr(self.name, self.value)
