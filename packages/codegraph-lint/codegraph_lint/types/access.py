"""AccessSite - one syntactic property access.

A single node can expose several property names at once
(`const { a, b } = obj;`), so names are always a sequence.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Final


class UnknownProperty:
    """Marker for a computed key whose name is not known statically.

    Deliberately not a `str`: it can never equal a restricted name.
    """

    _instance: "UnknownProperty | None" = None

    def __new__(cls) -> "UnknownProperty":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNKNOWN_PROPERTY"


UNKNOWN_PROPERTY: Final = UnknownProperty()

PropertyName = str | UnknownProperty


@dataclass(frozen=True, slots=True)
class AccessSite:
    """Extracted (object, properties) pair for one node.

    Attributes:
        node: Anchor node for reporting (opaque to the matcher)
        object_name: Identifier name of the accessed object, None if not an identifier
        property_names: Property names in source order, UNKNOWN_PROPERTY for computed keys
    """

    node: Any
    object_name: str | None
    property_names: tuple[PropertyName, ...]

    def resolved_names(self) -> Iterator[str]:
        """Statically known property names, in source order."""
        for name in self.property_names:
            if not isinstance(name, UnknownProperty):
                yield name

    @property
    def is_queryable(self) -> bool:
        """True if this site can match anything at all."""
        if self.object_name is None:
            return False
        return any(True for _ in self.resolved_names())
