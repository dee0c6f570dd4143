"""Restriction Index - O(1) hash lookup of restricted accesses.

Compiles configured entries into three exact-match tables:
    - scoped: (object, property) -> message
    - global objects: object -> message (any property of it)
    - global properties: property -> message (on any object)

Queries are layered: scoped > global property > global object.
Only one tier answers for a given access site.
"""

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType

from codegraph_lint.logging import get_logger
from codegraph_lint.types.access import PropertyName, UnknownProperty
from codegraph_lint.types.entry import RestrictionEntry
from codegraph_lint.types.match import MatchKind, RestrictionMatch

logger = get_logger(__name__)


@dataclass(frozen=True)
class RestrictionModel:
    """Immutable lookup tables built from restriction entries.

    Usage:
        >>> model = RestrictionModel.build([RestrictionEntry(object="foo", property="bar")])
        >>> [(m.property_name, m.kind.message_id) for m in model.query("foo", ["bar"])]
        [('bar', 'restrictedObjectProperty')]
    """

    scoped: Mapping[str, Mapping[str, str | None]]
    global_objects: Mapping[str, str | None]
    global_properties: Mapping[str, str | None]

    @classmethod
    def build(cls, entries: Iterable[RestrictionEntry]) -> "RestrictionModel":
        """Compile entries into lookup tables.

        Never raises: entries are validated before they get here.
        A later entry for the same key replaces the earlier message.

        Args:
            entries: Validated restriction entries

        Returns:
            RestrictionModel
        """
        scoped: dict[str, dict[str, str | None]] = {}
        global_objects: dict[str, str | None] = {}
        global_properties: dict[str, str | None] = {}

        for entry in entries:
            if entry.object_name is None:
                global_properties[entry.property_name] = entry.message
            elif entry.property_name is None:
                global_objects[entry.object_name] = entry.message
            else:
                scoped.setdefault(entry.object_name, {})[entry.property_name] = entry.message

        logger.debug(
            "Built restriction model: %d scoped objects, %d global objects, %d global properties",
            len(scoped),
            len(global_objects),
            len(global_properties),
        )

        return cls(
            scoped=MappingProxyType({obj: MappingProxyType(props) for obj, props in scoped.items()}),
            global_objects=MappingProxyType(global_objects),
            global_properties=MappingProxyType(global_properties),
        )

    @property
    def is_empty(self) -> bool:
        return not (self.scoped or self.global_objects or self.global_properties)

    def size(self) -> int:
        """Number of distinct restrictions."""
        scoped_count = sum(len(props) for props in self.scoped.values())
        return scoped_count + len(self.global_objects) + len(self.global_properties)

    def query(self, object_name: str | None, property_names: Sequence[PropertyName]) -> tuple[RestrictionMatch, ...]:
        """Match an access of `property_names` on `object_name`.

        Unknown (computed) names are dropped before any tier runs.
        The first tier with at least one match answers for the whole site:

            1. scoped:          one match per restricted name on this object
            2. global property: one match per globally restricted name
            3. global object:   one match, reported on the first name

        Args:
            object_name: Object identifier name (None never matches)
            property_names: Property names in source order

        Returns:
            Matches in source order (empty tuple if none)
        """
        if object_name is None:
            return ()

        names = [name for name in property_names if not isinstance(name, UnknownProperty)]
        if not names:
            return ()

        scoped_properties = self.scoped.get(object_name)
        if scoped_properties is not None:
            scoped_matches = _match_names(scoped_properties, names, MatchKind.SCOPED_OBJECT_PROPERTY)
            if scoped_matches:
                return scoped_matches

        property_matches = _match_names(self.global_properties, names, MatchKind.GLOBAL_PROPERTY)
        if property_matches:
            return property_matches

        if object_name in self.global_objects:
            return (RestrictionMatch(names[0], self.global_objects[object_name], MatchKind.GLOBAL_OBJECT),)

        return ()


def _match_names(
    restricted: Mapping[str, str | None],
    names: Sequence[str],
    kind: MatchKind,
) -> tuple[RestrictionMatch, ...]:
    """Names present in `restricted`, with their messages, in input order."""
    return tuple(RestrictionMatch(name, restricted[name], kind) for name in names if name in restricted)
