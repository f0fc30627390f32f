import logging
from collections.abc import Iterable, Iterator, Mapping
from typing import Any, Optional

from asn1crypto import core

from cms_attribute_table.codec import (
    Attribute,
    Attributes,
    TaggedValue,
    attribute_from,
    attributes_from_der,
)
from cms_attribute_table.errors import AttributeDecodeError
from cms_attribute_table.options import DecodeOptions
from cms_attribute_table.utilities.multi_map import Entry, MultiMap
from cms_attribute_table.utilities.oid import Identifier, attribute_type, dotted

logger = logging.getLogger(__name__)


class AttributeTable:
    """An immutable view of the attributes of a CMS SignerInfo, keyed by
    attribute type.

    Several attributes may share a type; they are kept in the order they were
    added. ``add`` and ``remove`` never change the table they are called on,
    they return a new one.
    """

    _entries: MultiMap[str, Attribute]

    def __init__(self, mapping: Optional[Mapping[Identifier, Entry[Attribute]]] = None):
        # Copied verbatim: the caller is expected to hand over entries that are
        # already Single or Multiple, e.g. the result of to_mapping().
        self._entries = MultiMap()
        if mapping is not None:
            for oid, entry in mapping.items():
                if (key := dotted(oid)) in self._entries:
                    raise ValueError(f'Attribute type {key} is given more than once')
                self._entries[key] = entry

    @classmethod
    def from_vector(
        cls, values: Iterable[TaggedValue], options: Optional[DecodeOptions] = None
    ) -> 'AttributeTable':
        entries: MultiMap[str, Attribute] = MultiMap()
        for value in values:
            attribute = attribute_from(value, options)
            entries.add(attribute_type(attribute), attribute)

        table = cls._wrap(entries)
        logger.debug(
            'Built attribute table with %d attribute(s) across %d type(s)',
            table.count(),
            len(entries),
        )
        return table

    @classmethod
    def from_set(
        cls, set_of: core.SetOf, options: Optional[DecodeOptions] = None
    ) -> 'AttributeTable':
        return cls.from_vector(set_of, options)

    @classmethod
    def from_attributes(
        cls, attributes: Attributes, options: Optional[DecodeOptions] = None
    ) -> 'AttributeTable':
        return cls.from_set(attributes, options)

    @classmethod
    def load(cls, data: bytes, options: Optional[DecodeOptions] = None) -> 'AttributeTable':
        return cls.from_attributes(attributes_from_der(data, options), options)

    @classmethod
    def _wrap(cls, entries: MultiMap[str, Attribute]) -> 'AttributeTable':
        table = cls.__new__(cls)
        table._entries = entries
        return table

    def get(self, oid: Identifier) -> Optional[Attribute]:
        """Return the first attribute of type ``oid``, or None if there is none."""
        return self._entries.first(dotted(oid))

    def get_all(self, oid: Identifier) -> list[Attribute]:
        """Return every attribute of type ``oid`` in insertion order; empty if
        there is none."""
        return list(self._entries.values_of(dotted(oid)))

    def count(self) -> int:
        return self._entries.count()

    def to_mapping(self) -> dict[str, Entry[Attribute]]:
        return dict(self._entries)

    def to_ordered_sequence(self) -> list[Attribute]:
        return self._entries.flat_values()

    def to_generic_attributes(self) -> Attributes:
        return Attributes(self.to_ordered_sequence())

    def dump(self, force: bool = False) -> bytes:
        return self.to_generic_attributes().dump(force=force)

    def add(self, *attributes: TaggedValue) -> 'AttributeTable':
        if len(attributes) < 1:
            return self

        entries = MultiMap(self._entries)
        for value in attributes:
            attribute = attribute_from(value)
            entries.add(attribute_type(attribute), attribute)
        return self._wrap(entries)

    def add_value(self, oid: Identifier, value: Any) -> 'AttributeTable':
        key = dotted(oid)
        try:
            attribute = Attribute({'type': key, 'values': [value]})
        except (ValueError, TypeError) as e:
            raise AttributeDecodeError(
                f'Cannot build a {key} attribute from {value!r}: {e}'
            ) from e

        entries = MultiMap(self._entries)
        entries.add(attribute_type(attribute), attribute)
        return self._wrap(entries)

    def remove(self, oid: Identifier) -> 'AttributeTable':
        key = dotted(oid)
        if key not in self._entries:
            return self

        entries = MultiMap(self._entries)
        del entries[key]
        return self._wrap(entries)

    def __len__(self) -> int:
        return self.count()

    def __contains__(self, oid: Identifier) -> bool:
        return dotted(oid) in self._entries

    def __iter__(self) -> Iterator[Attribute]:
        return iter(self.to_ordered_sequence())

    def __repr__(self) -> str:
        counts = ', '.join(
            f'{oid}: {len(self._entries.values_of(oid))}' for oid in self._entries
        )
        return f'{type(self).__name__}({{{counts}}})'
