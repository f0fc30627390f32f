import logging
from typing import Optional, Union

from asn1crypto import cms, core

from cms_attribute_table.errors import AttributeDecodeError
from cms_attribute_table.options import DEFAULT_DECODE_OPTIONS, DecodeOptions

logger = logging.getLogger(__name__)

Attribute = cms.CMSAttribute
Attributes = cms.CMSAttributes

TaggedValue = Union[core.Asn1Value, bytes, bytearray]


def attribute_from(value: TaggedValue, options: Optional[DecodeOptions] = None) -> Attribute:
    if options is None:
        options = DEFAULT_DECODE_OPTIONS

    if isinstance(value, Attribute):
        attribute = value
        encoded = None
    elif isinstance(value, core.Asn1Value):
        encoded = value.dump()
    elif isinstance(value, (bytes, bytearray)):
        encoded = bytes(value)
    else:
        raise AttributeDecodeError(f'Cannot decode an attribute from {type(value).__name__}')

    try:
        if encoded is not None:
            attribute = Attribute.load(encoded, strict=options.strict)
        # asn1crypto parses lazily; touch both fields so malformed contents
        # fail here rather than on first lookup.
        attribute['type'].dotted
        len(attribute['values'])
    except (ValueError, TypeError, KeyError) as e:
        logger.debug('Rejected tagged value %r: %s', value, e)
        raise AttributeDecodeError(f'Not a well-formed attribute: {e}') from e

    return attribute


def attributes_from_der(data: bytes, options: Optional[DecodeOptions] = None) -> Attributes:
    if options is None:
        options = DEFAULT_DECODE_OPTIONS

    try:
        attributes = Attributes.load(data, strict=options.strict)
        len(attributes)
    except (ValueError, TypeError) as e:
        logger.debug('Rejected attribute set: %s', e)
        raise AttributeDecodeError(f'Not a well-formed attribute set: {e}') from e

    return attributes
