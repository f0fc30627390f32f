from typing import Union

from asn1crypto import cms, core

Identifier = Union[str, core.ObjectIdentifier]


# Attribute tables are keyed by the dotted form, so 'signing_time',
# '1.2.840.113549.1.9.5' and CMSAttributeType('signing_time') all name the
# same entry.
def dotted(oid: Identifier) -> str:
    if isinstance(oid, core.ObjectIdentifier):
        return oid.dotted
    if not isinstance(oid, str):
        raise TypeError(f'Expected an object identifier, got {type(oid).__name__}')
    return cms.CMSAttributeType(oid).dotted


def attribute_type(attribute: cms.CMSAttribute) -> str:
    return attribute['type'].dotted
