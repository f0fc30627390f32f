from cms_attribute_table.attribute_table import AttributeTable
from cms_attribute_table.codec import Attribute, Attributes, attribute_from
from cms_attribute_table.errors import (
    AttributeDecodeError,
    AttributeTableError,
    InternalConsistencyError,
)
from cms_attribute_table.options import DecodeOptions
from cms_attribute_table.signer_info import signed_attributes, unsigned_attributes
from cms_attribute_table.utilities.multi_map import Multiple, Single

__all__ = [
    'Attribute',
    'AttributeDecodeError',
    'AttributeTable',
    'AttributeTableError',
    'Attributes',
    'DecodeOptions',
    'InternalConsistencyError',
    'Multiple',
    'Single',
    'attribute_from',
    'signed_attributes',
    'unsigned_attributes',
]
