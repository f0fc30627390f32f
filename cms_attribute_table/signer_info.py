from typing import Optional

from asn1crypto import cms, core

from cms_attribute_table.attribute_table import AttributeTable
from cms_attribute_table.options import DecodeOptions


def _table_for(
    signer_info: cms.SignerInfo, field_name: str, options: Optional[DecodeOptions]
) -> AttributeTable:
    attributes = signer_info[field_name]
    # Absent optional fields come back from asn1crypto as Void.
    if isinstance(attributes, core.Void):
        return AttributeTable()

    return AttributeTable.from_attributes(attributes, options)


def signed_attributes(
    signer_info: cms.SignerInfo, options: Optional[DecodeOptions] = None
) -> AttributeTable:
    return _table_for(signer_info, 'signed_attrs', options)


def unsigned_attributes(
    signer_info: cms.SignerInfo, options: Optional[DecodeOptions] = None
) -> AttributeTable:
    return _table_for(signer_info, 'unsigned_attrs', options)
