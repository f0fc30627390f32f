"""
Tests for decoding tagged values into attributes, and for building tables
from a SignerInfo.
"""

import logging

import pytest
from asn1crypto import algos, cms, core

from cms_attribute_table import (
    AttributeDecodeError,
    AttributeTable,
    DecodeOptions,
    attribute_from,
    signed_attributes,
    unsigned_attributes,
)
from cms_attribute_table.codec import attributes_from_der
from tests.attributes import (
    MESSAGE_DIGEST,
    SIGNING_TIME,
    content_type,
    digest,
    dumps,
    signing_time,
)


class TestAttributeFrom:
    def test_attribute_is_returned_as_is(self):
        attribute = digest(1)

        assert attribute_from(attribute) is attribute

    def test_der_bytes(self):
        attribute = attribute_from(digest(1).dump())

        assert isinstance(attribute, cms.CMSAttribute)
        assert attribute['type'].dotted == MESSAGE_DIGEST
        assert attribute['values'].native == [b'\x01' * 32]

    def test_der_bytearray(self):
        attribute = attribute_from(bytearray(digest(2).dump()))

        assert attribute['values'].native == [b'\x02' * 32]

    def test_signing_time_helper_builds_cms_time(self):
        attribute = signing_time()

        assert isinstance(attribute['values'][0], cms.Time)
        assert attribute['type'].dotted == SIGNING_TIME

    def test_generic_value_is_reparsed(self):
        generic = core.Any.load(signing_time().dump())

        attribute = attribute_from(generic)

        assert isinstance(attribute, cms.CMSAttribute)
        assert attribute.dump() == signing_time().dump()

    def test_wrong_asn1_type(self):
        with pytest.raises(AttributeDecodeError, match='Not a well-formed attribute'):
            attribute_from(core.Integer(5))

    def test_truncated_der(self):
        with pytest.raises(AttributeDecodeError):
            attribute_from(digest(1).dump()[:-4])

    def test_unsupported_python_type(self):
        with pytest.raises(AttributeDecodeError, match='Cannot decode an attribute from int'):
            attribute_from(42)

    def test_decode_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            attribute_from(b'\x02\x01\x05')

    def test_cause_is_kept(self):
        with pytest.raises(AttributeDecodeError) as info:
            attribute_from(core.Integer(5))

        assert info.value.__cause__ is not None

    def test_strict_rejects_trailing_data(self):
        encoded = digest(1).dump() + b'\x00\x00'

        assert attribute_from(encoded)['type'].dotted == MESSAGE_DIGEST
        with pytest.raises(AttributeDecodeError):
            attribute_from(encoded, DecodeOptions(strict=True))

    def test_rejection_is_logged(self, caplog):
        caplog.set_level(logging.DEBUG, logger='cms_attribute_table')

        with pytest.raises(AttributeDecodeError):
            attribute_from(core.Integer(5))

        assert 'Rejected tagged value' in caplog.text


class TestConstructionFailure:
    def test_bad_element_fails_the_whole_build(self):
        with pytest.raises(AttributeDecodeError):
            AttributeTable.from_vector([digest(1), core.Integer(5), content_type()])

    def test_bad_argument_fails_add(self):
        table = AttributeTable.from_vector([digest(1)])

        with pytest.raises(AttributeDecodeError):
            table.add(digest(2), b'\x02\x01\x05')
        assert table.count() == 1

    def test_load_rejects_non_set(self):
        with pytest.raises(AttributeDecodeError, match='attribute set'):
            AttributeTable.load(core.Integer(5).dump())

    def test_load_strict(self):
        encoded = AttributeTable.from_vector([digest(1)]).dump() + b'\x00\x00'

        assert AttributeTable.load(encoded).count() == 1
        with pytest.raises(AttributeDecodeError):
            attributes_from_der(encoded, DecodeOptions(strict=True))
        with pytest.raises(AttributeDecodeError):
            AttributeTable.load(encoded, DecodeOptions(strict=True))


class TestSignerInfo:
    @pytest.fixture
    def signer_info(self):
        signer_info = cms.SignerInfo(
            {
                'version': 'v3',
                'sid': cms.SignerIdentifier(
                    name='subject_key_identifier', value=b'\x01' * 20
                ),
                'digest_algorithm': algos.DigestAlgorithm({'algorithm': 'sha256'}),
                'signed_attrs': [content_type(), digest(1), signing_time()],
                'signature_algorithm': algos.SignedDigestAlgorithm(
                    {'algorithm': 'rsassa_pkcs1v15'}
                ),
                'signature': b'\x00' * 8,
            }
        )
        return cms.SignerInfo.load(signer_info.dump())

    def test_signed_attributes(self, signer_info):
        table = signed_attributes(signer_info)

        assert table.count() == 3
        assert table.get('content_type')['values'].native == ['data']
        assert dumps(table.get_all(MESSAGE_DIGEST)) == dumps([digest(1)])

    def test_absent_unsigned_attributes(self, signer_info):
        table = unsigned_attributes(signer_info)

        assert table.count() == 0
        assert table.to_mapping() == {}
