from enum import Enum

import pytest

from handheld_thumbnailer.exceptions import InvalidFieldException, MagicException, IOFailureException
from handheld_thumbnailer.fields import StructField, StringField, ArrayField, MediaUnitField
from handheld_thumbnailer.meta import Endianess
from handheld_thumbnailer.streams import Stream


def test_structfield_unpack():
    """Check that "value" and "raw" are the integer and bytes representation of the field."""
    field = StructField('I')

    assert field.size == 4
    assert field.value == 0

    field.unpack(Stream(b'\x01\x02\x03\x04'))

    assert field.value == 0x04030201
    assert field.raw == b'\x01\x02\x03\x04'
    assert field.offset == 0


def test_structfield_big_endian():
    field = StructField('H', endianess=Endianess.BIG_ENDIAN)

    field.unpack(Stream(b'\xca\xfe'))

    assert field.value == 0xcafe


def test_structfield_enum():
    class DummyEnum(Enum):
        NONE = 0
        FIRST = 1
        SECOND = 2

    field = StructField('I', enum=DummyEnum, default=DummyEnum.NONE, name='dummy')

    assert field.value == DummyEnum.NONE

    field.unpack(Stream(b'\x02\x00\x00\x00'))
    assert field.value == DummyEnum.SECOND

    with pytest.raises(InvalidFieldException) as cm:
        field.unpack(Stream(b'\x04\x00\x00\x00'))

    assert cm.value.field == 'dummy'
    assert cm.value.value == 4


def test_structfield_short_data():
    field = StructField('Q')

    with pytest.raises(IOFailureException):
        field.unpack(Stream(b'\x00' * 7))


def test_media_unit_field():
    field = MediaUnitField()

    field.unpack(Stream(b'\x0a\x00\x00\x00'))

    assert field.units == 10
    assert field.value == 5120


def test_stringfield():
    field = StringField(0x10)

    assert field.size == 0x10
    assert field.value == b'\x00' * field.size

    data = bytes(range(0x10))
    field.unpack(Stream(data + b'\xff'))

    assert field.value == data
    assert field.raw == data


def test_stringfield_needs_a_length():
    with pytest.raises(ValueError):
        StringField()

    assert StringField(default=b'kebab').size == 5


def test_stringfield_magic():
    field = StringField(4, default=b'SMDH', is_magic=True)

    field.unpack(Stream(b'SMDH'))
    assert field.value == b'SMDH'

    with pytest.raises(MagicException) as cm:
        field.unpack(Stream(b'XMDH'))

    assert cm.value.expected == b'SMDH'
    assert cm.value.found == b'XMDH'


def test_arrayfield():
    length = 10
    array = ArrayField(StructField('I'), n=length)

    assert array.size == 4 * length
    assert len(array) == 0

    array.unpack(Stream(b''.join(_.to_bytes(4, 'little') for _ in range(length))))

    assert len(array) == length
    # check that the elements are not duplicated
    assert array[0] is not array[1]

    # check the offsets make sense
    assert array[0].offset == 0
    assert array[1].offset == 4
    assert array[9].offset == 36

    assert [_.value for _ in array] == list(range(length))


def test_arrayfield_wrong_n():
    with pytest.raises(ValueError):
        ArrayField(StructField('I'), n=-1)
