'''
Builders of minimal synthetic files: only the fields that the parsers
look at are filled, everything else is zero.
'''
import struct

import pytest


ICON_SAMPLES = 48 * 48
SMDH_ICON_OFFSET = 0x24C0
SMDH_SIZE = 0x36C0
MEDIA_UNIT = 0x200


def align(value, alignment):
    return -(-value // alignment) * alignment


def build_smdh(color=0x0000, samples=None, magic=b'SMDH'):
    samples = samples if samples is not None else [color] * ICON_SAMPLES

    data = bytearray(SMDH_SIZE)
    data[0:4] = magic
    struct.pack_into('<%dH' % ICON_SAMPLES, data, SMDH_ICON_OFFSET, *samples)

    return bytes(data)


def build_3dsx(smdh, header_size=0x2C, smdh_offset=0x100):
    data = bytearray(smdh_offset)
    data[0:4] = b'3DSX'
    struct.pack_into('<H', data, 0x04, header_size)
    struct.pack_into('<II', data, 0x20, smdh_offset, len(smdh))

    return bytes(data) + smdh


def build_exefs(smdh, icon_slot=0, icon_offset=0, others=()):
    '''others is a list of (slot, name, offset, size)'''
    header = bytearray(0x200)
    if icon_slot is not None:
        struct.pack_into('<8sII', header, icon_slot * 0x10, b'icon', icon_offset, len(smdh))
    for slot, name, offset, size in others:
        struct.pack_into('<8sII', header, slot * 0x10, name, offset, size)

    return bytes(header) + bytes(icon_offset) + smdh


def build_ncch(exefs, exefs_units=2, no_crypto=True):
    data = bytearray(exefs_units * MEDIA_UNIT)
    data[0x100:0x104] = b'NCCH'
    data[0x150:0x15a] = b'CTR-P-TEST'
    data[0x188 + 7] = 0x04 if no_crypto else 0x00
    struct.pack_into('<II', data, 0x1A0, exefs_units, align(len(exefs), MEDIA_UNIT) // MEDIA_UNIT)

    return bytes(data) + exefs


def build_cci(ncch, partition_units=10):
    data = bytearray(partition_units * MEDIA_UNIT)
    data[0x100:0x104] = b'NCSD'
    struct.pack_into('<II', data, 0x120, partition_units, align(len(ncch), MEDIA_UNIT) // MEDIA_UNIT)

    return bytes(data) + ncch


def build_cia(smdh, certificate_chain_size=0xA00, ticket_size=0x350, tmd_size=0xB34,
              content_size=0x1234, meta_size=0x3AC0):
    header = bytearray(0x2040)
    struct.pack_into('<IHHIIIIQ', header, 0, 0x2020, 0, 0,
                     certificate_chain_size, ticket_size, tmd_size, meta_size, content_size)

    sections = sum(align(_, 0x40) for _ in (certificate_chain_size, ticket_size, tmd_size, content_size))
    meta = bytes(0x400) + smdh

    return bytes(header) + bytes(sections) + meta


@pytest.fixture
def smdh():
    return build_smdh(color=0xF800)


@pytest.fixture
def cxi(smdh):
    return build_ncch(build_exefs(smdh, icon_slot=2, icon_offset=0x400))


NDS_LOGO_START = b'\x24\xff\xae\x51\x69\x9a\xa2\x21'
NDS_ICON_SIZE = 32


def encode_nds_bitmap(indices):
    '''indices is a 32x32 grid (list of rows) of palette indices'''
    data = bytearray()
    for tile_y in range(4):
        for tile_x in range(4):
            for y in range(8):
                row = indices[tile_y * 8 + y]
                for x in range(0, 8, 2):
                    left = row[tile_x * 8 + x]
                    right = row[tile_x * 8 + x + 1]
                    data.append(left | (right << 4))

    return bytes(data)


def build_nds(indices=None, palette=None, banner_offset=0x200):
    indices = indices if indices is not None else [[1] * NDS_ICON_SIZE] * NDS_ICON_SIZE
    palette = palette if palette is not None else [0x0000, 0x001F] + [0x0000] * 14

    header = bytearray(max(banner_offset, 0x200))
    header[0xC0:0xC8] = NDS_LOGO_START
    struct.pack_into('<I', header, 0x68, banner_offset)

    banner = bytearray(0x840)
    struct.pack_into('<H', banner, 0, 1)
    banner[0x20:0x220] = encode_nds_bitmap(indices)
    struct.pack_into('<16H', banner, 0x220, *palette)

    return bytes(header[:banner_offset] if banner_offset else header) + bytes(banner)
