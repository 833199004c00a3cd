'''
# Nintendo 3DS icons

The icon of a 3DS title lives in an SMDH, that can be a file on its own or
can be embedded into other formats:

 - 3DSX (homebrew executables): the extended header is optional, so not every
   3DSX has an icon
 - CIA (installable archives): the SMDH is in the meta section, that is
   located after a bunch of sections whose size can vary; the meta section
   itself is optional
 - CCI (cartridge images): the first partition is the executable content, a CXI
 - CXI: the ExeFS contains a file named "icon" that is the SMDH; only
   not encrypted CXIs are supported

Each function below takes a seekable stream positioned at the start of its
format, reads what it needs and hands the stream to the next one, ending with
from_smdh() that returns the large icon as a 48x48 RGBA PIL image.
'''
import logging

from PIL import Image

from ..streams import Stream
from ..fields import ArrayField
from ..images.tiles import icon_from_bytes, ICON_DATA_SIZE
from ..exceptions import (
    ResourceNotFoundException,
    UnsupportedFeatureException,
)
from .enum import CIAMetaSize
from .structures import (
    SMDHHeader,
    N3DSXHeader,
    N3DSXExtendedHeader,
    CIAHeader,
    NCSDHeader,
    CCIPartition,
    NCCHHeader,
    NCCHRegion,
    ExeFSFileHeader,
)


logger = logging.getLogger(__name__)

SMDH_LARGE_ICON_OFFSET = 0x24C0

N3DSX_HEADER_SIZE = 0x20  # without the extended header
N3DSX_EXTENDED_HEADER_OFFSET = 0x20

CIA_HEADER_SIZES_OFFSET = 0x08
CIA_HEADER_SIZE = 0x2020
CIA_ALIGNMENT = 0x40
CIA_META_SMDH_OFFSET = 0x400

NCSD_HEADER_OFFSET = 0x100
NCSD_PARTITION_TABLE_OFFSET = 0x120
NCSD_PARTITIONS = 8

NCCH_SIGNATURE_SIZE = 0x100
NCCH_FLAGS_END = 0x190
NCCH_EXEFS_REGION_OFFSET = 0x1A0
NCCH_EXEFS_REGION_END = 0x1A8

EXEFS_FILE_HEADERS = 10
EXEFS_HEADER_SIZE = 0x200
EXEFS_ICON_NAME = 'icon'


def align(value, alignment):
    '''Round up value to the next multiple of alignment'''
    return -(-value // alignment) * alignment


def _as_stream(file_data):
    return file_data if isinstance(file_data, Stream) else Stream(file_data)


def from_smdh(file_data) -> Image.Image:
    stream = _as_stream(file_data)

    header = SMDHHeader(stream)

    stream.skip(SMDH_LARGE_ICON_OFFSET - header.size)
    logger.debug('reading large icon at 0x%x' % stream.tell())

    return icon_from_bytes(stream.read_exact(ICON_DATA_SIZE))


def from_n3dsx(file_data) -> Image.Image:
    stream = _as_stream(file_data)

    header = N3DSXHeader(stream)
    header_size = header.header_size.value
    if header_size <= N3DSX_HEADER_SIZE:
        raise UnsupportedFeatureException('3DSX without extended header', header_size)

    stream.seek(N3DSX_EXTENDED_HEADER_OFFSET)
    extended_header = N3DSXExtendedHeader(stream)

    logger.debug('SMDH at 0x%x (%d bytes)' % (
        extended_header.smdh_offset.value, extended_header.smdh_size.value))

    stream.seek(extended_header.smdh_offset.value)
    return from_smdh(stream)


def get_cia_meta_offset(header: CIAHeader) -> int:
    '''The meta section comes after the header and the certificate chain, ticket,
    TMD and content sections, all of them aligned to 64 bytes.'''
    sections_offset = sum(align(_, CIA_ALIGNMENT) for _ in (
        header.certificate_chain_size.value,
        header.ticket_size.value,
        header.tmd_size.value,
        header.content_size.value,
    ))

    return align(CIA_HEADER_SIZE, CIA_ALIGNMENT) + sections_offset


def from_cia(file_data) -> Image.Image:
    stream = _as_stream(file_data)

    stream.seek(CIA_HEADER_SIZES_OFFSET)
    header = CIAHeader(stream)

    meta_size = header.meta_size.value
    if meta_size != CIAMetaSize.PRESENT:
        raise UnsupportedFeatureException('CIA meta section', meta_size)

    stream.seek(get_cia_meta_offset(header))
    logger.debug('meta section at 0x%x' % stream.tell())

    return from_cia_meta(stream)


def from_cia_meta(file_data) -> Image.Image:
    '''The meta section starts with the dependency list, the core version
    and some reserved space, then the SMDH.'''
    stream = _as_stream(file_data)

    stream.skip(CIA_META_SMDH_OFFSET)
    return from_smdh(stream)


def from_cci(file_data) -> Image.Image:
    stream = _as_stream(file_data)

    stream.seek(NCSD_HEADER_OFFSET)
    NCSDHeader(stream)

    stream.seek(NCSD_PARTITION_TABLE_OFFSET)
    partitions = ArrayField(CCIPartition(), n=NCSD_PARTITIONS, name='partitions')
    partitions.unpack(stream)

    if len(partitions) == 0:
        raise ResourceNotFoundException('executable content partition')

    # the first partition is the executable content
    partition = partitions[0]
    logger.debug('executable content partition at 0x%x (%d bytes)' % (
        partition.partition_offset.value, partition.partition_size.value))

    stream.seek(partition.partition_offset.value)
    return from_cxi(stream)


def from_cxi(file_data) -> Image.Image:
    stream = _as_stream(file_data)

    stream.skip(NCCH_SIGNATURE_SIZE)
    header = NCCHHeader(stream)

    logger.debug('NCCH product code %r' % header.product_code.value.rstrip(b'\x00'))

    if not header.flags.is_no_crypto:
        raise UnsupportedFeatureException('encrypted NCCH content')

    stream.skip(NCCH_EXEFS_REGION_OFFSET - NCCH_FLAGS_END)
    exefs = NCCHRegion(stream)

    logger.debug('ExeFS at +0x%x (%d bytes)' % (exefs.region_offset.value, exefs.region_size.value))

    stream.skip(exefs.region_offset.value - NCCH_EXEFS_REGION_END)
    return from_exefs(stream)


def from_exefs(file_data) -> Image.Image:
    stream = _as_stream(file_data)

    file_headers = ArrayField(ExeFSFileHeader(), n=EXEFS_FILE_HEADERS, name='file_headers')
    file_headers.unpack(stream)

    files = {}
    for file_header in file_headers:
        if file_header.is_empty():
            continue

        name = file_header.get_name()
        logger.debug('ExeFS file \'%s\' at +0x%x (%d bytes)' % (
            name, file_header.file_offset.value, file_header.file_size.value))
        files.setdefault(name, file_header)

    icon = files.get(EXEFS_ICON_NAME)
    if icon is None:
        raise ResourceNotFoundException('ExeFS \'%s\' file' % EXEFS_ICON_NAME)

    # the file data starts after the header, we have already read the file headers
    stream.skip(EXEFS_HEADER_SIZE + icon.file_offset.value - file_headers.size)
    return from_smdh(stream)
